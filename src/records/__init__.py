from records.power_record import (
    COLUMNS,
    DATETIME_COLUMN,
    DATETIME_FORMAT,
    DEFAULT_DATES,
    MEASUREMENT_COLUMNS,
    SUB_METERING_COLUMNS,
    PowerConsumption,
    PowerRecord,
)
