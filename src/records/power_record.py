import datetime as dt
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Optional, Tuple

import pandas as pd

COLUMNS = (
    "Date",
    "Time",
    "Global_active_power",
    "Global_reactive_power",
    "Voltage",
    "Global_intensity",
    "Sub_metering_1",
    "Sub_metering_2",
    "Sub_metering_3",
)
MEASUREMENT_COLUMNS = COLUMNS[2:]
SUB_METERING_COLUMNS = ("Sub_metering_1", "Sub_metering_2", "Sub_metering_3")

DEFAULT_DATES = ("1/2/2007", "2/2/2007")
DATETIME_FORMAT = "%d/%m/%Y %H:%M:%S"
DATETIME_COLUMN = "datetime"


def _optional(value: Any) -> Any:
    return None if pd.isna(value) else value


@dataclass(frozen=True)
class PowerRecord:
    """One minute of household measurements with typed, nullable fields."""
    date: Optional[str]
    time: Optional[str]
    global_active_power: Optional[float]
    global_reactive_power: Optional[float]
    voltage: Optional[float]
    global_intensity: Optional[float]
    sub_metering_1: Optional[float]
    sub_metering_2: Optional[float]
    sub_metering_3: Optional[float]
    datetime: Optional[dt.datetime] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "PowerRecord":
        stamp = _optional(row.get(DATETIME_COLUMN))
        if stamp is not None:
            stamp = pd.Timestamp(stamp).to_pydatetime()

        measurements = {}
        for col in MEASUREMENT_COLUMNS:
            value = _optional(row.get(col))
            measurements[col.lower()] = None if value is None else float(value)

        return cls(
            date=_optional(row.get("Date")),
            time=_optional(row.get("Time")),
            datetime=stamp,
            **measurements,
        )


@dataclass(frozen=True, eq=False)
class PowerConsumption:
    """Timestamped, typed measurements for the selected dates.

    Every preprocessing stage returns a new frame, so the frame held here is
    never written to after construction.
    """
    frame: pd.DataFrame
    dates: Tuple[str, ...] = field(default=DEFAULT_DATES)

    def __len__(self) -> int:
        return len(self.frame)

    def records(self) -> Iterator[PowerRecord]:
        for row in self.frame.to_dict(orient="records"):
            yield PowerRecord.from_row(row)

    def chronological(self) -> pd.DataFrame:
        """Rows with a valid timestamp, ordered by it."""
        frame = self.frame[self.frame[DATETIME_COLUMN].notna()]
        return frame.sort_values(DATETIME_COLUMN, kind="stable")
