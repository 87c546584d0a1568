from datetime import datetime

import pandas as pd
import pytest

from core.pipeline import prepare
from records import PowerConsumption, PowerRecord


@pytest.fixture
def consumption():
    raw = pd.DataFrame(
        [
            ["2/2/2007", "00:01:00", "1.5", "0.1", "240.1", "6.2", "0", "1", "17"],
            ["1/2/2007", "00:00:00", "?", "0.2", "239.0", "6.0", "0", "0", "18"],
            ["1/2/2007", "bad", "2.0", "0.3", "238.5", "6.4", "1", "2", "?"],
        ],
        columns=["Date", "Time", "Global_active_power", "Global_reactive_power", "Voltage",
                 "Global_intensity", "Sub_metering_1", "Sub_metering_2", "Sub_metering_3"],
    )
    return prepare(raw)


def test_records_are_typed(consumption):
    first = next(consumption.records())

    assert first == PowerRecord(
        date="2/2/2007",
        time="00:01:00",
        global_active_power=1.5,
        global_reactive_power=0.1,
        voltage=240.1,
        global_intensity=6.2,
        sub_metering_1=0.0,
        sub_metering_2=1.0,
        sub_metering_3=17.0,
        datetime=datetime(2007, 2, 2, 0, 1),
    )
    assert type(first.datetime) is datetime


def test_missing_values_are_none(consumption):
    records = list(consumption.records())

    assert records[1].global_active_power is None
    assert records[2].sub_metering_3 is None
    assert records[2].datetime is None


def test_records_are_frozen(consumption):
    record = next(consumption.records())
    with pytest.raises(AttributeError):
        record.voltage = 0.0


def test_chronological_drops_unparsed_and_sorts(consumption):
    frame = consumption.chronological()

    assert frame["datetime"].tolist() == [pd.Timestamp(2007, 2, 1), pd.Timestamp(2007, 2, 2, 0, 1)]
    assert len(consumption) == 3


def test_dates_recorded():
    empty = PowerConsumption(frame=pd.DataFrame({"datetime": pd.Series([], dtype="datetime64[ns]")}))
    assert empty.dates == ("1/2/2007", "2/2/2007")
    assert len(empty) == 0
