"""Shared fixtures: small semicolon-delimited files shaped like household_power_consumption.txt."""

from datetime import datetime, timedelta
from pathlib import Path

import pytest

HEADER = ("Date;Time;Global_active_power;Global_reactive_power;Voltage;"
          "Global_intensity;Sub_metering_1;Sub_metering_2;Sub_metering_3")


def make_row(stamp: datetime, minute_index: int = 0, **overrides) -> str:
    """Build one line the way the source file writes it (no zero padding on day/month)."""
    fields = {
        "Date": f"{stamp.day}/{stamp.month}/{stamp.year}",
        "Time": stamp.strftime("%H:%M:%S"),
        "Global_active_power": f"{1 + (minute_index % 60) / 100:.3f}",
        "Global_reactive_power": f"{(minute_index % 7) / 10:.3f}",
        "Voltage": f"{235 + (minute_index % 11) / 10:.2f}",
        "Global_intensity": f"{4 + (minute_index % 5) / 10:.1f}",
        "Sub_metering_1": f"{minute_index % 3:.3f}",
        "Sub_metering_2": f"{minute_index % 4:.3f}",
        "Sub_metering_3": f"{minute_index % 19:.3f}",
    }
    fields.update(overrides)
    return ";".join(fields[name] for name in HEADER.split(";"))


def minutes(start: datetime, count: int):
    return [start + timedelta(minutes=i) for i in range(count)]


def write_power_file(path: Path, rows) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join([HEADER, *rows]) + "\n")
    return path


@pytest.fixture
def power_file_factory(tmp_path):
    def factory(rows, name="household_power_consumption.txt"):
        return write_power_file(tmp_path / "data" / name, rows)
    return factory


@pytest.fixture
def two_day_file(power_file_factory):
    """Two full target days (2,880 rows) surrounded by neighbouring days.

    2007-02-01 00:05 has Global_active_power '?'.
    """
    rows = [make_row(stamp, i) for i, stamp in enumerate(minutes(datetime(2007, 1, 31, 23, 0), 60))]
    for i, stamp in enumerate(minutes(datetime(2007, 2, 1), 2 * 1440)):
        if stamp == datetime(2007, 2, 1, 0, 5):
            rows.append(make_row(stamp, i, Global_active_power="?"))
        else:
            rows.append(make_row(stamp, i))
    rows += [make_row(stamp, i) for i, stamp in enumerate(minutes(datetime(2007, 2, 3), 60))]
    return power_file_factory(rows)
