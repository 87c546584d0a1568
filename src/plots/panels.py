from typing import Optional

import matplotlib.dates as mdates
import numpy as np
import pandas as pd
from matplotlib.axes import Axes

from records import DATETIME_COLUMN, SUB_METERING_COLUMNS

SUB_METERING_COLORS = ("black", "red", "blue")


def _format_time_axis(ax: Axes):
    # Weekday ticks at midnight (Thu, Fri, ...)
    ax.xaxis.set_major_locator(mdates.DayLocator())
    ax.xaxis.set_major_formatter(mdates.DateFormatter("%a"))


def line_panel(ax: Axes, frame: pd.DataFrame, column: str,
               xlabel: str = DATETIME_COLUMN, ylabel: Optional[str] = None, color: str = "black"):
    """Line of ``column`` against the timestamp; labels default to the column names."""
    ax.plot(frame[DATETIME_COLUMN].to_numpy(), frame[column].to_numpy(dtype=float),
            color=color, linewidth=0.6)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(column if ylabel is None else ylabel)
    _format_time_axis(ax)


def active_power_panel(ax: Axes, frame: pd.DataFrame):
    line_panel(ax, frame, "Global_active_power", xlabel="",
               ylabel="Global Active Power (kilowatts)")


def sub_metering_range(frame: pd.DataFrame):
    """(min, max) over the three sub-metering series, or None when all are missing."""
    values = frame[list(SUB_METERING_COLUMNS)].to_numpy(dtype=float)
    if not np.isfinite(values).any():
        return None
    return float(np.nanmin(values)), float(np.nanmax(values))


def sub_metering_panel(ax: Axes, frame: pd.DataFrame):
    x = frame[DATETIME_COLUMN].to_numpy()
    for column, color in zip(SUB_METERING_COLUMNS, SUB_METERING_COLORS):
        ax.plot(x, frame[column].to_numpy(dtype=float), color=color, linewidth=0.6, label=column)

    y_range = sub_metering_range(frame)
    if y_range is not None and y_range[0] < y_range[1]:
        low, high = y_range
        pad = 0.04 * (high - low)
        ax.set_ylim(low - pad, high + pad)

    ax.set_xlabel("")
    ax.set_ylabel("Energy sub metering")
    ax.legend(loc="upper right", fontsize="small")
    _format_time_axis(ax)


def voltage_panel(ax: Axes, frame: pd.DataFrame):
    line_panel(ax, frame, "Voltage")


def reactive_power_panel(ax: Axes, frame: pd.DataFrame):
    line_panel(ax, frame, "Global_reactive_power")
