import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import pandas as pd

from acquisition import DATASET_URL, Fetcher, ensure_dataset
from acquisition.download import ARCHIVE_NAME
from core.exceptions import ConfigError
from loaders import LOADER_REGISTRY
from preprocessing import NA_VALUES, derive_datetime, replace_missing, to_numeric_columns
from records import DATETIME_FORMAT, DEFAULT_DATES, PowerConsumption

logger = logging.getLogger(__name__)


def prepare(raw: pd.DataFrame,
            dates: Iterable[str] = DEFAULT_DATES,
            na_values: Iterable[str] = NA_VALUES,
            datetime_format: str = DATETIME_FORMAT) -> PowerConsumption:
    """Filtered raw rows -> nulls for placeholders -> floats -> datetime column."""
    df = replace_missing(raw, na_values)
    df = to_numeric_columns(df)
    df = derive_datetime(df, datetime_format)
    return PowerConsumption(frame=df, dates=tuple(dates))


def load_power_consumption(data_cfg: Dict[str, Any], fetcher: Optional[Fetcher] = None) -> PowerConsumption:
    ensure_dataset(
        data_dir=Path(data_cfg.get('data_dir', 'data')),
        url=data_cfg.get('url', DATASET_URL),
        archive_name=data_cfg.get('archive_name', ARCHIVE_NAME),
        fetcher=fetcher,
    )

    source = data_cfg.get('source', 'energy_power')
    if source not in LOADER_REGISTRY:
        raise ConfigError(f"Unknown data source: {source}")
    raw = LOADER_REGISTRY[source](data_cfg).load()

    return prepare(
        raw,
        dates=data_cfg.get('dates', DEFAULT_DATES),
        na_values=data_cfg.get('na_values', NA_VALUES),
        datetime_format=data_cfg.get('datetime_format', DATETIME_FORMAT),
    )
