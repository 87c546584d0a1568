import logging
from typing import Iterable

import pandas as pd

from records import MEASUREMENT_COLUMNS

logger = logging.getLogger(__name__)


def to_numeric_columns(df: pd.DataFrame, columns: Iterable[str] = MEASUREMENT_COLUMNS) -> pd.DataFrame:
    """Convert measurement columns to float; values that do not parse become NaN."""
    columns = list(columns)
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise ValueError(f"Missing measurement columns: {missing}")

    result = df.copy()
    for col in columns:
        converted = pd.to_numeric(result[col], errors='coerce').astype(float)
        n_coerced = int((converted.isna() & result[col].notna()).sum())
        if n_coerced:
            logger.warning("%d values in %s could not be parsed as numbers and were set to NaN",
                           n_coerced, col)
        result[col] = converted
    return result
