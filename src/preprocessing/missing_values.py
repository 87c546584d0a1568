import logging
from typing import Iterable

import pandas as pd

logger = logging.getLogger(__name__)

# The file marks missing measurements with '?'
NA_VALUES = ("?",)


def replace_missing(df: pd.DataFrame, na_values: Iterable[str] = NA_VALUES) -> pd.DataFrame:
    """Return a copy of ``df`` with every placeholder cell set to null.

    Cells that are not placeholders are left exactly as they were.
    """
    result = df.astype(object)
    is_missing = result.isin(list(na_values))
    n_missing = int(is_missing.to_numpy().sum())
    if n_missing:
        logger.info("Replaced %d missing-value placeholders with nulls", n_missing)
    return result.mask(is_missing)
