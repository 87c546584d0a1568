import logging

import pandas as pd

from records import DATETIME_COLUMN, DATETIME_FORMAT

logger = logging.getLogger(__name__)


def derive_datetime(df: pd.DataFrame,
                    fmt: str = DATETIME_FORMAT,
                    column: str = DATETIME_COLUMN) -> pd.DataFrame:
    """Add ``column`` holding Date and Time parsed as one naive timestamp.

    Rows whose Date/Time do not match ``fmt`` get NaT instead of failing the run.
    """
    result = df.copy()
    combined = result['Date'].str.cat(result['Time'], sep=' ')
    result[column] = pd.to_datetime(combined, format=fmt, errors='coerce')

    n_bad = int((result[column].isna() & combined.notna()).sum())
    if n_bad:
        logger.warning("%d rows have a Date/Time that does not match %r; %s set to NaT",
                       n_bad, fmt, column)
    return result
