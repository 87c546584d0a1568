import logging
from pathlib import Path

import pandas as pd

from loaders.base_loader import BaseDataLoader, register_loader
from records import COLUMNS, DEFAULT_DATES

logger = logging.getLogger(__name__)


@register_loader("energy_power")
class EnergyPowerDatasetLoader(BaseDataLoader):
    """Reads only the rows of the semicolon file whose Date is one of the configured dates.

    The complete file has ~2 million rows, so it is streamed in chunks and
    every chunk is filtered before the next one is read. All fields are kept
    as the raw strings found in the file.
    """

    def load(self) -> pd.DataFrame:
        file_path = Path(self.config.get('file_path', 'data/household_power_consumption.txt'))
        dates = list(self.config.get('dates', DEFAULT_DATES))
        chunksize = self.config.get('chunksize', 100_000)

        if not file_path.is_file():
            raise FileNotFoundError(f"Input file not found: {file_path}")

        reader = pd.read_csv(
            file_path,
            sep=';',
            dtype=str,
            keep_default_na=False,
            chunksize=chunksize,
        )

        chunks = []
        with reader:
            for chunk in reader:
                if 'Date' not in chunk.columns:
                    raise ValueError(f"{file_path} has no 'Date' column in its header")
                chunks.append(chunk[chunk['Date'].isin(dates)])

        if chunks:
            df = pd.concat(chunks, ignore_index=True)
        else:
            df = pd.DataFrame(columns=list(COLUMNS), dtype=object)

        logger.info("Loaded %d rows for dates %s from %s", len(df), ", ".join(dates), file_path)
        return df
