import logging
import shutil
import zipfile
from pathlib import Path
from typing import Optional

from acquisition.fetchers import Fetcher, select_fetcher
from core.exceptions import ExtractionError

logger = logging.getLogger(__name__)

DATASET_URL = "https://d396qusza40orc.cloudfront.net/exdata%2Fdata%2Fhousehold_power_consumption.zip"
ARCHIVE_NAME = "household_power_consumption.zip"


def extract_zip(archive: Path, target_dir: Path) -> None:
    try:
        with zipfile.ZipFile(archive, 'r') as zip_ref:
            zip_ref.extractall(target_dir)
    except (zipfile.BadZipFile, OSError) as e:
        raise ExtractionError(f"Failed to extract {archive}: {e}") from e


def ensure_dataset(data_dir: Path = Path("data"),
                   url: str = DATASET_URL,
                   archive_name: str = ARCHIVE_NAME,
                   fetcher: Optional[Fetcher] = None) -> bool:
    """Download and unzip the dataset into ``data_dir`` unless it already exists.

    Returns True if the dataset was fetched, False if ``data_dir`` was
    already present and nothing was done.
    """
    data_dir = Path(data_dir)
    if data_dir.exists():
        logger.info("Dataset directory %s already present, skipping download", data_dir)
        return False

    data_dir.mkdir(parents=True)
    fetcher = fetcher or select_fetcher()
    archive = data_dir / archive_name

    try:
        # ~20 MB, may take a while
        logger.info("Downloading %s to %s", url, archive)
        fetcher.fetch(url, archive)

        logger.info("Extracting %s into %s", archive, data_dir)
        extract_zip(archive, data_dir)
    except BaseException:
        # a half-populated directory would be skipped on the next run
        shutil.rmtree(data_dir, ignore_errors=True)
        raise
    return True
