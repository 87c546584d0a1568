import logging
import platform
import shutil
import subprocess
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

import requests

from core.exceptions import DownloadError

logger = logging.getLogger(__name__)


@runtime_checkable
class Fetcher(Protocol):
    def fetch(self, url: str, destination: Path) -> Path:
        pass


class RequestsFetcher:
    """Streams the archive over HTTP and writes it in binary mode."""

    def __init__(self, timeout: float = 60.0, chunk_size: int = 1 << 20):
        self.timeout = timeout
        self.chunk_size = chunk_size

    def fetch(self, url: str, destination: Path) -> Path:
        destination = Path(destination)
        try:
            with requests.get(url, stream=True, timeout=self.timeout) as response:
                response.raise_for_status()
                with open(destination, 'wb') as f:
                    for chunk in response.iter_content(chunk_size=self.chunk_size):
                        f.write(chunk)
        except (requests.RequestException, OSError) as e:
            raise DownloadError(f"Failed to download {url}: {e}") from e
        return destination


class CurlFetcher:
    """Delegates the download to the curl command-line tool."""

    def __init__(self, executable: str = "curl"):
        self.executable = executable

    def fetch(self, url: str, destination: Path) -> Path:
        destination = Path(destination)
        curl = shutil.which(self.executable)
        if curl is None:
            raise DownloadError(f"'{self.executable}' not found on PATH, cannot download {url}")

        # -f turns HTTP errors into a non-zero exit status
        result = subprocess.run(
            [curl, "-fsSL", "-o", str(destination), url],
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            raise DownloadError(
                f"curl exited with status {result.returncode} for {url}: {result.stderr.strip()}")
        return destination


def select_fetcher(system: Optional[str] = None) -> Fetcher:
    """Pick the download transport for the host platform."""
    system = system or platform.system()
    if system == "Windows":
        fetcher = RequestsFetcher()
    else:
        fetcher = CurlFetcher()
    logger.debug("Using %s on %s", type(fetcher).__name__, system)
    return fetcher
