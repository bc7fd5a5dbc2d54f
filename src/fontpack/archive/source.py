"""
Archive Source
==============

Resolves a source string to an open ZIP archive. Remote sources are
downloaded into the run's temporary directory first; anything else is
treated as a local path.
"""

import logging
import time
import zipfile
from pathlib import Path

import requests
from tqdm import tqdm

from ..core.config import GeneratorConfig
from ..core.context import RunContext
from ..core.exceptions import (
    ArchiveDownloadError,
    ArchiveNotFoundError,
    ArchiveSaveError,
    InvalidArchiveError,
)

logger = logging.getLogger(__name__)

REMOTE_PREFIXES = ("http://", "https://")
ARCHIVE_FILENAME = "fonts.zip"


class DownloadProgress:
    """Progress tracker for downloads."""

    def __init__(self, total_size: int, description: str = "Downloading", enabled: bool = True):
        self.total_size = total_size
        self.downloaded = 0
        self.start_time = time.time()
        self.pbar = tqdm(
            total=total_size or None,
            unit="B",
            unit_scale=True,
            unit_divisor=1024,
            desc=description,
            disable=not enabled,
        )

    def update(self, chunk_size: int):
        """Update progress."""
        self.downloaded += chunk_size
        self.pbar.update(chunk_size)

    def close(self):
        """Close progress bar."""
        self.pbar.close()

    @property
    def is_truncated(self) -> bool:
        """Whether fewer bytes arrived than the server announced."""
        return self.total_size > 0 and self.downloaded < self.total_size

    @property
    def elapsed_time(self) -> float:
        """Get elapsed time in seconds."""
        return time.time() - self.start_time


def is_remote(src: str) -> bool:
    """Report whether ``src`` names an http(s) URL."""
    return src.startswith(REMOTE_PREFIXES)


def create_session(config: GeneratorConfig) -> requests.Session:
    """Create HTTP session with appropriate configuration."""
    session = requests.Session()
    session.verify = config.verify_ssl
    session.headers.update({"User-Agent": config.user_agent})
    return session


def fetch_archive(url: str, dest: Path, config: GeneratorConfig) -> Path:
    """
    Download the archive at ``url`` into ``dest``.

    Args:
        url: http(s) URL of the ZIP archive
        dest: Local file to create
        config: Generator configuration (timeouts, TLS, progress)

    Returns:
        The path of the saved archive

    Raises:
        FetchError: On transport failures, HTTP error statuses, short bodies,
            or when the archive cannot be written locally
    """
    logger.info(f"Fetching {url}")

    with create_session(config) as session:
        try:
            response = session.get(url, stream=True, timeout=config.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as e:
            raise ArchiveDownloadError(url, str(e)) from e

        with response:
            total_size = int(response.headers.get("content-length", 0))
            progress = DownloadProgress(total_size, dest.name, enabled=config.show_progress)
            try:
                with dest.open("wb") as f:
                    for chunk in response.iter_content(chunk_size=config.chunk_size):
                        if chunk:
                            f.write(chunk)
                            progress.update(len(chunk))
            except requests.RequestException as e:
                raise ArchiveDownloadError(url, str(e)) from e
            except OSError as e:
                raise ArchiveSaveError(str(dest), str(e)) from e
            finally:
                progress.close()

    if progress.is_truncated:
        raise ArchiveDownloadError(
            url, f"received {progress.downloaded} of {progress.total_size} bytes"
        )

    logger.info(
        f"Downloaded {progress.downloaded} of {progress.total_size or 'unknown'} bytes "
        f"in {progress.elapsed_time:.2f}s"
    )
    return dest


def open_archive(path: str | Path) -> zipfile.ZipFile:
    """Open a local ZIP archive for reading.

    Raises:
        OpenError: If the path does not exist or is not a ZIP archive
    """
    path = Path(path)
    if not path.is_file():
        raise ArchiveNotFoundError(str(path))

    try:
        return zipfile.ZipFile(path, "r")
    except (zipfile.BadZipFile, OSError) as e:
        raise InvalidArchiveError(str(path), str(e)) from e


def resolve_archive(src: str, ctx: RunContext) -> zipfile.ZipFile:
    """Return an open archive for ``src``, downloading it first if remote.

    Downloads land in ``ctx.temp_dir`` and are removed when the context
    closes; the caller owns the returned handle.
    """
    if is_remote(src):
        path = fetch_archive(src, ctx.temp_dir / ARCHIVE_FILENAME, ctx.config)
    else:
        logger.info(f"Opening local archive {src}")
        path = Path(src)
    return open_archive(path)
