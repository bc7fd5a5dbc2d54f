"""Iteration over the font entries of an open ZIP archive."""

import logging
import zipfile
import zlib
from collections.abc import Iterator

from ..core.exceptions import EntryDecompressError

logger = logging.getLogger(__name__)


def iter_font_entries(archive: zipfile.ZipFile, suffix: str = ".ttf") -> Iterator[zipfile.ZipInfo]:
    """Yield the entries whose name ends with ``suffix``, in archive order.

    The match is case-sensitive: ``Foo.TTF`` is not a ``.ttf`` entry.
    """
    for info in archive.infolist():
        if info.is_dir() or not info.filename.endswith(suffix):
            continue
        yield info


def read_entry(archive: zipfile.ZipFile, info: zipfile.ZipInfo) -> bytes:
    """Decompress one entry into memory.

    Raises:
        DecompressError: On CRC mismatches, corrupt or truncated streams, encrypted
            entries or unsupported compression methods
    """
    try:
        data = archive.read(info)
    except (
        zipfile.BadZipFile,
        zlib.error,
        EOFError,
        RuntimeError,
        NotImplementedError,
        OSError,
    ) as e:
        raise EntryDecompressError(info.filename, str(e)) from e

    logger.debug(f"Decompressed {info.filename} ({len(data)} bytes)")
    return data
