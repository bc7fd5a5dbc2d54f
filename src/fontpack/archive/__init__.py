"""Archive access: source resolution and font entry iteration."""

from .entries import iter_font_entries, read_entry
from .source import fetch_archive, is_remote, open_archive, resolve_archive

__all__ = [
    "fetch_archive",
    "is_remote",
    "iter_font_entries",
    "open_archive",
    "read_entry",
    "resolve_archive",
]
