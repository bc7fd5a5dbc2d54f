"""Core components for font package generation."""

from .config import DEFAULT_SOURCE, GeneratorConfig
from .context import RunContext
from .exceptions import (
    ConfigurationError,
    DecompressError,
    DirCreateError,
    FetchError,
    FontPackError,
    FormatError,
    IdentifierCollisionError,
    OpenError,
    WriteError,
)

__all__ = [
    "DEFAULT_SOURCE",
    "ConfigurationError",
    "DecompressError",
    "DirCreateError",
    "FetchError",
    "FontPackError",
    "FormatError",
    "GeneratorConfig",
    "IdentifierCollisionError",
    "OpenError",
    "RunContext",
    "WriteError",
]
