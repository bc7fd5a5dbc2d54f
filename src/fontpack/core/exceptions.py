"""Custom exceptions for the font package generator."""

from typing import Any


class FontPackError(Exception):
    """Base exception for all fontpack errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details

    def add_context(self, context: str, **details: Any) -> "FontPackError":
        """Prefix the message with ``context`` and merge ``details``."""
        message = self.args[0] if self.args else ""
        self.args = (f"{context}: {message}", *self.args[1:])
        if isinstance(self.details, dict):
            self.details = {**self.details, **details}
        elif self.details is None:
            self.details = details
        else:
            self.details = {"details": self.details, **details}
        return self


class ConfigurationError(FontPackError):
    """Exception raised for configuration errors."""


class FetchError(FontPackError):
    """Exception raised when a remote archive cannot be transferred."""


class OpenError(FontPackError):
    """Exception raised when an archive cannot be opened or parsed."""


class DecompressError(FontPackError):
    """Exception raised when an archive entry cannot be decompressed."""


class DirCreateError(FontPackError):
    """Exception raised when a package directory cannot be created."""


class FormatError(FontPackError):
    """Exception raised when a rendered stub is not valid Python."""


class WriteError(FontPackError):
    """Exception raised when a generated file cannot be written."""


# Specific exception classes for TRY003 compliance
class ArchiveDownloadError(FetchError):
    """Exception raised when the HTTP transfer of an archive fails."""

    def __init__(self, url: str, error: str):
        super().__init__(f"could not GET {url!r}: {error}", details={"url": url})


class ArchiveSaveError(FetchError):
    """Exception raised when a downloaded archive cannot be saved locally."""

    def __init__(self, path: str, error: str):
        super().__init__(f"could not save zip file {path!r}: {error}", details={"path": path})


class ArchiveNotFoundError(OpenError):
    """Exception raised when a local archive path does not exist."""

    def __init__(self, path: str):
        super().__init__(f"could not open archive {path!r}: no such file", details={"path": path})


class InvalidArchiveError(OpenError):
    """Exception raised when a file is not a readable ZIP archive."""

    def __init__(self, path: str, error: str):
        super().__init__(f"could not open archive {path!r}: {error}", details={"path": path})


class EntryDecompressError(DecompressError):
    """Exception raised when one archive entry fails to decompress."""

    def __init__(self, entry: str, error: str):
        super().__init__(
            f"could not decompress zip file {entry!r}: {error}", details={"entry": entry}
        )


class PackageDirError(DirCreateError):
    """Exception raised when a package directory cannot be created."""

    def __init__(self, path: str, error: str):
        super().__init__(f"could not create package dir {path!r}: {error}", details={"path": path})


class StubSyntaxError(FormatError):
    """Exception raised when a rendered stub fails to compile."""

    def __init__(self, package: str, error: str):
        super().__init__(
            f"could not format source for package {package!r}: {error}",
            details={"package": package},
        )


class StubWriteError(WriteError):
    """Exception raised when the package source file cannot be written."""

    def __init__(self, path: str, error: str):
        super().__init__(
            f"could not write package source file {path!r}: {error}", details={"path": path}
        )


class FontWriteError(WriteError):
    """Exception raised when the package font file cannot be written."""

    def __init__(self, path: str, error: str):
        super().__init__(f"could not write package TTF file {path!r}: {error}", details={"path": path})


class IdentifierCollisionError(FontPackError):
    """Exception raised when two font files map to the same package name."""

    def __init__(self, package: str, first: str, second: str):
        super().__init__(
            f"package name {package!r} derived from both {first!r} and {second!r}",
            details={"package": package, "files": [first, second]},
        )


class ConfigFileNotFoundError(ConfigurationError):
    """Exception raised when configuration file is not found."""

    def __init__(self, config_path: str):
        super().__init__(f"Configuration file not found: {config_path}")


class EmptyConfigFileError(ConfigurationError):
    """Exception raised when configuration file is empty."""

    def __init__(self, config_path: str):
        super().__init__(f"Empty configuration file: {config_path}")


class InvalidYamlError(ConfigurationError):
    """Exception raised for YAML syntax errors."""

    def __init__(self, config_path: str, error: str):
        super().__init__(f"Invalid YAML in {config_path}: {error}")


class ConfigLoadError(ConfigurationError):
    """Exception raised when a configuration file cannot be applied."""

    def __init__(self, config_path: str, error: str):
        super().__init__(f"Failed to load configuration from {config_path}: {error}")
