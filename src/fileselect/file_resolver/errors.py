"""Error types for file resolution."""

from __future__ import annotations

from pathlib import Path


class FileResolverError(Exception):
    """Base error for file resolution."""


class ConfigurationError(FileResolverError, ValueError):
    """
    A pattern or setting that can never be applied. Raised before any
    filesystem access so no walk is performed against a doomed configuration.
    """

    def __init__(self, message: str, pattern: str | None = None) -> None:
        super().__init__(message)
        self.pattern = pattern


class SourceAccessError(FileResolverError, OSError):
    """An existing directory could not be listed (permissions, I/O errors)."""

    def __init__(self, source: str, path: Path, error: OSError) -> None:
        reason = error.strerror or str(error)
        super().__init__(f"Cannot list {str(path)!r} (source {source!r}): {reason}")
        self.source = source
        self.path = path
        self.errno = error.errno
