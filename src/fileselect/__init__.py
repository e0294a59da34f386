"""
fileselect: resolve directories and files into an ordered, deduplicated list
of files filtered by include and exclude globs.
"""

from fileselect.file_resolver import (
    ConfigurationError,
    FileResolver,
    FileResolverConfig,
    FileResolverError,
    SourceAccessError,
    resolve_files,
)

__all__ = [
    "ConfigurationError",
    "FileResolver",
    "FileResolverConfig",
    "FileResolverError",
    "SourceAccessError",
    "resolve_files",
]
