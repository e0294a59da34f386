"""
Self-contained file discovery: turns directories and files into an ordered,
deduplicated list of files filtered by include and exclude globs.

No imports from `fileselect` outside this package.

Usage::

    from fileselect.file_resolver import FileResolver

    resolver = FileResolver(["data/", "extra/notes.csv"], include=["*.csv"], exclude=["tmp_*"])
    files = resolver.resolve()
"""

from fileselect.file_resolver.errors import (
    ConfigurationError,
    FileResolverError,
    SourceAccessError,
)
from fileselect.file_resolver.patterns import PatternSet, compile_pattern, matches_any
from fileselect.file_resolver.resolver import FileResolver, resolve_files
from fileselect.file_resolver.types import FileResolverConfig
from fileselect.file_resolver.walker import walk_files

__all__ = [
    "ConfigurationError",
    "FileResolver",
    "FileResolverConfig",
    "FileResolverError",
    "PatternSet",
    "SourceAccessError",
    "compile_pattern",
    "matches_any",
    "resolve_files",
    "walk_files",
]
