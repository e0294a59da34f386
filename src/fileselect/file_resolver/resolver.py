"""
FileResolver: main entry point for file discovery.

Resolves a mix of directories and files into a deduplicated list of concrete
file paths, in source order, applying the include and exclude filters to every
candidate alike.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from fileselect.file_resolver.patterns import PatternSet
from fileselect.file_resolver.types import Candidate, FileResolverConfig, Pattern, Source
from fileselect.file_resolver.walker import walk_files

logger = logging.getLogger(__name__)


class FileResolver:
    """
    Turns sources (directories or files) into the ordered list of files that
    pass the include filter and do not match the exclude filter.

    The resolver holds only its configuration. Every `resolve()` call compiles
    the patterns and re-reads the filesystem, so repeated calls reflect the
    current state on disk.

    Error policy is fail-fast: a malformed pattern raises `ConfigurationError`
    before anything is read, and the first directory that cannot be listed
    raises `SourceAccessError`, aborting the call with no partial result.
    Sources that do not exist contribute nothing and are not an error.
    """

    def __init__(
        self,
        sources: Source | Sequence[Source],
        include: Pattern | Sequence[Pattern] = None,
        exclude: Pattern | Sequence[Pattern] = None,
    ) -> None:
        self.sources: list[Source] = _as_list(sources)
        self.config: FileResolverConfig = FileResolverConfig(
            include=_as_list(include), exclude=_as_list(exclude)
        )

    @classmethod
    def from_config(
        cls, sources: Source | Sequence[Source], config: FileResolverConfig
    ) -> FileResolver:
        return cls(sources, config.include, config.exclude)

    def resolve(self) -> list[Path]:
        """
        Resolve all sources into a deduplicated list of files.

        Order is source order, then lexicographic order within each directory.
        A file reachable from several sources appears once, at its first
        position. Duplicates are detected on the fully resolved path, so a
        symlink and its target count as one file. Returned paths are absolute
        but symlinks are not resolved, so `.name` is the name the file was
        found under.
        """
        include_set = PatternSet.compile(self.config.effective_include, default=True)
        exclude_set = PatternSet.compile(self.config.effective_exclude, default=False)

        seen: set[Path] = set()
        result: list[Path] = []

        for source in self.sources:
            for candidate in self._candidates(source):
                if not include_set.matches(candidate.match_path):
                    continue
                if exclude_set.matches(candidate.match_path):
                    continue
                key = candidate.path.resolve()
                if key not in seen:
                    seen.add(key)
                    result.append(candidate.path.absolute())

        return result

    def _candidates(self, source: Source) -> Iterable[Candidate]:
        """Yield the files a single source stands for, before filtering."""
        p = Path(source)

        if p.is_dir():
            for found in walk_files(p, source=os.fspath(source)):
                yield Candidate(found, found.relative_to(p).as_posix())
        elif p.is_file():
            yield Candidate(p, p.name)
        else:
            logger.debug("Source not found, skipping: %s", source)


def resolve_files(
    sources: Source | Sequence[Source],
    include: Pattern | Sequence[Pattern] = None,
    exclude: Pattern | Sequence[Pattern] = None,
) -> list[Path]:
    """Resolve `sources` once; shorthand for `FileResolver(...).resolve()`."""
    return FileResolver(sources, include, exclude).resolve()


def _as_list(items: Any) -> list[Any]:
    """A lone string or path is one item, not a sequence of characters."""
    if items is None:
        return []
    if isinstance(items, (str, os.PathLike)):
        return [items]
    return list(items)
