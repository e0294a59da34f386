"""Configuration and data types for file resolution."""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple, Union

# A glob pattern. `None` (and `""`) stand for "no filter on this side".
Pattern = Union[str, None]

# A caller-supplied directory or file location.
Source = Union[str, os.PathLike[str]]

# A compiled pattern: takes a file name or a POSIX path relative to the source root.
Predicate = Callable[[str], bool]


class Candidate(NamedTuple):
    """A file found for a source, before include/exclude filtering."""

    path: Path
    match_path: str
    """File name for single-file sources, POSIX path relative to the root for directories."""


@dataclass
class FileResolverConfig:
    """
    Include and exclude filters applied to every source.

    An empty list, or a list holding only `None` entries, means no filter:
    include everything, exclude nothing.
    """

    include: list[Pattern] = field(default_factory=list)
    exclude: list[Pattern] = field(default_factory=list)

    @property
    def effective_include(self) -> list[str]:
        """Include patterns with `None`/empty entries dropped."""
        return active_patterns(self.include)

    @property
    def effective_exclude(self) -> list[str]:
        """Exclude patterns with `None`/empty entries dropped."""
        return active_patterns(self.exclude)


def active_patterns(patterns: Sequence[Pattern] | None) -> list[str]:
    return [p for p in patterns or () if p]
