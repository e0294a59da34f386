"""
Glob pattern compilation and OR-combined pattern sets.

Patterns are compiled with `pathspec` using gitignore wildcard rules. A pattern
without `/` is tested against the file name only; a pattern with `/` is tested
against the path relative to the source root, where `*` and `?` stay within
one path segment and `**` spans directories. Matching is case-sensitive on
every platform, regardless of the host filesystem.
"""

from __future__ import annotations

from collections.abc import Sequence

import pathspec

from fileselect.file_resolver.errors import ConfigurationError
from fileselect.file_resolver.types import Pattern, Predicate, active_patterns


def _always(_path: str) -> bool:
    return True


def compile_pattern(pattern: Pattern) -> Predicate:
    """
    Compile one glob into a predicate over a relative POSIX path.

    `None` and `""` compile to a predicate that accepts everything. Raises
    `ConfigurationError` for patterns that cannot select files: negations
    (`!x`), comments (`#x`), blank text, or anything `pathspec` rejects.
    """
    if not pattern:
        return _always

    try:
        spec = pathspec.PathSpec.from_lines("gitignore", [pattern])
    except (ValueError, TypeError) as e:
        raise ConfigurationError(f"Invalid pattern {pattern!r}: {e}", pattern) from e

    # Negated, comment and blank lines compile to rules that never add a match.
    if not spec.patterns or not all(p.include for p in spec.patterns):
        raise ConfigurationError(f"Invalid pattern {pattern!r}: not a file-matching glob", pattern)

    if "/" in pattern:
        return spec.match_file

    def match_name(path: str) -> bool:
        return spec.match_file(path.rsplit("/", 1)[-1])

    return match_name


class PatternSet:
    """
    A list of patterns combined with OR. When the list has no active pattern,
    every lookup returns `default`: `True` for includes, `False` for excludes.
    """

    def __init__(self, predicates: Sequence[Predicate], default: bool) -> None:
        self._predicates = tuple(predicates)
        self.default = default

    @classmethod
    def compile(cls, patterns: Sequence[Pattern] | None, default: bool) -> PatternSet:
        return cls([compile_pattern(p) for p in active_patterns(patterns)], default)

    def matches(self, match_path: str) -> bool:
        if not self._predicates:
            return self.default
        return any(predicate(match_path) for predicate in self._predicates)


def matches_any(patterns: Sequence[Pattern] | None, name: str, default: bool) -> bool:
    """One-shot check of `name` against `patterns`; see `PatternSet`."""
    return PatternSet.compile(patterns, default).matches(name)
