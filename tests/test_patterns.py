"""Tests for glob pattern compilation and pattern sets."""

from __future__ import annotations

import pytest

from fileselect.file_resolver import ConfigurationError, PatternSet, compile_pattern, matches_any


@pytest.mark.parametrize("pattern", [None, ""])
def test_empty_pattern_matches_everything(pattern: str | None):
    predicate = compile_pattern(pattern)
    assert predicate("file_01.csv")
    assert predicate("deep/nested/file.txt")


def test_star_and_question_mark():
    assert compile_pattern("*.csv")("file_01.csv")
    assert not compile_pattern("*.csv")("file_01.txt")
    assert compile_pattern("file_0?.csv")("file_01.csv")
    assert not compile_pattern("file_0?.csv")("file_100.csv")
    assert compile_pattern("file*.*")("file_01.txt")
    assert not compile_pattern("file*.*")("test.properties")


def test_literal_pattern():
    predicate = compile_pattern("file_01.csv")
    assert predicate("file_01.csv")
    assert predicate("nested/file_01.csv")
    assert not predicate("file_01.csvx")


def test_name_pattern_ignores_directory_components():
    predicate = compile_pattern("data*")
    assert predicate("data.csv")
    assert not predicate("data/report.csv")


def test_path_pattern_is_relative_to_root():
    predicate = compile_pattern("reports/*.csv")
    assert predicate("reports/q1.csv")
    assert not predicate("reports/2024/q1.csv")
    assert not predicate("archive/reports/q1.csv")


def test_double_star_spans_directories():
    predicate = compile_pattern("reports/**/*.csv")
    assert predicate("reports/2024/q1.csv")
    assert predicate("reports/q1.csv")
    assert not predicate("other/q1.csv")


def test_matching_is_case_sensitive():
    assert not compile_pattern("*.csv")("FILE.CSV")
    assert not compile_pattern("README.md")("readme.md")


@pytest.mark.parametrize("pattern", ["!*.csv", "# comment", "   "])
def test_invalid_patterns_raise(pattern: str):
    with pytest.raises(ConfigurationError) as exc:
        compile_pattern(pattern)
    assert exc.value.pattern == pattern


def test_matches_any_defaults():
    assert matches_any([], "a.csv", default=True)
    assert matches_any([None], "a.csv", default=True)
    assert not matches_any([], "a.csv", default=False)
    assert not matches_any([None, ""], "a.csv", default=False)
    assert not matches_any(None, "a.csv", default=False)


def test_matches_any_is_or():
    patterns = ["*.xml", "*.md"]
    assert matches_any(patterns, "pom.xml", default=False)
    assert matches_any(patterns, "README.md", default=False)
    assert not matches_any(patterns, "notes.txt", default=True)


def test_pattern_set_ignores_null_entries():
    pattern_set = PatternSet.compile([None, "*.csv"], default=False)
    assert pattern_set.matches("file_01.csv")
    assert not pattern_set.matches("file_01.txt")


def test_pattern_set_rejects_any_invalid_entry():
    with pytest.raises(ConfigurationError):
        PatternSet.compile(["*.csv", "!*.txt"], default=True)
