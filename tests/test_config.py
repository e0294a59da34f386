"""Tests for config file loading and merging."""

from __future__ import annotations

from pathlib import Path

import pytest

from fileselect.cli import Options
from fileselect.config import (
    FileSelectConfig,
    find_config_file,
    load_config,
    merge_cli_with_config,
)
from fileselect.file_resolver import ConfigurationError


def _options(**overrides: object) -> Options:
    values: dict[str, object] = dict(
        sources=[],
        include=[],
        exclude=[],
        output="-",
        relative=False,
        no_config=False,
        verbose=False,
        version=False,
    )
    values.update(overrides)
    return Options(**values)  # pyright: ignore[reportArgumentType]


def test_find_config_fileselect_toml(tmp_path: Path) -> None:
    config_file = tmp_path / "fileselect.toml"
    config_file.write_text('include = ["*.csv"]\n')
    assert find_config_file(tmp_path) == config_file


def test_find_config_dot_fileselect_toml_takes_precedence(tmp_path: Path) -> None:
    (tmp_path / "fileselect.toml").write_text('include = ["*.csv"]\n')
    dot_config = tmp_path / ".fileselect.toml"
    dot_config.write_text('include = ["*.txt"]\n')
    assert find_config_file(tmp_path) == dot_config


def test_find_config_pyproject_toml(tmp_path: Path) -> None:
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text('[tool.fileselect]\ninclude = ["*.csv"]\n')
    assert find_config_file(tmp_path) == config_file


def test_find_config_pyproject_without_section_skipped(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.ruff]\nline-length = 100\n")
    assert find_config_file(tmp_path) is None


def test_find_config_walks_up(tmp_path: Path) -> None:
    config_file = tmp_path / "fileselect.toml"
    config_file.write_text('exclude = ["*.tmp"]\n')
    subdir = tmp_path / "sub" / "deep"
    subdir.mkdir(parents=True)
    assert find_config_file(subdir) == config_file


def test_find_config_none_when_missing(tmp_path: Path) -> None:
    assert find_config_file(tmp_path) is None


def test_load_config_flat(tmp_path: Path) -> None:
    config_file = tmp_path / "fileselect.toml"
    config_file.write_text('include = ["*.csv", "*.txt"]\nexclude = "tmp_*"\n')
    config = load_config(config_file)
    assert config.include == ["*.csv", "*.txt"]
    assert config.exclude == ["tmp_*"]
    assert config.sources is None


def test_load_config_sectioned_pyproject(tmp_path: Path) -> None:
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text(
        "[tool.fileselect]\n"
        'sources = ["data", "/abs/path"]\n'
        "[tool.fileselect.filters]\n"
        'include = ["*.csv"]\n'
        "unknown-key = 1\n"
    )
    config = load_config(config_file)
    assert config.include == ["*.csv"]
    assert config.sources == [str(tmp_path / "data"), "/abs/path"]


def test_load_config_rejects_non_string_lists(tmp_path: Path) -> None:
    config_file = tmp_path / "fileselect.toml"
    config_file.write_text("include = [1, 2]\n")
    with pytest.raises(ConfigurationError):
        load_config(config_file)


def test_load_config_rejects_bad_toml(tmp_path: Path) -> None:
    config_file = tmp_path / "fileselect.toml"
    config_file.write_text("include = [\n")
    with pytest.raises(ConfigurationError):
        load_config(config_file)


def test_merge_config_fills_unset_options() -> None:
    options = _options(sources=["cli_dir"])
    config = FileSelectConfig(sources=["cfg_dir"], include=["*.csv"])
    merge_cli_with_config(options, config, explicit_flags={"sources"})
    assert options.sources == ["cli_dir"]
    assert options.include == ["*.csv"]
    assert options.exclude == []


def test_merge_explicit_flags_win() -> None:
    options = _options(include=["*.txt"])
    config = FileSelectConfig(include=["*.csv"], exclude=["tmp_*"])
    merge_cli_with_config(options, config, explicit_flags={"include"})
    assert options.include == ["*.txt"]
    assert options.exclude == ["tmp_*"]


def test_merge_none_config_is_noop() -> None:
    options = _options(include=["*.txt"])
    assert merge_cli_with_config(options, None, explicit_flags=set()) is options
    assert options.include == ["*.txt"]
