"""
TOML-based config file loading for fileselect.

Searches for `.fileselect.toml`, `fileselect.toml`, or `pyproject.toml
[tool.fileselect]` walking up from the current directory. Config values are
merged with CLI flags using three-way precedence: explicit CLI flags > config
file > built-in defaults.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, TypeVar, cast

from fileselect.file_resolver import ConfigurationError

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]


@dataclass
class FileSelectConfig:
    """
    Parsed config from a TOML file. Fields are `None` when not set in the config,
    allowing the merge logic to distinguish "not configured" from "explicitly set
    to an empty list".
    """

    sources: list[str] | None = None
    include: list[str] | None = None
    exclude: list[str] | None = None


# Config file search order (first match wins within each directory level)
_CONFIG_FILENAMES = [".fileselect.toml", "fileselect.toml", "pyproject.toml"]

_VALID_FIELDS = {f.name for f in fields(FileSelectConfig)}


def find_config_file(start_dir: Path) -> Path | None:
    """
    Walk up from `start_dir` looking for a config file. Returns the first
    found, or `None`. Search order per directory: `.fileselect.toml` >
    `fileselect.toml` > `pyproject.toml` (only if it has `[tool.fileselect]`).
    """
    current = start_dir.resolve()
    while True:
        for filename in _CONFIG_FILENAMES:
            candidate = current / filename
            if candidate.is_file():
                if filename == "pyproject.toml":
                    if _pyproject_has_section(candidate):
                        return candidate
                else:
                    return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def _pyproject_has_section(path: Path) -> bool:
    """Check if a pyproject.toml has a [tool.fileselect] section."""
    try:
        data = tomllib.loads(path.read_text())
        return "fileselect" in data.get("tool", {})
    except (tomllib.TOMLDecodeError, OSError):
        return False


def load_config(config_path: Path) -> FileSelectConfig:
    """
    Load a `FileSelectConfig` from a TOML file. Supports both standalone
    `fileselect.toml` / `.fileselect.toml` and `pyproject.toml` (extracts
    `[tool.fileselect]`). Raises `ConfigurationError` for unparsable TOML
    or values that are not lists of strings.
    """
    try:
        data = tomllib.loads(config_path.read_text())
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {config_path}: {e}") from e

    if config_path.name == "pyproject.toml":
        data = data.get("tool", {}).get("fileselect", {})

    config = _parse_config_data(data, config_path)
    # Relative sources are relative to the directory holding the config file.
    if config.sources is not None:
        base = config_path.parent
        config.sources = [s if Path(s).is_absolute() else str(base / s) for s in config.sources]
    return config


def _parse_config_data(data: dict[str, Any], origin: Path | None = None) -> FileSelectConfig:
    """Parse a flat or sectioned TOML dict into FileSelectConfig."""
    # Flatten sections: e.g. [filters] merges into top level
    flat: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            for sub_key, sub_value in cast(dict[str, Any], value).items():
                flat[sub_key] = sub_value
        else:
            flat[key] = value

    mapped: dict[str, list[str]] = {}
    for key, value in flat.items():
        snake_key = key.replace("-", "_")
        if snake_key not in _VALID_FIELDS:
            continue
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list) or not all(
            isinstance(v, str) for v in cast(list[Any], value)
        ):
            where = f" in {origin}" if origin else ""
            raise ConfigurationError(f"`{key}`{where} must be a string or a list of strings")
        mapped[snake_key] = cast(list[str], value)

    return FileSelectConfig(**mapped)


_T = TypeVar("_T")


def merge_cli_with_config(
    cli_opts: _T,
    config: FileSelectConfig | None,
    explicit_flags: set[str],
) -> _T:
    """
    Merge CLI options with config file settings.

    Precedence: explicit CLI flags > config file > built-in defaults.
    """
    if config is None:
        return cli_opts

    for cfg_field in fields(FileSelectConfig):
        cfg_value = getattr(config, cfg_field.name)
        if cfg_value is None:
            continue  # Not set in config

        # Skip if CLI explicitly set this flag
        if cfg_field.name in explicit_flags:
            continue

        if hasattr(cli_opts, cfg_field.name):
            setattr(cli_opts, cfg_field.name, list(cfg_value))

    return cli_opts
