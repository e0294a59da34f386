#!/usr/bin/env python3
"""
fileselect: resolve directories and files into a filtered, ordered file list

Common usage:
  fileselect data/
  fileselect data/ --include '*.csv' --exclude 'tmp_*'
  fileselect pom.xml README.md data/ --include '*.xml' --include '*.csv'
  fileselect data/ --include 'reports/**/*.csv' -o files.txt

Patterns without '/' match file names; patterns with '/' match the path
relative to each source directory. Settings may also come from
`.fileselect.toml`, `fileselect.toml` or `[tool.fileselect]` in `pyproject.toml`.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from strif import atomic_output_file

from fileselect.config import find_config_file, load_config, merge_cli_with_config
from fileselect.file_resolver import ConfigurationError, FileResolver


@dataclass
class Options:
    """Command-line options for the fileselect tool."""

    sources: list[str]
    include: list[str]
    exclude: list[str]
    output: str
    relative: bool
    no_config: bool
    verbose: bool
    version: bool


def _parse_args(args: list[str] | None = None) -> tuple[Options, set[str]]:
    """
    Parse command-line arguments.

    Returns a tuple of (options, explicit_flags) where `explicit_flags` tracks
    which settings the user passed on the command line (for config merge
    precedence).
    """
    # Use the module's docstring as the description
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        prog="fileselect",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "sources",
        nargs="*",
        type=str,
        default=[],
        help="Directories (walked recursively) and files to resolve, in order",
    )
    parser.add_argument(
        "-i",
        "--include",
        action="append",
        default=None,
        metavar="PATTERN",
        help="Keep only files matching this glob (default: all files). Can be repeated",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        action="append",
        default=None,
        metavar="PATTERN",
        help="Drop files matching this glob, even if included. Can be repeated",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default="-",
        help="Write the file list here instead of stdout (use '-' for stdout)",
    )
    parser.add_argument(
        "--relative",
        action="store_true",
        help="Print paths relative to the current directory where possible",
    )
    parser.add_argument(
        "--no-config",
        action="store_true",
        dest="no_config",
        help="Do not look for a config file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details (skipped sources, revisited directories) to stderr",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    opts = parser.parse_args(args)

    # append actions keep None when the flag is absent; positional sources are
    # explicit whenever any are given.
    explicit_flags: set[str] = set()
    if opts.sources:
        explicit_flags.add("sources")
    if opts.include is not None:
        explicit_flags.add("include")
    if opts.exclude is not None:
        explicit_flags.add("exclude")

    return (
        Options(
            sources=opts.sources,
            include=opts.include or [],
            exclude=opts.exclude or [],
            output=opts.output,
            relative=opts.relative,
            no_config=opts.no_config,
            verbose=opts.verbose,
            version=opts.version,
        ),
        explicit_flags,
    )


def _display_path(path: Path, relative: bool) -> str:
    if not relative:
        return str(path)
    try:
        return os.path.relpath(path)
    except ValueError:
        # Different drive on Windows.
        return str(path)


def _write_lines(lines: list[str], output: str) -> None:
    text = "".join(f"{line}\n" for line in lines)
    if output == "-":
        sys.stdout.write(text)
        return
    with atomic_output_file(output, make_parents=True) as tmp_path:
        Path(tmp_path).write_text(text)


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the fileselect CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, 1 for usage or configuration errors,
        2 for filesystem errors)
    """
    options, explicit_flags = _parse_args(args)

    if options.version:
        try:
            version = importlib.metadata.version("fileselect")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    if options.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        # Load and merge config file settings
        if not options.no_config:
            config_path = find_config_file(Path.cwd())
            if config_path:
                merge_cli_with_config(options, load_config(config_path), explicit_flags)

        if not options.sources:
            print(
                "Error: No sources specified. Provide directories or files"
                " (use '.' for current directory) or set `sources` in a config file."
                " Use --help for more options.",
                file=sys.stderr,
            )
            return 1

        resolver = FileResolver(options.sources, options.include, options.exclude)
        files = resolver.resolve()
        _write_lines([_display_path(f, options.relative) for f in files], options.output)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:  # SourceAccessError, or failure writing --output
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
