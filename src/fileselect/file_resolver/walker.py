"""Deterministic recursive enumeration of regular files."""

from __future__ import annotations

import errno
import logging
import os
import stat
from collections.abc import Iterator
from pathlib import Path

from fileselect.file_resolver.errors import SourceAccessError

logger = logging.getLogger(__name__)


def walk_files(root: str | os.PathLike[str], source: str | None = None) -> Iterator[Path]:
    """
    Yield every regular file beneath `root`, recursively.

    Entries are sorted by name within each directory and visited depth-first,
    so the output is in lexicographic order of relative path components.
    Symlinked directories are followed, but each physical directory is entered
    at most once, which keeps link cycles finite.

    A root that is missing or not a directory yields nothing. A directory that
    exists but cannot be listed raises `SourceAccessError`; `source` is the
    caller's input named in the error and defaults to `root`.
    """
    root_path = Path(root)
    source = source if source is not None else str(root)
    try:
        root_stat = root_path.stat()
    except FileNotFoundError:
        return
    except OSError as e:
        raise SourceAccessError(source, root_path, e) from e
    if not stat.S_ISDIR(root_stat.st_mode):
        return

    visited: set[tuple[int, int]] = {(root_stat.st_dev, root_stat.st_ino)}
    yield from _walk(root_path, source, visited)


def _walk(directory: Path, source: str, visited: set[tuple[int, int]]) -> Iterator[Path]:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except FileNotFoundError:
        # Removed after its parent was listed.
        return
    except OSError as e:
        raise SourceAccessError(source, directory, e) from e

    for entry in entries:
        path = directory / entry.name
        key: tuple[int, int] | None = None
        try:
            if entry.is_dir():
                st = entry.stat()
                key = (st.st_dev, st.st_ino)
            elif not entry.is_file():
                # Broken symlinks, sockets, fifos, devices.
                continue
        except OSError as e:
            # Dangling or looping symlinks, or an entry removed mid-walk.
            if e.errno in (errno.ENOENT, errno.ELOOP):
                continue
            raise SourceAccessError(source, path, e) from e

        if key is None:
            yield path
        elif key in visited:
            logger.debug("Directory already visited, not following: %s", path)
        else:
            visited.add(key)
            yield from _walk(path, source, visited)
