"""Path arithmetic that needs no filesystem writes."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional

from pleasant_path.exceptions import PathArgumentError
from pleasant_path.io.core import PathLike

SEPARATORS = frozenset(s for s in ("/", os.sep, os.altsep) if s)


def common_path(paths: Iterable[PathLike]) -> str:
    """Return the longest path prefix shared by every item in ``paths``.

    The result either equals one of the inputs or ends right after a path
    separator, so it never splits a path component. Inputs sharing no such
    prefix yield ``""``.

    Examples:
        >>> common_path(["dir1/file1", "dir1/subdir1/file2"])
        'dir1/'
        >>> common_path(["dir1/subdir1/file2", "dir1/subdir1/file3"])
        'dir1/subdir1/'
        >>> common_path(["dir1/file1", "dir2/file4"])
        ''

    Raises:
        PathArgumentError: If ``paths`` is empty
    """
    items = [os.fspath(p) for p in paths]
    if not items:
        raise PathArgumentError("common_path() requires at least one path")
    if len(items) == 1:
        return items[0]

    # Any other item sorts between these two, so their prefix is everyone's.
    short, long = min(items), max(items)
    i = 0
    last = -1
    while i < len(short) and short[i] == long[i]:
        if short[i] in SEPARATORS:
            last = i
        i += 1
    return short[: i if i == len(short) else last + 1]


def sibling(path: PathLike, name: PathLike) -> Path:
    """Join the directory of ``path`` with ``name``.

    Example:
        >>> sibling("path/to/file1", "file2")
        PosixPath('path/to/file2')
    """
    return Path(path).parent / name


def parent_name(path: PathLike) -> Path:
    """Return the basename of the directory of ``path``.

    Example:
        >>> parent_name("grand/parent/base")
        PosixPath('parent')
    """
    return Path(Path(path).parent.name)


def existence(path: PathLike) -> Optional[Path]:
    """Return ``path`` as a Path if something exists there, else ``None``."""
    p = Path(path)
    return p if p.exists() else None


__all__ = ["SEPARATORS", "common_path", "sibling", "parent_name", "existence"]
