"""Directory listing, recursive walks, globbing and working-directory switches."""
from __future__ import annotations

import errno
import glob as _glob
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List

from pleasant_path.io.core import PathLike


def list_dirs(path: PathLike) -> List[Path]:
    """Return the immediate child directories of ``path``.

    Returned paths are prefixed by ``path``, in directory listing order.

    Raises:
        FileNotFoundError, NotADirectoryError: If ``path`` is not a directory
    """
    return [child for child in Path(path).iterdir() if child.is_dir()]


def list_files(path: PathLike) -> List[Path]:
    """Return the immediate child files of ``path``.

    Raises:
        FileNotFoundError, NotADirectoryError: If ``path`` is not a directory
    """
    return [child for child in Path(path).iterdir() if child.is_file()]


def _require_dir(path: PathLike) -> Path:
    root = Path(path)
    if not root.is_dir():
        raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(root))
    return root


def _descend(root: Path) -> Iterator[Path]:
    # Pre-order, sorted children, symlinked directories are not entered.
    for child in sorted(root.iterdir()):
        yield child
        if child.is_dir() and not child.is_symlink():
            yield from _descend(child)


def iter_dirs(path: PathLike) -> Iterator[Path]:
    """Iterate over all descendant directories of ``path`` depth-first.

    ``path`` is validated eagerly, before the iterator is returned.

    Raises:
        NotADirectoryError: If ``path`` is not an existing directory
    """
    root = _require_dir(path)
    return (p for p in _descend(root) if p.is_dir())


def iter_files(path: PathLike) -> Iterator[Path]:
    """Iterate over all descendant files of ``path`` depth-first.

    Raises:
        NotADirectoryError: If ``path`` is not an existing directory
    """
    root = _require_dir(path)
    return (p for p in _descend(root) if p.is_file())


def walk_dirs(path: PathLike) -> List[Path]:
    """Return all descendant directories of ``path`` in depth-first order.

    Example:
        parent/dir1, parent/dir1/dir1, parent/dir2
    """
    return list(iter_dirs(path))


def walk_files(path: PathLike) -> List[Path]:
    """Return all descendant files of ``path`` in depth-first order.

    Example:
        parent/dir1/file1, parent/file1, parent/file2
    """
    return list(iter_files(path))


def glob(pattern: PathLike) -> List[Path]:
    """Expand a glob pattern (``**`` matches recursively) into paths."""
    return [Path(p) for p in _glob.glob(os.fspath(pattern), recursive=True)]


@contextmanager
def chdir(path: PathLike) -> Iterator[Path]:
    """Switch the working directory to ``path`` for the duration of the block.

    The previous working directory is restored on exit, including on errors.

    Raises:
        FileNotFoundError, NotADirectoryError: If ``path`` is not a directory
    """
    target = Path(path)
    previous = os.getcwd()
    os.chdir(target)
    try:
        yield target
    finally:
        os.chdir(previous)


__all__ = [
    "list_dirs",
    "list_files",
    "iter_dirs",
    "iter_files",
    "walk_dirs",
    "walk_files",
    "glob",
    "chdir",
]
