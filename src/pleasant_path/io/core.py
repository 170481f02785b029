"""Core I/O utilities.

Foundational text primitives used by the line, JSON and YAML helpers:
- Directory management (``make_dir``, ``make_dirname``, ``make_file``)
- Text read/write/append
- Opt-in atomic writes with fsync and rename
"""
from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

from pleasant_path.config import get_config

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _encoding(encoding: Optional[str]) -> str:
    return encoding if encoding is not None else get_config().encoding


def make_dir(path: PathLike) -> Path:
    """Create the directory ``path`` including missing parents.

    Returns:
        Path: The directory path

    Raises:
        FileExistsError: If ``path`` points to an existing non-directory
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def make_dirname(path: PathLike) -> Path:
    """Create the parent directory chain of ``path`` and return ``path``.

    Examples:
        >>> target = make_dirname(Path("path/to/file"))
        >>> assert target.parent.is_dir()
        >>> assert not target.exists()
    """
    path = Path(path)
    make_dir(path.parent)
    return path


def make_file(path: PathLike) -> Path:
    """Create an empty file at ``path`` (with parents) unless it exists.

    Existing file content is left untouched.

    Raises:
        IsADirectoryError: If ``path`` points to an existing directory
    """
    path = make_dirname(path)
    with open(path, "a"):
        pass
    return path


def atomic_write(
    path: PathLike,
    write_fn: Callable[[TextIO], None],
    *,
    encoding: Optional[str] = None,
    newline: Optional[str] = None,
) -> Path:
    """Write to ``path`` atomically using a temp file + fsync + rename.

    - Parent directory is created if missing
    - Data is written to a temporary file in the same directory
    - File is fsync'd, then atomically replaced
    - Any leftover temp file is cleaned up on failure

    Args:
        path: Target file path
        write_fn: Callable that writes content to the file object
        encoding: Text encoding (default: configured encoding)
        newline: Passed to the temp file's ``open`` call

    Returns:
        Path: The target path
    """
    path = make_dirname(path)

    tmp_path: Optional[Path] = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=_encoding(encoding),
            newline=newline,
            dir=str(path.parent),
            prefix=f".{path.name}.",
            delete=False,
        ) as f:
            tmp_path = Path(f.name)
            write_fn(f)
            f.flush()
            os.fsync(f.fileno())

        os.replace(str(tmp_path), str(path))
        logger.debug("Atomically replaced %s", path)
    finally:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink(missing_ok=True)
    return path


def read_text(path: PathLike, *, encoding: Optional[str] = None) -> str:
    """Read a whole text file.

    Raises:
        FileNotFoundError: If the file does not exist
        Other I/O errors are propagated to callers
    """
    with open(path, "r", encoding=_encoding(encoding), newline="") as f:
        return f.read()


def write_text(
    path: PathLike,
    text: str,
    *,
    encoding: Optional[str] = None,
    atomic: bool = False,
) -> Path:
    """Write ``text`` to ``path``, creating parent directories first.

    The file is truncated and rewritten in place. With ``atomic=True`` the
    text goes to a sibling temp file which then replaces ``path``.

    Returns:
        Path: The target path
    """
    if atomic:
        return atomic_write(path, lambda f: f.write(text), encoding=encoding, newline="")

    path = make_dirname(path)
    with open(path, "w", encoding=_encoding(encoding), newline="") as f:
        f.write(text)
    return path


def append_text(path: PathLike, text: str, *, encoding: Optional[str] = None) -> Path:
    """Append ``text`` to ``path``, creating the file and its parents as needed."""
    path = make_dirname(path)
    with open(path, "a", encoding=_encoding(encoding), newline="") as f:
        f.write(text)
    return path


def append_file(path: PathLike, source: PathLike) -> Path:
    """Append the raw bytes of ``source`` onto the end of ``path``.

    Unlike the text writers, ``path`` must already be creatable in place:
    parent directories are not created.
    """
    path = Path(path)
    with open(source, "rb") as src, open(path, "ab") as dst:
        shutil.copyfileobj(src, dst)
    return path


__all__ = [
    "PathLike",
    "make_dir",
    "make_dirname",
    "make_file",
    "atomic_write",
    "read_text",
    "write_text",
    "append_text",
    "append_file",
]
