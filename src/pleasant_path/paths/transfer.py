"""Move, copy, rename and delete with conflict resolution.

``move_as`` and ``copy_as`` replace an existing destination in two steps:
the destination is deleted, then the source is moved or copied into place.
The steps are not atomic. If the process dies or the transfer fails between
them, the destination is left empty.

Conflict callbacks receive ``(source, destination)`` and return the
destination to use. Returning ``None`` aborts the operation; returning the
source path aborts as well.
"""
from __future__ import annotations

import errno
import logging
import os
import shutil
from pathlib import Path
from typing import Callable, Optional

from pleasant_path.io.core import PathLike, make_dirname

logger = logging.getLogger(__name__)

ConflictCallback = Callable[[Path, Path], Optional[PathLike]]


def same_file(a: PathLike, b: PathLike) -> bool:
    """Return True when ``a`` and ``b`` both exist and are the same file."""
    try:
        return os.path.samefile(a, b)
    except OSError:
        return False


def delete(path: PathLike) -> Path:
    """Recursively delete the file or directory at ``path``.

    Missing paths are ignored. Symlinks are removed, never followed.
    """
    p = Path(path)
    if p.is_dir() and not p.is_symlink():
        shutil.rmtree(p)
        logger.debug("Deleted directory tree %s", p)
    elif os.path.lexists(p):
        p.unlink()
        logger.debug("Deleted %s", p)
    return p


def move(source: PathLike, destination: PathLike) -> Path:
    """Move ``source`` to ``destination`` with ``mv`` semantics.

    When ``destination`` is an existing directory, ``source`` is moved into
    it. Returns ``destination`` as given.
    """
    shutil.move(os.fspath(source), os.fspath(destination))
    return Path(destination)


def copy(source: PathLike, destination: PathLike) -> Path:
    """Copy ``source`` to ``destination`` with ``cp -r`` semantics.

    Directories are copied recursively. When ``destination`` is an existing
    directory, ``source`` is copied into it. Returns ``destination`` as given.
    """
    src = Path(source)
    dst = Path(destination)
    if src.is_dir():
        target = dst / src.name if dst.is_dir() else dst
        shutil.copytree(src, target, symlinks=True)
    else:
        shutil.copy2(src, dst)
    return dst


def _require_source(src: Path) -> None:
    # Checked before the destination is deleted.
    if not os.path.lexists(src):
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(src))


def _resolve_conflict(
    src: Path, dst: Path, on_conflict: Optional[ConflictCallback]
) -> Optional[Path]:
    """Run ``on_conflict`` when needed; ``None`` means abort."""
    if on_conflict is None:
        return dst
    if not (os.path.lexists(dst) and os.path.lexists(src)) or same_file(src, dst):
        return dst
    chosen = on_conflict(src, dst)
    if chosen is None or Path(chosen) == src:
        logger.debug("Conflict callback aborted transfer of %s to %s", src, dst)
        return None
    return Path(chosen)


def move_as(
    source: PathLike,
    destination: PathLike,
    on_conflict: Optional[ConflictCallback] = None,
) -> Path:
    """Move ``source`` to exactly ``destination`` and return the path used.

    - If ``destination`` is ``source`` itself (or the same underlying file),
      nothing is moved; a differently spelled same-file destination is renamed
      to normalise casing on case-insensitive filesystems.
    - If ``destination`` exists and ``on_conflict`` is given, its return value
      becomes the destination, or aborts the move (``None`` or ``source``)
      in which case ``source`` is returned.
    - An existing object at the final destination is deleted first.
    - Missing parent directories are created.

    Examples:
        >>> move_as("dir1/file", "dir2/file")
        PosixPath('dir2/file')
        >>> # dir2/file exists: keep both
        >>> move_as("dir1/file", "dir2/file", lambda src, dst: available_name(dst))
        PosixPath('dir2/file_1')
    """
    src = Path(source)
    dst = _resolve_conflict(src, Path(destination), on_conflict)
    if dst is None or dst == src:
        return src

    if same_file(src, dst):
        if os.fspath(src) != os.fspath(dst):
            os.rename(src, dst)
            logger.debug("Renamed %s to %s", src, dst)
        return dst

    _require_source(src)
    delete(dst)
    move(src, make_dirname(dst))
    logger.debug("Moved %s to %s", src, dst)
    return dst


rename_as = move_as


def move_into(
    source: PathLike,
    directory: PathLike,
    on_conflict: Optional[ConflictCallback] = None,
) -> Path:
    """Move ``source`` into ``directory``, keeping its basename.

    See :func:`move_as` for conflict handling.
    """
    return move_as(source, Path(directory) / Path(source).name, on_conflict)


def copy_as(
    source: PathLike,
    destination: PathLike,
    on_conflict: Optional[ConflictCallback] = None,
) -> Path:
    """Copy ``source`` to exactly ``destination`` and return the path used.

    Conflict handling mirrors :func:`move_as`. Copying a file onto itself is
    a no-op that returns ``destination``.
    """
    src = Path(source)
    dst = _resolve_conflict(src, Path(destination), on_conflict)
    if dst is None:
        return src
    if same_file(src, dst):
        return dst

    _require_source(src)
    delete(dst)
    copy(src, make_dirname(dst))
    logger.debug("Copied %s to %s", src, dst)
    return dst


def copy_into(
    source: PathLike,
    directory: PathLike,
    on_conflict: Optional[ConflictCallback] = None,
) -> Path:
    """Copy ``source`` into ``directory``, keeping its basename."""
    return copy_as(source, Path(directory) / Path(source).name, on_conflict)


def rename_basename(
    path: PathLike,
    new_basename: PathLike,
    on_conflict: Optional[ConflictCallback] = None,
) -> Path:
    """Rename ``path`` within its directory.

    Example:
        >>> rename_basename("dir/file.txt", "other.md")
        PosixPath('dir/other.md')
    """
    return move_as(path, Path(path).parent / new_basename, on_conflict)


def rename_extension(
    path: PathLike,
    new_extension: str,
    on_conflict: Optional[ConflictCallback] = None,
) -> Path:
    """Replace the last extension of ``path``.

    A missing leading dot is added; an empty string removes the extension.

    Examples:
        >>> rename_extension("dir/file.txt", "md")
        PosixPath('dir/file.md')
        >>> rename_extension("dir/file.txt", "")
        PosixPath('dir/file')
        >>> rename_extension("dir/file.txt", ".")
        PosixPath('dir/file.')
    """
    if new_extension and not new_extension.startswith("."):
        new_extension = "." + new_extension
    p = Path(path)
    return move_as(p, p.with_name(p.stem + new_extension), on_conflict)


__all__ = [
    "ConflictCallback",
    "same_file",
    "delete",
    "move",
    "copy",
    "move_as",
    "rename_as",
    "move_into",
    "copy_as",
    "copy_into",
    "rename_basename",
    "rename_extension",
]
