"""Collision-free file name generation."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pleasant_path.config import get_config
from pleasant_path.exceptions import PathArgumentError
from pleasant_path.io.core import PathLike


def available_name(
    path: PathLike,
    fmt: Optional[str] = None,
    *,
    i: Optional[int] = None,
) -> Path:
    """Return ``path`` if nothing exists there, else the first free variant.

    Variants are rendered from ``fmt`` with :meth:`str.format` fields:

    - ``{name}``: basename without its extension
    - ``{ext}``: extension including the leading dot
    - ``{i}``: counter, starting at ``i`` and increasing by one per attempt
    - ``{dirname}``: directory of ``path``

    Variants stay in the directory of ``path``. ``fmt`` and ``i`` default to
    the configured ``available_name`` settings (``"{name}_{i}{ext}"`` from 1).

    Examples:
        >>> available_name("dir/file.txt")       # nothing there yet
        PosixPath('dir/file.txt')
        >>> available_name("dir/file.txt")       # dir/file.txt exists
        PosixPath('dir/file_1.txt')
        >>> available_name("file.txt", "{name} ({i}){ext}")
        PosixPath('file (1).txt')
    """
    p = Path(path)
    if not os.path.lexists(p):
        return p

    cfg = get_config()
    template = fmt if fmt is not None else cfg.available_name_format
    counter = i if i is not None else cfg.available_name_start
    if "{i}" not in template and "{i:" not in template:
        raise PathArgumentError(
            f"available_name format must contain an {{i}} field: {template!r}",
            context={"format": template},
        )

    dirname = os.path.dirname(os.fspath(p))
    if dirname not in ("", "."):
        template = "{dirname}/" + template

    values = {"dirname": dirname, "name": p.stem, "ext": p.suffix}
    while True:
        candidate = Path(template.format(i=counter, **values))
        if not os.path.lexists(candidate):
            return candidate
        counter += 1


__all__ = ["available_name"]
