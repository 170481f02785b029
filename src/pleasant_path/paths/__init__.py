"""Path helpers: prefixes, naming, transfer, traversal."""
from __future__ import annotations

from .common import common_path, existence, parent_name, sibling
from .naming import available_name
from .transfer import (
    ConflictCallback,
    copy,
    copy_as,
    copy_into,
    delete,
    move,
    move_as,
    move_into,
    rename_as,
    rename_basename,
    rename_extension,
    same_file,
)
from .traversal import (
    chdir,
    glob,
    iter_dirs,
    iter_files,
    list_dirs,
    list_files,
    walk_dirs,
    walk_files,
)

__all__ = [
    # common
    "common_path",
    "sibling",
    "parent_name",
    "existence",
    # naming
    "available_name",
    # transfer
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
    # traversal
    "list_dirs",
    "list_files",
    "iter_dirs",
    "iter_files",
    "walk_dirs",
    "walk_files",
    "glob",
    "chdir",
]
