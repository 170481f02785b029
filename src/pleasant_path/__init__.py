"""
pleasant_path - path helpers for everyday filesystem chores

Reading and writing text or line-oriented files, moving, copying and
renaming with conflict resolution, directory traversal, and JSON/YAML
serialization to and from disk.
"""
from __future__ import annotations

from pleasant_path.exceptions import (
    ConfigError,
    PathArgumentError,
    PleasantPathError,
    UnsafeContentError,
)
from pleasant_path.io import (
    DEFAULT_EOL,
    append_file,
    append_lines,
    append_text,
    atomic_write,
    edit_lines,
    edit_text,
    load_json,
    load_yaml,
    make_dir,
    make_dirname,
    make_file,
    read_json,
    read_lines,
    read_text,
    read_yaml,
    write_json,
    write_lines,
    write_text,
    write_yaml,
)
from pleasant_path.paths import (
    available_name,
    chdir,
    common_path,
    copy,
    copy_as,
    copy_into,
    delete,
    existence,
    glob,
    iter_dirs,
    iter_files,
    list_dirs,
    list_files,
    move,
    move_as,
    move_into,
    parent_name,
    rename_as,
    rename_basename,
    rename_extension,
    sibling,
    walk_dirs,
    walk_files,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # errors
    "PleasantPathError",
    "PathArgumentError",
    "UnsafeContentError",
    "ConfigError",
    # paths
    "common_path",
    "sibling",
    "parent_name",
    "existence",
    "available_name",
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
    "list_dirs",
    "list_files",
    "iter_dirs",
    "iter_files",
    "walk_dirs",
    "walk_files",
    "glob",
    "chdir",
    # io
    "DEFAULT_EOL",
    "make_dir",
    "make_dirname",
    "make_file",
    "atomic_write",
    "read_text",
    "write_text",
    "append_text",
    "append_file",
    "write_lines",
    "append_lines",
    "read_lines",
    "edit_text",
    "edit_lines",
    "write_json",
    "read_json",
    "load_json",
    "write_yaml",
    "read_yaml",
    "load_yaml",
]
