"""File I/O helpers.

- Core: directory creation, text read/write/append, atomic writes
- Lines: line-oriented read/write and edit-in-place
- JSON: safe read, unsafe load, write
- YAML: safe read, unsafe load, write
"""
from __future__ import annotations

from .core import (
    PathLike,
    append_file,
    append_text,
    atomic_write,
    make_dir,
    make_dirname,
    make_file,
    read_text,
    write_text,
)
from .json import (
    JSON_CLASS_KEY,
    load_json,
    read_json,
    write_json,
)
from .lines import (
    DEFAULT_EOL,
    append_lines,
    edit_lines,
    edit_text,
    read_lines,
    read_lines_from,
    write_lines,
    write_lines_to,
)
from .yaml import (
    dump_yaml_string,
    load_yaml,
    read_yaml,
    write_yaml,
)

__all__ = [
    # core
    "PathLike",
    "make_dir",
    "make_dirname",
    "make_file",
    "atomic_write",
    "read_text",
    "write_text",
    "append_text",
    "append_file",
    # lines
    "DEFAULT_EOL",
    "write_lines_to",
    "read_lines_from",
    "write_lines",
    "append_lines",
    "read_lines",
    "edit_text",
    "edit_lines",
    # json
    "JSON_CLASS_KEY",
    "write_json",
    "read_json",
    "load_json",
    # yaml
    "dump_yaml_string",
    "write_yaml",
    "read_yaml",
    "load_yaml",
]
