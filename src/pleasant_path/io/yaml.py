"""YAML I/O adapters built on PyYAML.

``read_yaml`` uses a restricted safe loader (:class:`BasicLoader`) and refuses
tagged content that would build arbitrary Python objects, sets or bytes.
``load_yaml`` uses the unsafe loader and will
reconstruct any ``!!python/...`` tag; only use it on trusted input.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Optional

import yaml
from yaml.constructor import ConstructorError

from pleasant_path.config import get_config
from pleasant_path.exceptions import UnsafeContentError

from .core import PathLike, _encoding, atomic_write, make_dirname

_TAG_RE = re.compile(r"for the tag '([^']+)'")


class Dumper(yaml.Dumper):
    """Full dumper that writes multiline strings in literal block style."""


def _str_representer(dumper: yaml.Dumper, data: str) -> yaml.ScalarNode:
    """Represent multiline strings with literal block style."""
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


Dumper.add_representer(str, _str_representer)


class BasicLoader(yaml.SafeLoader):
    """Safe loader limited to booleans, numbers, strings, lists and mappings.

    Timestamps stay strings; ``!!set``, ``!!binary``, ``!!omap`` and
    ``!!pairs`` are refused.
    """


def _timestamp_as_str(loader: yaml.SafeLoader, node: yaml.ScalarNode) -> str:
    return loader.construct_scalar(node)


def _refuse(loader: yaml.SafeLoader, node: yaml.Node) -> Any:
    raise ConstructorError(
        None,
        None,
        f"could not determine a constructor for the tag {node.tag!r}",
        node.start_mark,
    )


BasicLoader.add_constructor("tag:yaml.org,2002:timestamp", _timestamp_as_str)
for _tag in ("set", "binary", "omap", "pairs"):
    BasicLoader.add_constructor(f"tag:yaml.org,2002:{_tag}", _refuse)


def dump_yaml_string(value: Any, **options: Any) -> str:
    """Dump ``value`` to a YAML string using configured dump options."""
    opts = get_config().yaml_dump_options(**options)
    opts.setdefault("Dumper", Dumper)
    return yaml.dump(value, **opts)


def write_yaml(
    path: PathLike,
    value: Any,
    *,
    encoding: Optional[str] = None,
    atomic: bool = False,
    **options: Any,
) -> Path:
    """Serialize ``value`` as YAML and write it to ``path``.

    Arbitrary objects are emitted with ``!!python/object`` tags and can only
    be read back with :func:`load_yaml`. Dump options default to the
    configured ``yaml`` section; ``options`` override them.

    Returns:
        Path: The target path
    """
    text = dump_yaml_string(value, **options)

    if atomic:
        return atomic_write(path, lambda f: f.write(text), encoding=encoding, newline="")

    path = make_dirname(path)
    with open(path, "w", encoding=_encoding(encoding), newline="") as f:
        f.write(text)
    return path


def read_yaml(path: PathLike, *, encoding: Optional[str] = None) -> Any:
    """Parse YAML from ``path`` into basic types only.

    Dates and timestamps are returned as the strings written in the file.

    Raises:
        FileNotFoundError: If the file does not exist
        yaml.YAMLError: If the content is not valid YAML
        UnsafeContentError: If the content requests a non-basic type
    """
    path = Path(path)
    with open(path, "r", encoding=_encoding(encoding)) as f:
        try:
            return yaml.load(f, Loader=BasicLoader)
        except ConstructorError as exc:
            match = _TAG_RE.search(exc.problem or "")
            if match is None:
                raise
            tag = match.group(1)
            raise UnsafeContentError(
                f"Refusing to build {tag!r} from {path}; use load_yaml for trusted input",
                context={"path": str(path), "tag": tag},
            ) from exc


def load_yaml(path: PathLike, *, encoding: Optional[str] = None) -> Any:
    """Parse YAML from ``path`` with the unsafe loader.

    Not safe for untrusted input: tags can construct arbitrary objects.
    """
    with open(path, "r", encoding=_encoding(encoding)) as f:
        return yaml.unsafe_load(f)


__all__ = [
    "Dumper",
    "BasicLoader",
    "dump_yaml_string",
    "write_yaml",
    "read_yaml",
    "load_yaml",
]
