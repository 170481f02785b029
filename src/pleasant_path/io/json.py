"""JSON I/O adapters.

``read_json`` is restricted to basic types (booleans, numbers, strings, lists
and string-keyed objects) and is safe for untrusted input. ``load_json``
additionally rebuilds objects tagged with :data:`JSON_CLASS_KEY` by importing
the named class and calling its ``json_create`` classmethod; only use it on
trusted input.

Objects exposing ``to_json_dict()`` are written by ``write_json`` as tagged
objects so that ``load_json`` can rebuild them.
"""
from __future__ import annotations

import importlib
import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from pleasant_path.config import get_config
from pleasant_path.exceptions import UnsafeContentError

from .core import PathLike, _encoding, atomic_write, make_dirname

JSON_CLASS_KEY = "json_class"

ObjectHook = Callable[[Dict[str, Any]], Any]


def class_tag(cls: type) -> str:
    """Return the ``module:QualName`` tag used for ``cls``."""
    return f"{cls.__module__}:{cls.__qualname__}"


def resolve_class_tag(tag: str) -> type:
    """Import and return the class named by a ``module:QualName`` tag.

    Raises:
        ImportError: If the module cannot be imported
        AttributeError: If the qualified name does not exist in the module
        TypeError: If the tag does not name a class
    """
    module_name, sep, qualname = tag.partition(":")
    if not sep or not module_name or not qualname:
        raise TypeError(f"Malformed {JSON_CLASS_KEY} tag: {tag!r}")
    obj: Any = importlib.import_module(module_name)
    for part in qualname.split("."):
        obj = getattr(obj, part)
    if not isinstance(obj, type):
        raise TypeError(f"{JSON_CLASS_KEY} tag does not name a class: {tag!r}")
    return obj


def _default(obj: Any) -> Any:
    to_dict = getattr(obj, "to_json_dict", None)
    if callable(to_dict):
        data = dict(to_dict())
        return {JSON_CLASS_KEY: class_tag(type(obj)), **data}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _chain(hook: ObjectHook, inner: Optional[ObjectHook]) -> ObjectHook:
    if inner is None:
        return hook

    def _hook(obj: Dict[str, Any]) -> Any:
        result = hook(obj)
        return inner(result) if isinstance(result, dict) else result

    return _hook


def _reject_tags(path: Path) -> ObjectHook:
    def _hook(obj: Dict[str, Any]) -> Any:
        if JSON_CLASS_KEY in obj:
            tag = obj[JSON_CLASS_KEY]
            raise UnsafeContentError(
                f"Refusing to build {tag!r} from {path}; use load_json for trusted input",
                context={"path": str(path), "tag": tag},
            )
        return obj

    return _hook


def _no_pairs_hook(options: Dict[str, Any]) -> None:
    if "object_pairs_hook" in options:
        raise TypeError("object_pairs_hook is not supported; pass object_hook instead")


def _create_tagged(obj: Dict[str, Any]) -> Any:
    tag = obj.get(JSON_CLASS_KEY)
    if not isinstance(tag, str):
        return obj
    cls = resolve_class_tag(tag)
    create = getattr(cls, "json_create", None)
    if not callable(create):
        raise TypeError(f"{tag} does not define json_create()")
    data = {k: v for k, v in obj.items() if k != JSON_CLASS_KEY}
    return create(data)


def write_json(
    path: PathLike,
    value: Any,
    *,
    encoding: Optional[str] = None,
    atomic: bool = False,
    **options: Any,
) -> Path:
    """Serialize ``value`` as JSON and write it to ``path``.

    Dump options default to the configured ``json`` section (indent,
    sort_keys, ensure_ascii, allow_nan); ``options`` override them and are
    passed through to :func:`json.dumps`.

    Args:
        path: Target file path (parents are created)
        value: Data to serialize
        encoding: Text encoding (default: configured encoding)
        atomic: Replace the file via temp file + rename
        **options: Extra :func:`json.dumps` keyword arguments

    Returns:
        Path: The target path
    """
    opts = get_config().json_dump_options(**options)
    opts.setdefault("default", _default)
    text = json.dumps(value, **opts)

    if atomic:
        return atomic_write(path, lambda f: f.write(text), encoding=encoding, newline="")

    path = make_dirname(path)
    with open(path, "w", encoding=_encoding(encoding), newline="") as f:
        f.write(text)
    return path


def read_json(path: PathLike, *, encoding: Optional[str] = None, **options: Any) -> Any:
    """Parse JSON from ``path`` into basic types only.

    ``options`` are passed to :func:`json.load`; a caller ``object_hook`` runs
    after the type-tag check.

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the content is not valid JSON
        UnsafeContentError: If an object carries a ``json_class`` tag
    """
    path = Path(path)
    options["object_hook"] = _chain(_reject_tags(path), options.get("object_hook"))
    _no_pairs_hook(options)
    with open(path, "r", encoding=_encoding(encoding)) as f:
        return json.load(f, **options)


def load_json(path: PathLike, *, encoding: Optional[str] = None, **options: Any) -> Any:
    """Parse JSON from ``path``, rebuilding ``json_class``-tagged objects.

    Not safe for untrusted input: a tag can import any module.

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the content is not valid JSON
        ImportError, AttributeError, TypeError: If a tag cannot be resolved
    """
    options["object_hook"] = _chain(_create_tagged, options.get("object_hook"))
    _no_pairs_hook(options)
    with open(path, "r", encoding=_encoding(encoding)) as f:
        return json.load(f, **options)


__all__ = [
    "JSON_CLASS_KEY",
    "class_tag",
    "resolve_class_tag",
    "write_json",
    "read_json",
    "load_json",
]
