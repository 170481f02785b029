"""
pleasant_path configuration (YAML defaults, env overrides, schema validation).

Configuration sources (highest to lowest priority):
1. Environment variables: PLEASANT_PATH_<section>__<key>
2. Overlay file passed to :func:`load_config`
3. Bundled defaults: pleasant_path.data/config/defaults.yaml

The merged mapping is validated against
``pleasant_path.data/schemas/config.schema.yaml``.

The resolved values are process-wide defaults. :func:`get_config` reads the
environment once, on first use, and caches the result: setting a
``PLEASANT_PATH_*`` variable afterwards has no effect until
:func:`reset_config_cache` is called. Every helper that consults the
configuration also takes the value as an argument (``encoding=``, ``fmt=``
and ``i=`` for ``available_name``, dump ``**options``), and an explicit
argument always wins.

The end-of-line default is not part of the configuration: line helpers use
the fixed :data:`pleasant_path.io.lines.DEFAULT_EOL` unless a caller passes
``eol`` explicitly.
"""
from __future__ import annotations

import copy
import json
import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

import jsonschema
import yaml

from pleasant_path.data import get_data_path, read_yaml as read_data_yaml
from pleasant_path.exceptions import ConfigError
from pleasant_path.merge import deep_merge

logger = logging.getLogger(__name__)

ENV_PREFIX = "PLEASANT_PATH_"

_CONFIG_CACHE: Dict[str, "IOConfig"] = {}


@dataclass(frozen=True)
class IOConfig:
    """Resolved I/O defaults."""

    encoding: str = "utf-8"
    json_options: Dict[str, Any] = field(default_factory=dict)
    yaml_options: Dict[str, Any] = field(default_factory=dict)
    available_name_format: str = "{name}_{i}{ext}"
    available_name_start: int = 1

    def json_dump_options(self, **overrides: Any) -> Dict[str, Any]:
        """Return JSON dump keyword arguments with ``overrides`` applied."""
        opts = dict(self.json_options)
        opts.update(overrides)
        return opts

    def yaml_dump_options(self, **overrides: Any) -> Dict[str, Any]:
        """Return YAML dump keyword arguments with ``overrides`` applied."""
        opts = dict(self.yaml_options)
        opts.update(overrides)
        return opts

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "IOConfig":
        naming = data.get("available_name") or {}
        return cls(
            encoding=str(data["io"]["encoding"]),
            json_options=dict(data.get("json") or {}),
            yaml_options=dict(data.get("yaml") or {}),
            available_name_format=str(naming["format"]),
            available_name_start=int(naming["start"]),
        )


# ---------------------------------------------------------------------------
# Environment overrides
# ---------------------------------------------------------------------------

def _as_bool(v: str) -> Optional[bool]:
    low = v.strip().lower()
    if low in {"true", "false"}:
        return low == "true"
    return None


def _as_int(v: str) -> Optional[int]:
    if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
        return int(v)
    return None


def _as_float(v: str) -> Optional[float]:
    s = v.strip()
    if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
        return float(s)
    return None


def _as_json(v: str) -> Optional[Any]:
    s = v.strip()
    if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
        try:
            return json.loads(s)
        except json.JSONDecodeError:
            return None
    return None


def _coerce_type(value: str) -> Any:
    if value.strip() == "null":
        return None
    for caster in (_as_bool, _as_int, _as_float, _as_json):
        result = caster(value)
        if result is not None:
            return result
    return value


def _parse_env_key(raw: str) -> List[str]:
    segs = raw.split("__")
    if any(seg == "" for seg in segs):
        raise ConfigError(
            f"Malformed {ENV_PREFIX}* key: empty segment in '{raw}'.",
            context={"key": ENV_PREFIX + raw},
        )
    return [seg.lower() for seg in segs]


def _iter_env_overrides() -> Iterator[Tuple[List[str], Any]]:
    for key in sorted(os.environ.keys()):
        if not key.startswith(ENV_PREFIX):
            continue
        raw = key[len(ENV_PREFIX):]
        if not raw:
            raise ConfigError(f"Malformed {ENV_PREFIX}* key", context={"key": key})
        yield _parse_env_key(raw), _coerce_type(os.environ[key])


def _set_nested(root: Dict[str, Any], path: List[str], value: Any) -> None:
    cur = root
    for part in path[:-1]:
        nxt = cur.get(part)
        if not isinstance(nxt, dict):
            nxt = {}
            cur[part] = nxt
        cur = nxt
    cur[path[-1]] = value


def apply_env_overrides(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply ``PLEASANT_PATH_*`` overrides onto ``cfg`` in place and return it."""
    for path, value in _iter_env_overrides():
        logger.debug("Config override from environment: %s = %r", ".".join(path), value)
        _set_nested(cfg, path, value)
    return cfg


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def _load_schema() -> Dict[str, Any]:
    schema = read_data_yaml("schemas", "config.schema.yaml")
    if not schema:
        raise ConfigError(
            "Bundled configuration schema is missing or empty",
            context={"path": str(get_data_path("schemas", "config.schema.yaml"))},
        )
    return schema


def validate_config(cfg: Dict[str, Any]) -> None:
    """Validate a merged configuration mapping.

    Raises:
        ConfigError: If the mapping does not satisfy the bundled schema.
    """
    try:
        jsonschema.validate(instance=cfg, schema=_load_schema())
    except jsonschema.ValidationError as exc:
        location = ".".join(str(p) for p in exc.absolute_path) or "<root>"
        raise ConfigError(
            f"Invalid configuration at {location}: {exc.message}",
            context={"location": location},
        ) from exc


def load_config(path: Union[str, Path, None] = None) -> IOConfig:
    """Load, merge, and validate configuration.

    Args:
        path: Optional YAML overlay merged over the bundled defaults.

    Returns:
        IOConfig: Resolved, validated configuration.

    Raises:
        FileNotFoundError: If ``path`` is given and does not exist
        ConfigError: If the overlay is not a mapping or validation fails
    """
    cfg: Dict[str, Any] = copy.deepcopy(read_data_yaml("config", "defaults.yaml"))

    if path is not None:
        overlay_path = Path(path)
        with open(overlay_path, "r", encoding="utf-8") as f:
            overlay = yaml.safe_load(f)
        if overlay is None:
            overlay = {}
        if not isinstance(overlay, dict):
            raise ConfigError(
                f"Configuration overlay must be a YAML mapping: {overlay_path}",
                context={"path": str(overlay_path)},
            )
        cfg = deep_merge(cfg, overlay)

    apply_env_overrides(cfg)
    validate_config(cfg)
    return IOConfig.from_mapping(cfg)


def get_config() -> IOConfig:
    """Return the process configuration, loading it on first use."""
    cached = _CONFIG_CACHE.get("default")
    if cached is None:
        cached = load_config()
        _CONFIG_CACHE["default"] = cached
    return cached


def reset_config_cache() -> None:
    """Drop the cached configuration so the next access reloads it."""
    _CONFIG_CACHE.clear()


__all__ = [
    "ENV_PREFIX",
    "IOConfig",
    "apply_env_overrides",
    "validate_config",
    "load_config",
    "get_config",
    "reset_config_cache",
]
