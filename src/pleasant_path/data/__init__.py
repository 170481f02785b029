"""Package data shipped with pleasant_path.

``config/defaults.yaml`` holds the default I/O settings and
``schemas/config.schema.yaml`` the JSON Schema they are validated against.
"""
from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml


def get_data_path(subpackage: str, filename: str = "") -> Path:
    """Return the installed location of ``<subpackage>/<filename>``.

    Without ``filename`` the subpackage directory itself is returned.
    """
    root = Path(str(resources.files(__name__)))
    return root.joinpath(subpackage, filename) if filename else root / subpackage


@lru_cache(maxsize=16)
def read_yaml(subpackage: str, filename: str) -> dict[str, Any]:
    """Parse a bundled YAML file, caching the result.

    The mapping is shared between callers; copy it before changing it.
    A file whose top level is not a mapping reads as ``{}``.
    """
    path = get_data_path(subpackage, filename)
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    return data if isinstance(data, dict) else {}


__all__ = ["get_data_path", "read_yaml"]
