"""Errors raised by pleasant_path.

Every error derives from :class:`PleasantPathError` and carries a ``context``
mapping (the offending path, tag, key or config location) that
:meth:`PleasantPathError.to_json_error` folds into a serializable payload.
Argument, content and configuration errors are also ``ValueError``s.
Operating-system errors are never wrapped: ``FileNotFoundError`` and friends
reach the caller unchanged.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping


class PleasantPathError(Exception):
    """Root of the pleasant_path error hierarchy."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = dict(context or {})

    def to_json_error(self) -> Dict[str, Any]:
        """Describe the error as ``{"message", "code", "context"}``.

        ``code`` is the exception class name.
        """
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class PathArgumentError(PleasantPathError, ValueError):
    """Raised when a path helper receives an argument it cannot work with."""


class UnsafeContentError(PleasantPathError, ValueError):
    """Raised when a safe reader meets content that would build arbitrary types.

    ``context`` carries the offending ``path`` and, when known, the ``tag``
    that requested the type.
    """

    @property
    def tag(self) -> str | None:
        value = self.context.get("tag")
        return str(value) if value is not None else None


class ConfigError(PleasantPathError, ValueError):
    """Raised when the resolved configuration is invalid."""


__all__ = [
    "PleasantPathError",
    "PathArgumentError",
    "UnsafeContentError",
    "ConfigError",
]
