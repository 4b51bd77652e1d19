"""Top-level package for dropins."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .config import load_config
    from .events import ArgList, EventDispatcher, EventSource, SingleArg, current_context
    from .exceptions import ConfigValidationError, DropinsError, InvalidArgumentError
    from .tagged_logger import TaggedLogger
    from .text import pad, string_format

__all__ = [
    "ArgList",
    "ConfigValidationError",
    "DropinsError",
    "EventDispatcher",
    "EventSource",
    "InvalidArgumentError",
    "SingleArg",
    "TaggedLogger",
    "current_context",
    "load_config",
    "pad",
    "string_format",
]


def __getattr__(name: str) -> Any:
    """Lazily import symbols so importing the package stays cheap."""
    if name in {"ArgList", "EventDispatcher", "EventSource", "SingleArg", "current_context"}:
        from . import events

        return getattr(events, name)
    if name in {"ConfigValidationError", "DropinsError", "InvalidArgumentError"}:
        from . import exceptions

        return getattr(exceptions, name)
    if name in {"pad", "string_format"}:
        from . import text

        return getattr(text, name)
    if name == "TaggedLogger":
        from .tagged_logger import TaggedLogger

        return TaggedLogger
    if name == "load_config":
        from .config import load_config

        return load_config
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
