"""In-process publish/subscribe primitives."""

from .dispatcher import ArgList, EventDispatcher, EventSource, SingleArg, current_context

__all__ = ["ArgList", "EventDispatcher", "EventSource", "SingleArg", "current_context"]
