"""Synchronous publish/subscribe dispatcher.

Usage:
    dispatcher = EventDispatcher()

    def on_saved(path, size):
        print(f"saved {path} ({size} bytes)")

    dispatcher.subscribe("file.saved", on_saved)
    dispatcher.trigger("file.saved", ArgList(["/tmp/a.txt", 42]))
    dispatcher.unsubscribe("file.saved", on_saved)

A good way to use this is to subclass ``EventSource`` in a component: the
component then accepts subscribers from the outside but can only trigger
events from the inside.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
import logging
from typing import Any

from ..exceptions import InvalidArgumentError

LOGGER = logging.getLogger(__name__)

_NO_DATA: Any = object()

_current_context: ContextVar[Any] = ContextVar("dropins_event_context", default=None)


@dataclass(frozen=True)
class SingleArg:
    """Deliver ``value`` to subscribers as one positional argument."""

    value: Any


@dataclass(frozen=True)
class ArgList:
    """Deliver each item of ``values`` to subscribers as its own positional argument."""

    values: Sequence[Any]


def current_context() -> Any:
    """Return the context bound by the innermost running ``trigger``.

    Outside of a subscriber callback this returns ``None``.
    """
    return _current_context.get()


@contextmanager
def _bound_context(context: Any) -> Iterator[None]:
    token = _current_context.set(context)
    try:
        yield
    finally:
        _current_context.reset(token)


def _same_callback(left: Callable[..., Any], right: Callable[..., Any]) -> bool:
    if left is right:
        return True
    # Attribute access creates a fresh bound method each time. Method equality,
    # for Python and builtin methods alike, compares the instance by identity.
    if getattr(left, "__self__", None) is None or getattr(right, "__self__", None) is None:
        return False
    return bool(left == right)


def _positional_args(data: Any) -> tuple[Any, ...]:
    if data is _NO_DATA:
        return ()
    if isinstance(data, ArgList):
        return tuple(data.values)
    if isinstance(data, SingleArg):
        return (data.value,)
    # Plain lists spread like ArgList; anything else is a single argument.
    if isinstance(data, list):
        return tuple(data)
    return (data,)


class EventDispatcher:
    """Keeps named subscriber lists and notifies them synchronously.

    Callbacks run in subscription order on the caller's stack. An exception
    from a callback stops the remaining callbacks and reaches the caller of
    ``trigger`` untouched.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Callable[..., Any]]] = {}

    def _lookup(self, event_name: Any) -> list[Callable[..., Any]] | None:
        # Unhashable names can never have been subscribed.
        try:
            return self._subscribers.get(event_name)
        except TypeError:
            return None

    def subscribe(self, event_name: str, callback: Callable[..., Any]) -> None:
        """Register ``callback`` to run whenever ``event_name`` is triggered.

        Subscribing a callback that is already registered for the event does
        nothing.

        Raises:
            InvalidArgumentError: ``event_name`` is not a string or
                ``callback`` is not callable.
        """
        if not isinstance(event_name, str):
            raise InvalidArgumentError("subscribe: expecting str event_name")
        if not callable(callback):
            raise InvalidArgumentError("subscribe: expecting callable callback")

        subscribers = self._subscribers.setdefault(event_name, [])
        if any(_same_callback(existing, callback) for existing in subscribers):
            return
        subscribers.append(callback)
        LOGGER.debug(
            "events.subscribed",
            extra={
                "event": "events.subscribed",
                "event_name": event_name,
                "subscriber_count": len(subscribers),
            },
        )

    def unsubscribe(self, event_name: Any, callback: Any) -> None:
        """Stop ``callback`` from running when ``event_name`` is triggered.

        Unknown events and callbacks that were never subscribed are ignored.
        """
        subscribers = self._lookup(event_name)
        if subscribers is None:
            return
        for index, existing in enumerate(subscribers):
            if _same_callback(existing, callback):
                del subscribers[index]
                LOGGER.debug(
                    "events.unsubscribed",
                    extra={
                        "event": "events.unsubscribed",
                        "event_name": event_name,
                        "subscriber_count": len(subscribers),
                    },
                )
                return

    def trigger(self, event_name: Any, data: Any = _NO_DATA, context: Any = None) -> None:
        """Invoke every subscriber of ``event_name``.

        Args:
            event_name: Event to notify.
            data: ``ArgList`` or a plain ``list`` spreads into positional
                arguments, ``SingleArg`` or any other value is passed as the
                only argument. When omitted, callbacks get no arguments.
            context: Value returned by ``current_context()`` inside the
                callbacks. Defaults to this dispatcher.
        """
        subscribers = self._lookup(event_name)
        if not subscribers:
            return

        args = _positional_args(data)
        bound = self if context is None else context
        with _bound_context(bound):
            for callback in list(subscribers):
                callback(*args)

    def subscriber_count(self, event_name: Any) -> int:
        """Return how many callbacks are registered for ``event_name``."""
        return len(self._lookup(event_name) or ())


class EventSource:
    """Base for components that publish events but only trigger internally.

    Subclasses call ``_trigger``; outside code may only ``subscribe`` and
    ``unsubscribe``. Subscribers see the component itself as their context.
    """

    def __init__(self) -> None:
        self._events = EventDispatcher()

    def subscribe(self, event_name: str, callback: Callable[..., Any]) -> None:
        self._events.subscribe(event_name, callback)

    def unsubscribe(self, event_name: Any, callback: Any) -> None:
        self._events.unsubscribe(event_name, callback)

    def _trigger(self, event_name: Any, data: Any = _NO_DATA) -> None:
        self._events.trigger(event_name, data, self)
