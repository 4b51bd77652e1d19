"""Android-style tagged logger.

Produces lines such as ``D (12:34:56.123) [ModuleTag] log message`` where the
letter is the severity, the parentheses hold a fixed-width timestamp and the
tag names the component that logged.

Usage:
    logger = TaggedLogger("MyModule")
    logger.debug("Uh-oh, everything is broken!")
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from .logging_utils import StructlogConsole
from .text import pad, string_format

_DEFAULT_CONSOLE: Any = object()


def build_prefix(level: str, tag: str, now: datetime) -> str:
    """Build the ``L (HH:MM:SS.mmm) [tag]`` prefix for one log entry."""
    return string_format(
        "{0} ({1}:{2}:{3}.{4}) [{5}]",
        level,
        pad(now.hour, "0", 2),
        pad(now.minute, "0", 2),
        pad(now.second, "0", 2),
        pad(now.microsecond // 1000, "0", 3),
        tag,
    )


class TaggedLogger:
    """Prefix messages with severity, time and tag, then hand them to a console.

    The console is any object with ``log``/``debug``/``info``/``warn``/``error``
    methods. Missing console, missing method, no arguments or a disabled
    logger all make a call a silent no-op.
    """

    def __init__(
        self,
        tag: str,
        console: Any = _DEFAULT_CONSOLE,
        enabled: bool = True,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.tag = tag
        self.console = StructlogConsole() if console is _DEFAULT_CONSOLE else console
        self.enabled = enabled
        self._clock = clock

    def _emit(self, method_name: str, level: str, args: tuple[Any, ...]) -> None:
        if not args or not self.enabled:
            return
        method = getattr(self.console, method_name, None)
        if not callable(method):
            return
        method(build_prefix(level, self.tag, self._clock()), *args)

    def log(self, *args: Any) -> None:
        self._emit("log", "L", args)

    def debug(self, *args: Any) -> None:
        self._emit("debug", "D", args)

    def info(self, *args: Any) -> None:
        self._emit("info", "I", args)

    def warn(self, *args: Any) -> None:
        self._emit("warn", "W", args)

    def error(self, *args: Any) -> None:
        self._emit("error", "E", args)
