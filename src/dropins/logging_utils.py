"""Logging bootstrap utilities with optional structured output."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import structlog

_SHARED_PROCESSORS: list[Any] = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def _best_effort_private_permissions(path: Path) -> None:
    if os.name != "posix":
        return
    try:
        path.chmod(0o600)
    except OSError:
        logging.getLogger(__name__).warning(
            "Unable to enforce 0600 permissions for %s", path
        )


def _app_only_filter(record: logging.LogRecord) -> bool:
    return record.name.startswith("dropins")


def _build_formatter(structured: bool) -> logging.Formatter:
    if structured:
        renderer: Any = structlog.processors.JSONRenderer(
            ensure_ascii=False, separators=(",", ":")
        )
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ExtraAdder(),
        ],
    )


def configure_logging(logging_config: dict[str, Any]) -> None:
    """Configure root logging according to app config using structlog."""
    level_name = str(logging_config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    structured = bool(logging_config.get("structured", True))
    log_to_file = bool(logging_config.get("log_to_file", False))
    log_file_path = str(
        logging_config.get("log_file_path", "~/.local/state/dropins/dropins.log")
    )

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    # Both logging.getLogger(__name__) and structlog.get_logger() end up in
    # the same stdlib handlers.
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = _build_formatter(structured)

    stderr_handler = logging.StreamHandler()
    stderr_handler.setLevel(level)
    stderr_handler.setFormatter(formatter)
    stderr_handler.addFilter(_app_only_filter)
    root.addHandler(stderr_handler)

    if log_to_file:
        target = Path(log_file_path).expanduser()
        target.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(target, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        _best_effort_private_permissions(target)


class StructlogConsole:
    """Console-like sink that forwards to a structlog logger.

    Arguments are joined with single spaces, the way a browser console
    prints several values on one line.
    """

    def __init__(self, name: str = "dropins.console") -> None:
        self._logger = structlog.get_logger(name)

    @staticmethod
    def _join(args: tuple[Any, ...]) -> str:
        return " ".join(str(arg) for arg in args)

    def log(self, *args: Any) -> None:
        self._logger.info(self._join(args))

    def debug(self, *args: Any) -> None:
        self._logger.debug(self._join(args))

    def info(self, *args: Any) -> None:
        self._logger.info(self._join(args))

    def warn(self, *args: Any) -> None:
        self._logger.warning(self._join(args))

    def error(self, *args: Any) -> None:
        self._logger.error(self._join(args))
