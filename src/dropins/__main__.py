"""CLI entrypoint for dropins."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from importlib import metadata
from pathlib import Path
import sys

from .config import load_config
from .exceptions import InvalidArgumentError
from .logging_utils import configure_logging
from .tagged_logger import TaggedLogger
from .text import pad, string_format

_LEVELS = ("log", "debug", "info", "warn", "error")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dropins",
        description="dropins - small string and logging helpers",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a config.toml (defaults to ~/.config/dropins/config.toml)",
    )
    commands = parser.add_subparsers(dest="command")

    format_cmd = commands.add_parser("format", help="Fill {0}, {1}, ... placeholders")
    format_cmd.add_argument("template")
    format_cmd.add_argument("values", nargs="*")

    pad_cmd = commands.add_parser("pad", help="Pad a value to a minimum length")
    pad_cmd.add_argument("value")
    pad_cmd.add_argument("--char", default=" ")
    pad_cmd.add_argument("--length", type=float, required=True)
    pad_cmd.add_argument("--end", action="store_true", help="Pad the end instead of the start")

    log_cmd = commands.add_parser("log", help="Emit one tagged log line")
    log_cmd.add_argument("message", nargs="+")
    log_cmd.add_argument("--level", choices=_LEVELS, default="info")
    log_cmd.add_argument("--tag", default=None)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, configure logging and run the selected helper."""

    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.version:
        try:
            version = metadata.version("dropins")
        except metadata.PackageNotFoundError:
            version = "0.0.0"
        print(f"dropins {version}")
        return 0

    if args.command is None:
        parser.print_help()
        return 0

    config = load_config(config_path=args.config)
    configure_logging(config["logging"])

    try:
        if args.command == "format":
            print(string_format(args.template, *args.values))
        elif args.command == "pad":
            print(pad(args.value, args.char, args.length, args.end))
        else:
            logger = TaggedLogger(
                args.tag or config["tagged_logger"]["default_tag"],
                enabled=config["tagged_logger"]["enabled"],
            )
            getattr(logger, args.level)(*args.message)
    except InvalidArgumentError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
