"""Positional ``{0}``-style string formatting."""

from __future__ import annotations

from typing import Any

from ..exceptions import InvalidArgumentError


def string_format(template: str, *args: Any) -> str:
    """Replace ``{0}``, ``{1}``, ... in ``template`` with ``str()`` of each argument.

    Only the first occurrence of each placeholder is replaced, and
    placeholders without a matching argument are left untouched.

    Raises:
        InvalidArgumentError: ``template`` is not a string.
    """
    if not isinstance(template, str):
        raise InvalidArgumentError(
            string_format(
                "string_format: template should be str, {0} given.",
                type(template).__name__,
            )
        )

    result = template
    for index, value in enumerate(args):
        result = result.replace("{" + str(index) + "}", str(value), 1)
    return result
