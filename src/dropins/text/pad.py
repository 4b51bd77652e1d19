"""Fixed-width padding for short strings."""

from __future__ import annotations

import math
from typing import Any

from ..exceptions import InvalidArgumentError


def pad(value: Any, pad_char: Any, desired_length: Any, pad_end: bool = False) -> str:
    """Pad ``value`` with ``pad_char`` until it is ``desired_length`` long.

    Strings already at or above the desired length come back unchanged.
    ``pad_end`` pads on the right instead of the left.

    Raises:
        InvalidArgumentError: ``pad_char`` is not exactly one character.
    """
    text = str(value)
    fill = str(pad_char)
    width = math.floor(float(desired_length))

    if len(fill) != 1:
        raise InvalidArgumentError(
            f"pad: pad_char should be exactly one character long, "
            f"but is {len(fill)} characters long"
        )

    if len(text) >= width:
        return text

    padding = fill * (width - len(text))
    return text + padding if pad_end else padding + text
