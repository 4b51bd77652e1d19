"""Small string helpers used by the tagged logger."""

from .pad import pad
from .stringformat import string_format

__all__ = ["pad", "string_format"]
