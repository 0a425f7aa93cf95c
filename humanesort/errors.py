# humanesort/errors.py
from __future__ import annotations


class HumaneSortError(Exception):
    """Base class for errors raised by humanesort."""


class NumericTokenError(HumaneSortError, ValueError):
    """
    A token classified as numeric could not be parsed as an unsigned integer.

    Raised when the value exceeds the configured width or when a custom
    classifier marked non-digit text as numeric. Comparisons never fall back
    to text order for such a token.
    """

    def __init__(self, text: str, bits: int, reason: str = "overflow"):
        self.text = text
        self.bits = bits
        self.reason = reason
        shown = text if len(text) <= 40 else text[:37] + "..."
        super().__init__(f"numeric token {shown!r} is not a u{bits} value ({reason})")
