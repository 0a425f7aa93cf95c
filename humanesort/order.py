"""
Does:
    Humane (natural) ordering of strings.
    - Splits both strings into numeric / non-numeric grapheme runs.
    - Walks the two token streams in lock-step, never buffering a full list.
    - Numeric runs compare by unsigned value (leading zeros are insignificant),
      other runs by code-point order; a numeric run sorts before a non-numeric one.

Outputs:
    humane_order(): Ordering.LESS | EQUAL | GREATER.
    humane_key / humane_sorted / humane_sort: helpers for list.sort and sorted().

Notes:
    * Two different strings may compare EQUAL ("007" vs "7"). Equality of the
      order is not string equality, and ties are not broken by text.
    * A numeric run that does not fit the configured width raises
      NumericTokenError; it is never compared as text instead.
"""
from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Iterable, List, Optional

from humanesort.config import OrderCfg
from humanesort.errors import NumericTokenError
from humanesort.tokenizer import TokenIterator
from humanesort.types import Ordering, SortingType

_LOGGER = logging.getLogger("humanesort.order")

DEFAULT_BITS = 64

__all__ = [
    "DEFAULT_BITS",
    "sorting_type",
    "parse_numeric",
    "humane_order",
    "humane_key",
    "humane_sorted",
    "humane_sort",
]


def _is_ascii_digits(text: str) -> bool:
    # str.isdigit() alone accepts '²' and Arabic-Indic digits; int() would parse some of those.
    return bool(text) and text.isascii() and text.isdigit()


def _fits(text: str, bits: int) -> bool:
    # compare digit counts first; int() refuses very long strings on recent interpreters
    digits = text.lstrip("0")
    limit = (1 << bits) - 1
    if len(digits) > len(str(limit)):
        return False
    return int(digits or "0") <= limit


def sorting_type(text: str, bits: int = DEFAULT_BITS) -> SortingType:
    """NUMERIC iff `text` is an unsigned integer (ASCII digits only) that fits in `bits`."""
    if _is_ascii_digits(text) and _fits(text, bits):
        return SortingType.NUMERIC
    return SortingType.NON_NUMERIC


def parse_numeric(text: str, bits: int = DEFAULT_BITS) -> int:
    """Parse a numeric token; fails loudly on malformed text or overflow."""
    if not _is_ascii_digits(text):
        _LOGGER.debug("malformed numeric token %r", text)
        raise NumericTokenError(text, bits, reason="not an unsigned integer")
    if not _fits(text, bits):
        _LOGGER.debug("numeric token of %d digits overflows u%d", len(text), bits)
        raise NumericTokenError(text, bits, reason="overflow")
    return int(text.lstrip("0") or "0")


def _as_str(value: Any) -> str:
    if isinstance(value, str):
        return value
    from humanesort.string import HumaneString
    if isinstance(value, HumaneString):
        return value.data
    raise TypeError(f"humane_order expects str or HumaneString, got {type(value).__name__}")


def _cmp(a, b) -> Ordering:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def humane_order(this: Any, other: Any, *, cfg: Optional[OrderCfg] = None) -> Ordering:
    """
    Compare two strings in humane order.

    >>> humane_order("file2", "file10")
    <Ordering.LESS: -1>
    >>> sorted(["2-lul", "1-lul"], key=humane_key)
    ['1-lul', '2-lul']
    """
    bits = cfg.numeric_bits if cfg is not None else DEFAULT_BITS

    def classify(s: str) -> SortingType:
        return sorting_type(s, bits)

    ours_it = TokenIterator(_as_str(this), classify)
    theirs_it = TokenIterator(_as_str(other), classify)
    while True:
        ours = next(ours_it, None)
        theirs = next(theirs_it, None)
        if ours is None and theirs is None:
            return Ordering.EQUAL
        if ours is None:
            return Ordering.LESS
        if theirs is None:
            return Ordering.GREATER

        if ours.kind is SortingType.NUMERIC and theirs.kind is SortingType.NON_NUMERIC:
            return Ordering.LESS
        if ours.kind is SortingType.NON_NUMERIC and theirs.kind is SortingType.NUMERIC:
            return Ordering.GREATER
        if ours.kind is SortingType.NUMERIC:
            verdict = _cmp(parse_numeric(ours.text, bits), parse_numeric(theirs.text, bits))
        else:
            verdict = _cmp(ours.text, theirs.text)
        if verdict is not Ordering.EQUAL:
            return verdict


humane_key = functools.cmp_to_key(humane_order)


def _keyed(key: Optional[Callable[[Any], Any]], cfg: Optional[OrderCfg]):
    if key is None and cfg is None:
        return humane_key
    get = key if key is not None else (lambda x: x)
    to_key = functools.cmp_to_key(functools.partial(humane_order, cfg=cfg))
    return lambda item: to_key(get(item))


def humane_sort(
    lst: List[Any],
    *,
    key: Optional[Callable[[Any], Any]] = None,
    reverse: bool = False,
    cfg: Optional[OrderCfg] = None,
) -> None:
    """Humane in-place sort (stable)."""
    lst.sort(key=_keyed(key, cfg), reverse=reverse)


def humane_sorted(
    items: Iterable[Any],
    *,
    key: Optional[Callable[[Any], Any]] = None,
    reverse: bool = False,
    cfg: Optional[OrderCfg] = None,
) -> List[Any]:
    """
    Return a new list sorted in humane order.

    >>> humane_sorted(["11", "2", "a", "1"])
    ['1', '2', '11', 'a']
    """
    out = list(items)
    humane_sort(out, key=key, reverse=reverse, cfg=cfg)
    return out
