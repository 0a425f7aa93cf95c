from __future__ import annotations

from typing import Any

from humanesort.order import humane_order
from humanesort.types import Ordering


class HumaneString:
    """
    Owned string that sorts in humane order.

    Equality and hashing use the raw string, ordering uses humane_order, so
    HumaneString("007") != HumaneString("7") although neither is less than the other.
    """

    __slots__ = ("_data",)

    def __init__(self, data: str):
        if not isinstance(data, str):
            raise TypeError(f"HumaneString expects str, got {type(data).__name__}")
        self._data = str(data)

    @property
    def data(self) -> str:
        return self._data

    def __str__(self) -> str:
        return self._data

    def __repr__(self) -> str:
        return f"HumaneString({self._data!r})"

    def __hash__(self) -> int:
        return hash(self._data)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, HumaneString):
            return NotImplemented
        return self._data == other._data

    def _order(self, other: Any):
        if not isinstance(other, HumaneString):
            return NotImplemented
        return humane_order(self._data, other._data)

    # total_ordering would derive <= from (< or ==), which is wrong for "007" vs "7".
    def __lt__(self, other: Any) -> bool:
        o = self._order(other)
        return o if o is NotImplemented else o is Ordering.LESS

    def __le__(self, other: Any) -> bool:
        o = self._order(other)
        return o if o is NotImplemented else o is not Ordering.GREATER

    def __gt__(self, other: Any) -> bool:
        o = self._order(other)
        return o if o is NotImplemented else o is Ordering.GREATER

    def __ge__(self, other: Any) -> bool:
        o = self._order(other)
        return o if o is NotImplemented else o is not Ordering.LESS
