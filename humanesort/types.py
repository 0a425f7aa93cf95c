# humanesort/types.py
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class SortingType(enum.Enum):
    """Classification of a token for humane ordering."""
    NUMERIC = "numeric"
    NON_NUMERIC = "non_numeric"


class Ordering(enum.IntEnum):
    """Comparison verdict; usable wherever a cmp-style int is expected."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class Token(Generic[T]):
    """
    Maximal run of same-classified grapheme clusters.
    Fields:
      text: the run itself
      start: inclusive code-point offset in the source string
      end: exclusive code-point offset in the source string
      kind: classification shared by every grapheme in the run
    """
    text: str
    start: int
    end: int
    kind: T

    def __len__(self) -> int:
        return self.end - self.start
