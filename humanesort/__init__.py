"""Sorting strings the way humans would: "file2" before "file10"."""
from humanesort.errors import HumaneSortError, NumericTokenError
from humanesort.order import humane_key, humane_order, humane_sort, humane_sorted, parse_numeric, sorting_type
from humanesort.string import HumaneString
from humanesort.tokenizer import TokenIterator, graphemes, tokenize
from humanesort.types import Ordering, SortingType, Token

__version__ = "0.1.0"

__all__ = [
    "HumaneSortError",
    "NumericTokenError",
    "HumaneString",
    "Ordering",
    "SortingType",
    "Token",
    "TokenIterator",
    "graphemes",
    "tokenize",
    "sorting_type",
    "parse_numeric",
    "humane_order",
    "humane_key",
    "humane_sort",
    "humane_sorted",
]
