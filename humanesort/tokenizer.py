from __future__ import annotations

from typing import Callable, Generic, Iterator, List, Optional, Tuple, TypeVar

import regex  # 'regex' module: \X matches one extended grapheme cluster

from humanesort.types import Token

# Grapheme-aware run splitter.
# Rules:
# - Input is walked one extended grapheme cluster at a time, never by code point.
# - Each grapheme is classified once, as a single-grapheme string.
# - A run grows while the next grapheme's class equals the previous grapheme's class.
# - Offsets are code-point indices into the source; end is exclusive.
# - Coverage: every character belongs to exactly one token.

T = TypeVar("T")

_GRAPHEME = regex.compile(r"\X")


def graphemes(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (offset, cluster) for every grapheme cluster of `text`, lazily."""
    for m in _GRAPHEME.finditer(text):
        yield m.start(), m.group(0)


class TokenIterator(Generic[T]):
    """
    Pull-based tokenizer over grapheme clusters.

    `classify` must be a pure function of its input text; the iterator is
    single-pass, so build a new one to walk the same string again.
    """

    def __init__(self, text: str, classify: Callable[[str], T]):
        self._text = text
        self._classify = classify
        self._graphemes = graphemes(text)
        # lookahead: (offset, kind) of the first grapheme of the next run
        self._pending: Optional[Tuple[int, T]] = None
        first = next(self._graphemes, None)
        if first is not None:
            self._pending = (first[0], classify(first[1]))

    def __iter__(self) -> "TokenIterator[T]":
        return self

    def __next__(self) -> Token[T]:
        if self._pending is None:
            raise StopIteration
        start, kind = self._pending
        for offset, cluster in self._graphemes:
            next_kind = self._classify(cluster)
            if next_kind != kind:
                self._pending = (offset, next_kind)
                return Token(text=self._text[start:offset], start=start, end=offset, kind=kind)
        self._pending = None
        end = len(self._text)
        return Token(text=self._text[start:end], start=start, end=end, kind=kind)


def tokenize(text: str, classify: Optional[Callable[[str], T]] = None) -> List[Token]:
    """Eagerly split `text` into tokens; defaults to the numeric/non-numeric classifier."""
    if classify is None:
        from humanesort.order import sorting_type
        classify = sorting_type
    return list(TokenIterator(text, classify))
