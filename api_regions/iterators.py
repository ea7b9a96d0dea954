"""
Lazy concatenation of several iterables.

Used by ApiRegion to walk its own exports followed by the exports of every
ancestor without building an intermediate list.
"""

from __future__ import annotations

from typing import Iterable, Iterator, TypeVar

T = TypeVar("T")

_MISSING = object()


class JoinedIterator(Iterator[T]):
    """
    Iterate over a sequence of iterables as if they were one.

    Each iterable is exhausted before moving on to the next one and empty
    iterables are skipped. The outer iterable is consumed lazily too, so a
    generator can decide what the next iterable is only when it is needed.

    Examples:
        >>> list(JoinedIterator([["a"], [], ["b", "c"]]))
        ['a', 'b', 'c']
    """

    def __init__(self, iterables: Iterable[Iterable[T]]):
        self._iterables = iter(iterables)
        self._current: Iterator[T] | None = None
        self._lookahead: object = _MISSING
        self._exhausted = False

    def has_next(self) -> bool:
        """Return True if another element is available."""
        if self._lookahead is not _MISSING:
            return True
        if self._exhausted:
            return False

        while True:
            if self._current is not None:
                for item in self._current:
                    self._lookahead = item
                    return True
            try:
                self._current = iter(next(self._iterables))
            except StopIteration:
                self._current = None
                self._exhausted = True
                return False

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        item = self._lookahead
        self._lookahead = _MISSING
        return item  # type: ignore[return-value]

    def __iter__(self) -> "JoinedIterator[T]":
        return self
