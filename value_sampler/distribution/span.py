"""
Contiguous value spans for uniform distributions.
"""

import math
from collections.abc import Sequence
from typing import Any, Iterator


class Span(Sequence):
    """
    A lazy, contiguous run of values from first to last.

    Unlike the builtin range, the end is included unless exclusive is set, and
    the endpoints may be of any type where last - first is a real number and
    first + i gives the i-th value. The values step by one from first, so an
    exclusive end stops at the last step strictly below last.

    Examples:
        Span(1, 6)                  -> 1, 2, 3, 4, 5, 6
        Span(1, 6, exclusive=True)  -> 1, 2, 3, 4, 5
        Span(0.5, 2.5)              -> 0.5, 1.5, 2.5
        Span(0.5, 3.0, exclusive=True) -> 0.5, 1.5, 2.5
    """

    __slots__ = ('first', 'last', 'exclusive', '_count')

    def __init__(self, first: Any, last: Any, exclusive: bool = False):
        self.first = first
        self.last = last
        self.exclusive = exclusive
        distance = last - first
        if exclusive:
            self._count = math.ceil(distance)
        else:
            self._count = math.floor(distance) + 1

    def __len__(self) -> int:
        return max(self._count, 0)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError("Span index out of range")
        return self.first + index

    def __iter__(self) -> Iterator[Any]:
        for index in range(len(self)):
            yield self.first + index

    def __contains__(self, value: Any) -> bool:
        try:
            offset = value - self.first
            whole = int(offset)
        except (TypeError, ValueError, OverflowError):
            return False
        return offset == whole and 0 <= whole < len(self)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return (self.first, len(self)) == (other.first, len(other))

    def __hash__(self) -> int:
        return hash((Span, self.first, len(self)))

    def __repr__(self) -> str:
        operator = "..." if self.exclusive else ".."
        return f"Span({self.first!r}{operator}{self.last!r})"
