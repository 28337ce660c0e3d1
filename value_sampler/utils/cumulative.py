"""
Cumulative-weight utilities for inverse-CDF sampling.

This module provides the running sums over a fixed-order list of weights
and the search that maps a uniform draw onto an index in that list.
"""

import bisect
import itertools
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, TypeVar

# Type variables for values
T = TypeVar('T')
U = TypeVar('U')


def accumulate(
    iterable: Iterable[T],
    func: Callable[[U, T], U],
    *,
    initial: Optional[U] = None
) -> Iterator[U]:
    """
    Make an iterator that returns accumulated results of a binary function.

    This function is similar to itertools.accumulate but allows an initial value.

    Args:
        iterable: Input iterable
        func: Binary function to apply
        initial: Optional initial value

    Returns:
        Iterator of accumulated values
    """
    if initial is not None:
        iterable = itertools.chain([initial], iterable)

    return itertools.accumulate(iterable, func)


def cumulative_weights(weights: Iterable[float]) -> List[float]:
    """
    Return the running sums of the given weights, in order.

    The sums are accumulated left to right, so the last entry equals the
    total mass computed the same way.

    Args:
        weights: Non-negative weights in sampling order

    Returns:
        List where entry i is the sum of weights[0..i]
    """
    return list(accumulate((float(w) for w in weights), lambda a, b: a + b))


def search_cumulative(cumulative: Sequence[float], target: float) -> int:
    """
    Find the first index whose cumulative weight strictly exceeds target.

    This is the inverse-CDF step of weighted sampling. If rounding leaves no
    entry above target (target at or beyond the final sum), the last index
    is returned.

    Args:
        cumulative: Non-decreasing running sums, as from cumulative_weights
        target: A draw in [0, total mass)

    Returns:
        Index into the weight list

    Raises:
        ValueError: If cumulative is empty
    """
    if not cumulative:
        raise ValueError("search_cumulative called on an empty sequence")

    index = bisect.bisect_right(cumulative, target)
    return min(index, len(cumulative) - 1)
