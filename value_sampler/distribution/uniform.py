"""
Uniform discrete distributions.
"""

import copy
import math
import numbers
import random
from collections.abc import Iterable, Set
from typing import Any, List, Optional, Sequence, TypeVar

import numpy as np

from value_sampler.distribution.base import RemovableDistribution
from value_sampler.distribution.span import Span
from value_sampler.errors import EmptyPopulation, InvalidDistributionInput, NegativeRangeBound
from value_sampler.logging import log_distribution_created, log_invalid_input

# Type variable for distribution outcomes
T = TypeVar('T')


class UniformDistribution(RemovableDistribution[T]):
    """
    Uniform distribution over a finite population of values.

    Each entry of the population has probability 1 / num_values. Ranges (the
    builtin range, a Span, or a non-negative integer bound) are kept lazy so
    that huge populations can be sampled without materializing them; lists
    and other iterables are copied as given. Duplicates are NOT removed, so
    repeating a value in a list is a way to approximate a non-uniform
    distribution. Pass a set if you want uniqueness.
    """

    def __init__(self, values: Any, rng: Optional[random.Random] = None):
        """
        Initialize a uniform distribution.

        Args:
            values: One of
                - a set or frozenset of values
                - a list, tuple, numpy array or other iterable of values
                  (duplicates are kept)
                - a range or Span (kept lazy)
                - a non-negative integer U, meaning the inclusive span 0..U
            rng: Random number generator; defaults to the global random module

        Raises:
            EmptyPopulation: If there are no values
            NegativeRangeBound: If a negative integer bound is given
            InvalidDistributionInput: If values is not one of the shapes above
        """
        self._rng = rng if rng is not None else random
        self._values = self._coerce_values(values)
        self._probability = None
        self._members = None

        if len(self._values) == 0:
            log_invalid_input("EmptyPopulation", kind="uniform", values=repr(values))
            raise EmptyPopulation(
                f"Cannot create uniform distribution from empty input: {values!r}"
            )

        log_distribution_created(
            type(self).__name__,
            len(self._values),
            representation=type(self._values).__name__
        )

    @staticmethod
    def _coerce_values(values: Any) -> Sequence[T]:
        """Turn the constructor input into a list or a lazy sequence."""
        if isinstance(values, (bool, np.bool_)):
            # bools are Integral, but a bound of True is almost surely a mistake
            log_invalid_input("InvalidDistributionInput", kind="uniform", values=repr(values))
            raise InvalidDistributionInput(
                f"Cannot create uniform distribution from boolean {values!r}"
            )
        if isinstance(values, (numbers.Integral, np.integer)):
            bound = int(values)
            if bound < 0:
                log_invalid_input("NegativeRangeBound", kind="uniform", bound=bound)
                raise NegativeRangeBound(
                    f"Scalar input must be at least 0 to create distribution, got {bound}"
                )
            return Span(0, bound)
        if isinstance(values, (range, Span)):
            return values
        if isinstance(values, Set):
            return list(values)
        if isinstance(values, np.ndarray):
            return values.ravel().tolist()
        if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
            log_invalid_input("InvalidDistributionInput", kind="uniform", values=repr(values))
            raise InvalidDistributionInput(
                f"Cannot create uniform distribution from {type(values).__name__} {values!r}"
            )
        return list(values)

    def sample_from_distribution(self) -> T:
        """
        Return a value drawn uniformly at random.

        Returns:
            A randomly chosen entry of the population
        """
        count = len(self._values)
        if count == 0:
            raise EmptyPopulation("Cannot sample from an exhausted uniform distribution")

        # float rounding can reach count on very large spans
        index = min(math.floor(self._rng.random() * count), count - 1)
        return self._values[index]

    def sample_from_distribution_and_remove(self) -> T:
        """
        Draw a value, then remove one occurrence of it from the population.

        A lazy range is turned into a list first, so removal on a very large
        range is expensive.

        Returns:
            The sampled value
        """
        sample = self.sample_from_distribution()

        if not isinstance(self._values, list):
            self._values = list(self._values)

        self._values.remove(sample)
        self._probability = None
        self._members = None

        return sample

    def all_values(self) -> List[T]:
        """
        Return every entry of the population, duplicates included.

        Returns:
            A new list of values
        """
        return list(self._values)

    def num_values(self) -> int:
        return len(self._values)

    def _contains(self, value: Any) -> bool:
        """Membership test, backed by a cached set for hashable lists."""
        if not isinstance(self._values, list):
            return value in self._values

        if self._members is None:
            try:
                self._members = frozenset(self._values)
            except TypeError:
                # unhashable entries: fall back to scanning the list
                self._members = False

        if self._members is not False:
            try:
                return value in self._members
            except TypeError:
                pass
        return value in self._values

    def probability_of(self, value: Any) -> float:
        """
        Return 1 / num_values if value is in the population, else 0.0.

        A duplicated value still reports the probability of one entry.

        Args:
            value: Any value

        Returns:
            Probability of drawing that entry
        """
        if not self._contains(value):
            return 0.0

        if self._probability is None:
            self._probability = 1.0 / len(self._values)
        return self._probability

    def copy(self) -> 'UniformDistribution[T]':
        clone = copy.copy(self)
        if isinstance(self._values, list):
            clone._values = list(self._values)
        return clone

    def __repr__(self) -> str:
        """
        Return a string representation of the distribution.

        Returns:
            String representation
        """
        if not isinstance(self._values, list):
            values_str = repr(self._values)
        elif len(self._values) <= 5:
            values_str = str(self._values)
        else:
            values_str = f"[{', '.join(repr(v) for v in self._values[:3])}, ..., {self._values[-1]!r}]"
        return f"UniformDistribution({values_str})"
