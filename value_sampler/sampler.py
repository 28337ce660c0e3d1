"""
Sampler facade over discrete probability distributions.

A Sampler wraps one distribution object and provides sampling with
replacement (sample), sampling without replacement (sample_unique) and
pass-through inspection of the probability mass function.
"""

import copy
import numbers
import random
from typing import Any, Callable, Generic, List, Optional, TypeVar, Union

from value_sampler.distribution.base import Distribution, REMOVE_OPERATION, REQUIRED_OPERATIONS, expectation
from value_sampler.distribution.uniform import UniformDistribution
from value_sampler.distribution.weighted import WeightedDistribution
from value_sampler.errors import InvalidDistribution, InvalidSampleCount
from value_sampler.logging import log_invalid_input, log_samples_drawn

# Type variable for sampled values
T = TypeVar('T')


def _check_count(method: str, n: Any, minimum: int) -> int:
    """Validate a sample count, returning it as a plain int."""
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        log_invalid_input("InvalidSampleCount", method=method, n=repr(n))
        raise InvalidSampleCount(f"n must be an integer for {method}, got {n!r}")
    n = int(n)
    if n < minimum:
        log_invalid_input("InvalidSampleCount", method=method, n=n)
        raise InvalidSampleCount(f"n must be {minimum} or greater to {method}, got {n}")
    return n


def _count_distinct(values: List[Any]) -> int:
    """Count distinct entries, allowing unhashable values."""
    try:
        return len(set(values))
    except TypeError:
        distinct: List[Any] = []
        for value in values:
            if value not in distinct:
                distinct.append(value)
        return len(distinct)


class Sampler(Generic[T]):
    """
    Draws random values from a discrete distribution.

    Use new_uniform() or new_non_uniform() to build a sampler from raw
    values, or pass any object implementing the Distribution operations
    (sample_from_distribution, all_values, num_values, probability_of) to
    the constructor. If the object also implements
    sample_from_distribution_and_remove, sample_unique() uses it.
    """

    def __init__(self, distribution: Distribution[T]):
        """
        Initialize a sampler around a distribution.

        Args:
            distribution: Object providing the Distribution operations

        Raises:
            InvalidDistribution: If any required operation is missing
        """
        missing = [name for name in REQUIRED_OPERATIONS
                   if not callable(getattr(distribution, name, None))]
        if missing:
            log_invalid_input(
                "InvalidDistribution",
                distribution_type=type(distribution).__name__,
                missing=missing
            )
            raise InvalidDistribution(
                f"Received non-distribution object of type '{type(distribution).__name__}' "
                f"(missing: {', '.join(missing)})"
            )

        self._distribution = distribution

    @classmethod
    def new_uniform(cls, values: Any, rng: Optional[random.Random] = None) -> 'Sampler[T]':
        """
        Create a sampler for a uniform distribution.

        Args:
            values: A set, list (or other iterable), range, Span, or a
                non-negative integer U meaning every integer in 0..U
            rng: Optional random number generator for reproducible draws

        Returns:
            Sampler over a UniformDistribution
        """
        return cls(UniformDistribution(values, rng=rng))

    @classmethod
    def new_non_uniform(cls, values_and_weights: Any, rng: Optional[random.Random] = None) -> 'Sampler[T]':
        """
        Create a sampler for a non-uniform distribution.

        If the weights are frequency counts rather than probabilities they are
        normalized; the input itself is left untouched. If you know the
        distribution is uniform, new_uniform() is much more efficient.

        Args:
            values_and_weights: A mapping of value -> weight, or a sequence
                of (value, weight) pairs
            rng: Optional random number generator for reproducible draws

        Returns:
            Sampler over a WeightedDistribution
        """
        return cls(WeightedDistribution(values_and_weights, rng=rng))

    @property
    def distribution(self) -> Distribution[T]:
        """The wrapped distribution."""
        return self._distribution

    def sample(self, n: int = 1) -> Union[T, List[T]]:
        """
        Draw n independent samples, with replacement.

        Duplicates are allowed; use sample_unique() to avoid them.

        Args:
            n: Number of samples, at least 1

        Returns:
            A single value when n == 1, otherwise a list of n values in draw order

        Raises:
            InvalidSampleCount: If n is not a positive integer
        """
        n = _check_count("sample", n, 1)

        samples = [self._distribution.sample_from_distribution() for _ in range(n)]
        log_samples_drawn("sample", n, len(samples))

        return samples[0] if n == 1 else samples

    def sample_unique(self, n: int = 1) -> Union[T, List[T]]:
        """
        Draw n distinct values, without replacement.

        When the distribution supports sample_from_distribution_and_remove,
        each drawn value is removed from it, so the sampler's population
        shrinks. Use copy() first if the full population is needed again.

        Distributions without a remove operation are sampled with
        replacement until n distinct values turn up, so for them n is also
        limited by the number of distinct entries in all_values().

        Args:
            n: Number of distinct values, between 0 and num_values()

        Returns:
            A single value when n == 1, otherwise a list of distinct values

        Raises:
            InvalidSampleCount: If n is negative or exceeds the values available
        """
        n = _check_count("sample_unique", n, 0)

        removable = callable(getattr(self._distribution, REMOVE_OPERATION, None))

        available = self._distribution.num_values()
        if not removable and n > 0:
            # repeated entries never run out, so only distinct ones count
            available = min(available, _count_distinct(self._distribution.all_values()))
        if n > available:
            log_invalid_input("InvalidSampleCount", method="sample_unique", n=n, available=available)
            raise InvalidSampleCount(
                f"Cannot draw {n} unique samples from a distribution with {available} values"
            )

        if removable:
            draw = self._distribution.sample_from_distribution_and_remove
        else:
            draw = self._distribution.sample_from_distribution

        # a list rather than a set, so values need not be hashable
        samples: List[T] = []
        while len(samples) < n and self._distribution.num_values() > 0:
            value = draw()
            if value not in samples:
                samples.append(value)

        log_samples_drawn("sample_unique", n, len(samples), remaining=self._distribution.num_values())

        return samples[0] if n == 1 and len(samples) == 1 else samples

    def probability_of(self, value: Any) -> float:
        """Return the probability of value (0.0 if it cannot be drawn)."""
        return self._distribution.probability_of(value)

    def all_values(self) -> List[T]:
        """
        Return all possible values.

        Be careful calling this on distributions over large ranges: the full
        list is built, which sampling never needs to do.
        """
        return self._distribution.all_values()

    def num_values(self) -> int:
        return self._distribution.num_values()

    def expectation(self, f: Callable[[T], float]) -> float:
        """
        Return the exact expectation of f(X) under the distribution.

        Args:
            f: Function to apply to each outcome

        Returns:
            Expected value of f(X)
        """
        return expectation(self._distribution, f)

    def copy(self) -> 'Sampler[T]':
        """
        Return a sampler over an independent copy of the distribution.

        Useful before sample_unique(), which consumes the population.
        """
        clone = getattr(self._distribution, 'copy', None)
        distribution = clone() if callable(clone) else copy.deepcopy(self._distribution)
        return type(self)(distribution)

    def __repr__(self) -> str:
        return f"Sampler({self._distribution!r})"


def new_uniform(values: Any, rng: Optional[random.Random] = None) -> Sampler:
    """Create a sampler for a uniform distribution; see Sampler.new_uniform."""
    return Sampler.new_uniform(values, rng=rng)


def new_non_uniform(values_and_weights: Any, rng: Optional[random.Random] = None) -> Sampler:
    """Create a sampler for a non-uniform distribution; see Sampler.new_non_uniform."""
    return Sampler.new_non_uniform(values_and_weights, rng=rng)
