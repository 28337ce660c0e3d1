"""
Base classes for discrete probability distributions that can be sampled.
"""

import copy
from abc import ABC, abstractmethod
from typing import Any, Callable, List, TypeVar, Generic

# Type variable for distribution outcomes
T = TypeVar('T')

# Operations every distribution must provide
REQUIRED_OPERATIONS = (
    'sample_from_distribution',
    'all_values',
    'num_values',
    'probability_of',
)

# Operation that enables fast sampling without replacement
REMOVE_OPERATION = 'sample_from_distribution_and_remove'


def _provides(cls: type, operations) -> bool:
    """Check whether cls (or a base class) defines every named callable."""
    for name in operations:
        for klass in cls.__mro__:
            if name in klass.__dict__:
                if klass.__dict__[name] is None:
                    return False
                break
        else:
            return False
    return True


def expectation(distribution: Any, f: Callable[[T], float]) -> float:
    """
    Return the exact expectation of f(X) under a discrete distribution.

    Every entry of all_values() contributes f(value) * probability_of(value),
    so duplicated entries of a uniform list are each counted once.

    Args:
        distribution: Object providing all_values() and probability_of()
        f: Function to apply to each outcome

    Returns:
        Expected value of f(X)
    """
    total = 0.0
    for value in distribution.all_values():
        total += f(value) * distribution.probability_of(value)
    return total


class Distribution(ABC, Generic[T]):
    """
    Base class for discrete probability distributions that can be sampled.

    This abstract class defines the capability set every distribution used by
    the Sampler must provide. Classes that do not inherit from it but define
    all four operations are also recognised, so
    isinstance(obj, Distribution) works for structurally compatible objects.
    """

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is Distribution:
            return _provides(subclass, REQUIRED_OPERATIONS)
        return NotImplemented

    @abstractmethod
    def sample_from_distribution(self) -> T:
        """
        Return one value drawn according to the probability mass.

        The distribution is not modified.

        Returns:
            A random outcome from the distribution
        """
        pass

    @abstractmethod
    def all_values(self) -> List[T]:
        """
        Return every value represented by this distribution.

        Returns:
            List of values (may be expensive for large populations)
        """
        pass

    @abstractmethod
    def num_values(self) -> int:
        """
        Return the number of values that can currently be sampled.

        Returns:
            Count of sampleable values
        """
        pass

    @abstractmethod
    def probability_of(self, value: Any) -> float:
        """
        Return the normalized probability mass assigned to value.

        Args:
            value: Any value

        Returns:
            Probability in [0, 1]; 0.0 if value is not represented
        """
        pass

    def sample_n(self, n: int) -> List[T]:
        """
        Return n samples from this distribution, with replacement.

        Args:
            n: Number of samples to generate

        Returns:
            List of n random samples
        """
        return [self.sample_from_distribution() for _ in range(n)]

    def expectation(self, f: Callable[[T], float]) -> float:
        """
        Return the expectation of f(X) where X is the random variable.

        Args:
            f: Function to apply to each outcome

        Returns:
            Expected value of f(X)
        """
        return expectation(self, f)

    def copy(self) -> 'Distribution[T]':
        """
        Return an independent copy of this distribution.

        Subclasses with a random number generator share it with the copy;
        only the population state is duplicated.
        """
        return copy.deepcopy(self)


class RemovableDistribution(Distribution[T]):
    """
    A distribution that can also draw a value and remove it permanently.

    The Sampler prefers this operation when sampling without replacement.
    """

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is RemovableDistribution:
            return _provides(subclass, REQUIRED_OPERATIONS + (REMOVE_OPERATION,))
        return NotImplemented

    @abstractmethod
    def sample_from_distribution_and_remove(self) -> T:
        """
        Draw a value, then remove it from the distribution for good.

        Returns:
            The sampled value
        """
        pass
