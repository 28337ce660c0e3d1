"""
Non-uniform (weighted) discrete distributions.
"""

import copy
import math
import random
from collections.abc import Mapping, Sequence
from typing import Any, Dict, Iterable, List, Optional, Tuple, TypeVar

from value_sampler.distribution.base import RemovableDistribution
from value_sampler.errors import DegenerateDistribution, EmptyPopulation, InvalidDistributionInput, NegativeWeight
from value_sampler.logging import log_distribution_created, log_invalid_input
from value_sampler.utils import cumulative_weights, search_cumulative

# Type variable for distribution outcomes
T = TypeVar('T')


def _invalid_input(message: str, **details: Any) -> InvalidDistributionInput:
    log_invalid_input("InvalidDistributionInput", kind="weighted", **details)
    return InvalidDistributionInput(message)


class WeightedDistribution(RemovableDistribution[T]):
    """
    Discrete distribution built from frequency counts or unnormalized weights.

    Weights do not need to sum to one; probabilities are the weights divided
    by their total. If a value appears more than once in the input, its
    weights are summed, so a list of (word, 1) pairs can be passed directly
    instead of counting the words first.

    Values with a total weight of zero are remembered (all_values() reports
    them and probability_of() gives 0.0) but are never sampled and do not
    count towards num_values().
    """

    def __init__(self, values_and_weights: Any, rng: Optional[random.Random] = None):
        """
        Initialize a weighted distribution.

        Args:
            values_and_weights: Either a mapping of value -> weight, or a
                sequence of (value, weight) pairs
            rng: Random number generator; defaults to the global random module

        Raises:
            InvalidDistributionInput: If the input is missing, empty, of the
                wrong shape, or has a non-numeric weight
            NegativeWeight: If any weight is below zero
            DegenerateDistribution: If the weights sum to zero
        """
        self._rng = rng if rng is not None else random
        self._total_mass = 0.0
        self._lookup: Dict[T, float] = {}

        if isinstance(values_and_weights, Mapping):
            pairs = values_and_weights.items()
        elif (isinstance(values_and_weights, Sequence)
              and not isinstance(values_and_weights, (str, bytes))):
            pairs = values_and_weights
        else:
            raise _invalid_input(
                f"Expected a mapping or a sequence of (value, weight) pairs, "
                f"got {type(values_and_weights).__name__}",
                input_type=type(values_and_weights).__name__
            )

        if len(pairs) == 0:
            raise _invalid_input("No (or empty) frequency counts were specified", input_type=type(values_and_weights).__name__)

        self._populate(pairs)

        if self._total_mass <= 0.0:
            log_invalid_input("DegenerateDistribution", kind="weighted", total_mass=self._total_mass)
            raise DegenerateDistribution(
                f"Received invalid frequency counts where total mass sums to {self._total_mass}"
            )

        self._pairs: List[Tuple[T, float]] = [
            (value, weight) for value, weight in self._lookup.items() if weight != 0
        ]
        self._cumulative = cumulative_weights(weight for _, weight in self._pairs)

        log_distribution_created(
            type(self).__name__,
            len(self._pairs),
            total_mass=self._total_mass,
            zero_weight_values=len(self._lookup) - len(self._pairs)
        )

    def _populate(self, pairs: Iterable[Any]) -> None:
        """Accumulate weights per value into the lookup table."""
        for pair in pairs:
            if isinstance(pair, (str, bytes)) or not isinstance(pair, Sequence) or len(pair) != 2:
                raise _invalid_input(f"Expected a (value, weight) pair, got {pair!r}", pair=repr(pair))
            value, weight = pair

            try:
                weight = float(weight)
            except (TypeError, ValueError):
                raise _invalid_input(
                    f"Weight for value {value!r} is not numeric: {weight!r}",
                    value=repr(value), weight=repr(weight)
                ) from None

            if math.isnan(weight) or math.isinf(weight):
                raise _invalid_input(
                    f"Weight for value {value!r} must be finite, got {weight}",
                    value=repr(value), weight=weight
                )
            if weight < 0:
                log_invalid_input("NegativeWeight", kind="weighted", value=repr(value), weight=weight)
                raise NegativeWeight(f"Invalid negative frequency ({weight}) for value {value!r}")

            try:
                self._lookup[value] = self._lookup.get(value, 0.0) + weight
            except TypeError:
                raise _invalid_input(f"Value {value!r} is not hashable", value=repr(value)) from None
            self._total_mass += weight

    @property
    def total_mass(self) -> float:
        """Sum of the weights still in the distribution."""
        return self._total_mass

    def probability_of(self, value: Any) -> float:
        """
        Return the weight of value divided by the total mass.

        Args:
            value: Any value

        Returns:
            Normalized probability; 0.0 for values never given a weight
        """
        try:
            weight = self._lookup.get(value, 0.0)
        except TypeError:
            return 0.0
        if weight == 0 or self._total_mass <= 0.0:
            # everything sampleable may have been removed
            return 0.0
        return weight / self._total_mass

    def sample_from_distribution(self) -> T:
        """
        Take one sample by inverting the cumulative distribution.

        Returns:
            The first value (in input order) whose running weight exceeds a
            uniform draw on [0, total_mass)
        """
        if not self._pairs:
            raise EmptyPopulation("Cannot sample from an exhausted weighted distribution")

        target = self._rng.random() * self._total_mass
        return self._pairs[search_cumulative(self._cumulative, target)][0]

    def sample_from_distribution_and_remove(self) -> T:
        """
        Take one sample and remove that value from the distribution for good.

        Returns:
            The sampled value
        """
        sample = self.sample_from_distribution()

        self._total_mass -= self._lookup.pop(sample)
        self._pairs = [pair for pair in self._pairs if pair[0] != sample]
        self._cumulative = cumulative_weights(weight for _, weight in self._pairs)

        return sample

    def num_values(self) -> int:
        return len(self._pairs)

    def all_values(self) -> List[T]:
        """
        Return every value that was given a weight, including zero weights.

        Returns:
            List of values in first-seen order
        """
        return list(self._lookup)

    def copy(self) -> 'WeightedDistribution[T]':
        clone = copy.copy(self)
        clone._lookup = dict(self._lookup)
        clone._pairs = list(self._pairs)
        clone._cumulative = list(self._cumulative)
        return clone

    def __repr__(self) -> str:
        """
        Return a string representation of the distribution.

        Returns:
            String representation
        """
        items = [f"{value!r}: {weight:g}" for value, weight in self._lookup.items()]
        if len(items) > 5:
            items = items[:3] + ["...", items[-1]]
        return f"WeightedDistribution({{{', '.join(items)}}})"
