"""
Exceptions raised by the value sampler library.

Every error derives from SamplerError, and also from the builtin exception
a caller would naturally catch (TypeError or ValueError).
"""


class SamplerError(Exception):
    """Base class for all value sampler errors."""


class InvalidDistribution(SamplerError, TypeError):
    """A custom distribution object lacks a required operation."""


class EmptyPopulation(SamplerError, ValueError):
    """A uniform distribution was given no values, or has none left to draw."""


class NegativeRangeBound(SamplerError, ValueError):
    """A negative scalar was given as the upper bound of a uniform range."""


class InvalidDistributionInput(SamplerError, ValueError):
    """Input of the wrong shape (or empty) was given to a distribution."""


class NegativeWeight(SamplerError, ValueError):
    """A weighted distribution received a weight below zero."""


class DegenerateDistribution(SamplerError, ValueError):
    """The weights of a weighted distribution sum to zero."""


class InvalidSampleCount(SamplerError, ValueError):
    """A sample count is out of range for the requested operation."""
