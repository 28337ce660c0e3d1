"""
Value Sampler Library.

This library provides sampling from discrete probability distributions,
either uniform over a collection of values or non-uniform with weights
(frequency counts) assigned to arbitrary values, with and without replacement.
"""

__version__ = '0.1.0'

# Import submodules to make them available through the package
from value_sampler import distribution
from value_sampler import errors
from value_sampler import utils
from value_sampler.distribution import (
    Distribution,
    RemovableDistribution,
    Span,
    UniformDistribution,
    WeightedDistribution
)
from value_sampler.errors import (
    SamplerError,
    InvalidDistribution,
    EmptyPopulation,
    NegativeRangeBound,
    InvalidDistributionInput,
    NegativeWeight,
    DegenerateDistribution,
    InvalidSampleCount
)
from value_sampler.sampler import Sampler, new_uniform, new_non_uniform

__all__ = [
    'distribution',
    'errors',
    'utils',
    'Distribution',
    'RemovableDistribution',
    'Span',
    'UniformDistribution',
    'WeightedDistribution',
    'SamplerError',
    'InvalidDistribution',
    'EmptyPopulation',
    'NegativeRangeBound',
    'InvalidDistributionInput',
    'NegativeWeight',
    'DegenerateDistribution',
    'InvalidSampleCount',
    'Sampler',
    'new_uniform',
    'new_non_uniform'
]
