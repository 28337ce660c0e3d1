"""
Distribution module for the value sampler library.

This module provides classes for representing discrete probability
distributions that can be sampled, with and without replacement.
"""

from value_sampler.distribution.base import Distribution, RemovableDistribution, expectation
from value_sampler.distribution.span import Span
from value_sampler.distribution.uniform import UniformDistribution
from value_sampler.distribution.weighted import WeightedDistribution

__all__ = [
    'Distribution',
    'RemovableDistribution',
    'expectation',
    'Span',
    'UniformDistribution',
    'WeightedDistribution'
]
