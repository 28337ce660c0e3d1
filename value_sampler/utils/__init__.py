"""
Utility functions for the value sampler library.

This module provides the cumulative-sum helpers used by weighted sampling.
"""

from value_sampler.utils.cumulative import accumulate, cumulative_weights, search_cumulative

__all__ = [
    'accumulate',
    'cumulative_weights',
    'search_cumulative'
]
