"""
Logging module for the value sampler library.

This module provides JSON-formatted logging functionality for the library.
"""

from value_sampler.logging.logger import (
    JsonFormatter,
    setup_logger,
    get_logger,
    log_distribution_created,
    log_samples_drawn,
    log_invalid_input,
)

__all__ = [
    "JsonFormatter",
    "setup_logger",
    "get_logger",
    "log_distribution_created",
    "log_samples_drawn",
    "log_invalid_input",
]
