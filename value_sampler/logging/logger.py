"""
Logger implementation for the value sampler library.

This module provides JSON-formatted logging functionality. Nothing is written
to disk unless debugging is enabled or a log file is requested, in which case
logs go to timestamped files in a 'logs' directory.
"""

import os
import json
import logging
import datetime
from typing import Any, Optional

import numpy as np

LOGGER_NAME = "value_sampler"

# Environment variables consulted by setup_logger for its defaults
ENV_DEBUG = "VALUE_SAMPLER_DEBUG"
ENV_LOG_LEVEL = "VALUE_SAMPLER_LOG_LEVEL"
ENV_LOG_FILE = "VALUE_SAMPLER_LOG_FILE"

# Sequences longer than this are abbreviated in log records
MAX_LOGGED_ITEMS = 100


class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for logging."""

    def _serialize(self, obj: Any) -> Any:
        """Serialize objects to JSON-compatible format."""
        if isinstance(obj, np.ndarray):
            if obj.size > MAX_LOGGED_ITEMS:
                shape_str = 'x'.join(str(dim) for dim in obj.shape)
                sample = obj.flatten()[:5].tolist()
                return f"ndarray({shape_str}): sample={sample}..."
            return obj.tolist()
        elif isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, (list, tuple, set, frozenset)):
            items = list(obj)
            if len(items) > MAX_LOGGED_ITEMS:
                return [self._serialize(item) for item in items[:5]] + ["..."]
            return [self._serialize(item) for item in items]
        elif isinstance(obj, dict):
            return {str(k): self._serialize(v) for k, v in obj.items()}
        elif isinstance(obj, (str, int, float, bool)) or obj is None:
            return obj
        elif hasattr(obj, '__dict__'):
            return {
                "__type": obj.__class__.__name__,
                **{k: self._serialize(v) for k, v in obj.__dict__.items()
                   if not k.startswith('_')}
            }
        return repr(obj)

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        log_data = {
            'timestamp': datetime.datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if isinstance(record.msg, dict):
            log_data['data'] = self._serialize(record.msg)
        else:
            log_data['message'] = record.getMessage()

            if hasattr(record, 'data'):
                log_data['data'] = self._serialize(record.data)

        return json.dumps(log_data)


_logger = None


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


def setup_logger(
    debug: Optional[bool] = None,
    log_level: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up the logger with the specified configuration.

    Arguments left as None fall back to the VALUE_SAMPLER_DEBUG,
    VALUE_SAMPLER_LOG_LEVEL and VALUE_SAMPLER_LOG_FILE environment variables.
    The logger is configured only once; later calls return the same instance.
    The level of the "value_sampler" logger is only changed when debug is
    on or a log level is given.

    Args:
        debug: Whether to enable debugging (and a JSON log file)
        log_level: The log level (debug, info, warning, error)
        log_file: Optional custom log file path

    Returns:
        Configured logger instance
    """
    global _logger

    if _logger is not None:
        return _logger

    if debug is None:
        debug = _env_flag(ENV_DEBUG)
    if log_level is None:
        log_level = os.environ.get(ENV_LOG_LEVEL) or None
    if log_file is None:
        log_file = os.environ.get(ENV_LOG_FILE) or None

    logger = logging.getLogger(LOGGER_NAME)

    level_map = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR
    }

    # without debug or an explicit level, keep whatever the application set
    if debug:
        logger.setLevel(level_map.get((log_level or "info").lower(), logging.INFO))
    elif log_level is not None:
        logger.setLevel(level_map.get(log_level.lower(), logging.WARNING))

    if debug or log_file is not None:
        logs_dir = os.path.join(os.getcwd(), "logs")

        if log_file is None:
            timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = os.path.join(logs_dir, f"value_sampler_{timestamp}.json")
        elif not os.path.isabs(log_file):
            log_file = os.path.join(logs_dir, log_file)

        os.makedirs(os.path.dirname(log_file), exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JsonFormatter())
        logger.addHandler(file_handler)
    else:
        # a library stays silent unless the application configures handlers
        logger.addHandler(logging.NullHandler())

    _logger = logger

    if debug:
        logger.info({
            "event": "logger_initialized",
            "log_level": log_level,
            "log_file": log_file
        })

    return logger


def get_logger() -> logging.Logger:
    """
    Get the configured logger instance.

    Returns:
        Logger instance
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger


# Helper functions for common logging patterns

def log_distribution_created(kind: str, num_values: int, **details: Any) -> None:
    """
    Log the construction of a distribution.

    Args:
        kind: Name of the distribution class
        num_values: Number of values that can be sampled
        details: Extra fields (e.g. total_mass, representation)
    """
    logger = get_logger()

    log_data = {
        "event": "distribution_created",
        "kind": kind,
        "num_values": num_values
    }
    log_data.update(details)

    logger.debug(log_data)


def log_samples_drawn(
    method: str,
    requested: int,
    returned: int,
    remaining: Optional[int] = None
) -> None:
    """
    Log a summary of one sampling call.

    Args:
        method: Name of the sampling method ("sample" or "sample_unique")
        requested: Number of samples asked for
        returned: Number of samples handed back
        remaining: Values left in the distribution afterwards, if it shrinks
    """
    logger = get_logger()

    log_data = {
        "event": "samples_drawn",
        "method": method,
        "requested": requested,
        "returned": returned
    }
    if remaining is not None:
        log_data["remaining"] = remaining

    logger.debug(log_data)


def log_invalid_input(error: str, **details: Any) -> None:
    """
    Log rejected input just before the corresponding exception is raised.

    Args:
        error: Name of the exception class about to be raised
        details: Fields describing the offending input
    """
    logger = get_logger()

    log_data = {
        "event": "invalid_input",
        "error": error
    }
    log_data.update(details)

    logger.warning(log_data)
