"""tfwait: structured handling of asynchronous operations.

Public API:
    - Wait: result tuples, concurrent batches, delays and retries
    - Config: retry defaults, optionally resolved from the environment
    - WaitError, ConfigurationError, InternalError: library exceptions
"""

from __future__ import annotations

import logging

from tfwait.config import Config
from tfwait.errors import ConfigurationError, InternalError, WaitError
from tfwait.types import ErrorFilter, Logger, ResultTuple
from tfwait.wait import LIBRARY_LOGGER, Wait, default_logger

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("tfwait")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "ErrorFilter",
    "InternalError",
    "Logger",
    "ResultTuple",
    "Wait",
    "WaitError",
    "default_logger",
]
