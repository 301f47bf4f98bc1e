"""
Mysterio Utility Modules

Common utilities for logging, exceptions and decorators.
"""

from mysterio.utils.decorators import measure_latency
from mysterio.utils.exceptions import (
    ConfigurationError,
    MysterioError,
    SecretStoreError,
)
from mysterio.utils.logging import configure_default_logging, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "configure_default_logging",
    "MysterioError",
    "ConfigurationError",
    "SecretStoreError",
    "measure_latency",
]
