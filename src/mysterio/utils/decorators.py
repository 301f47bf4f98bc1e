"""
Mysterio Utility Decorators
"""

import time
from collections.abc import Callable
from functools import wraps
from typing import Any

from mysterio.utils.logging import get_logger

logger = get_logger(__name__)


def measure_latency(operation_name: str | None = None) -> Callable:
    """Decorator to measure and log coroutine execution latency."""

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            op_name = operation_name or func.__name__
            start_time = time.perf_counter()
            success = False

            try:
                result = await func(*args, **kwargs)
                success = True
                return result
            finally:
                latency_ms = (time.perf_counter() - start_time) * 1000
                logger.debug(
                    "latency_measurement",
                    operation=op_name,
                    latency_ms=round(latency_ms, 2),
                    success=success,
                )

        return wrapper
    return decorator
