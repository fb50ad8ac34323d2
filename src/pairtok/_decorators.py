"""Reusable decorators for training utilities."""

import functools
import logging
import time
from typing import Callable

log = logging.getLogger(__name__)


def measure_time(label: str) -> Callable[[Callable], Callable]:
    """Log how long the wrapped callable took, under ``label``."""

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            # report elapsed time even when the call raises
            finally:
                elapsed = time.perf_counter() - start
                log.info(f"{label} took {elapsed:.2f} s ({elapsed / 60:.2f} mins)")

        return wrapper

    return decorator
