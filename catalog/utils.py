"""
Miscelaneous utilities.
"""

import time
from functools import wraps
from typing import Callable

from catalog.logger import logger


def timed(func) -> Callable:
    @wraps(func)
    def timed_func(*args, **kwargs):
        init = time.perf_counter()
        out = func(*args, **kwargs)
        end = time.perf_counter() - init
        logger.info(f"{func.__qualname__} finished in {1000 * end:.2f} ms")
        return out
    return timed_func
