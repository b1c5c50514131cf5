import time
from contextlib import contextmanager

import numpy as np


@contextmanager
def performance_logging(description: str, counter: int = None, logger=None):
    start = time.perf_counter()
    try:
        yield
    finally:
        took = (time.perf_counter() - start) * 1000
        extra = ""
        if counter is not None and took > 0:
            extra = f" ({int(counter / took * 1000)}items/sec)"

        unit = "ms"
        if took < 0.1:
            took *= 1000
            unit = "us"

        msg = f"{description} took: {took:.2f}{unit} {extra}"
        if logger:
            logger.info(msg)
        else:
            print(msg)


def is_scalar(value) -> bool:
    """Check if a value is a single number rather than a sequence of numbers.

    Strings are rejected up front, numpy would treat them as 0-d arrays.
    """
    if isinstance(value, (str, bytes)):
        return False
    return np.ndim(value) == 0
