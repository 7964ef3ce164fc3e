"""
Utility helpers for timing rendering work.
"""

import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def timer() -> Generator[dict, None, None]:
    """
    Context manager to measure elapsed wall time.

    Usage:
        with timer() as t:
            encoded = render_meme(...)
        logger.info(f"Rendered in {t['ms']}ms")

    Yields:
        Dictionary whose 'ms' key holds the elapsed milliseconds once the block exits
    """
    result = {"ms": 0}
    start = time.perf_counter()
    try:
        yield result
    finally:
        result["ms"] = int((time.perf_counter() - start) * 1000)
