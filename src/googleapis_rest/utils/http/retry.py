"""Retry decorator for async HTTP operations.

Failed calls are retried with exponential backoff and jitter. Only the
exception types listed are retried, and an ``httpx.HTTPStatusError`` is
retried only when its status code is in ``status_codes``.
"""

import asyncio
import logging
import random
from functools import wraps
from typing import Callable, Optional, Tuple, Type, TypeVar

import httpx

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


def async_retry(
    max_attempts: int = 3,
    delay: float = 1.0,
    backoff: float = 2.0,
    exceptions: Tuple[Type[Exception], ...] = (httpx.HTTPError,),
    status_codes: Optional[Tuple[int, ...]] = DEFAULT_RETRY_STATUS_CODES,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Create a retry decorator for async functions.

    :param max_attempts: Maximum number of attempts, including the first
    :type max_attempts: int
    :param delay: Initial delay between attempts in seconds
    :type delay: float
    :param backoff: Multiplier applied to the delay after each attempt
    :type backoff: float
    :param exceptions: Exception types that trigger a retry
    :type exceptions: Tuple[Type[Exception], ...]
    :param status_codes: HTTP status codes that trigger a retry (only applies
                         to ``httpx.HTTPStatusError``)
    :type status_codes: Optional[Tuple[int, ...]]
    :return: Decorator function that can be applied to async functions
    :rtype: Callable[[Callable[..., T]], Callable[..., T]]
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            current_delay = delay
            last_exception: Optional[Exception] = None
            for attempt in range(max_attempts):
                try:
                    return await func(*args, **kwargs)
                except exceptions as e:
                    last_exception = e
                    if isinstance(e, httpx.HTTPStatusError):
                        if status_codes and e.response.status_code not in status_codes:
                            raise
                    if attempt < max_attempts - 1:
                        jitter = random.uniform(0.8, 1.2)
                        wait = current_delay * jitter
                        logger.debug(
                            "Attempt %d/%d of %s failed (%s); retrying in %.2fs",
                            attempt + 1,
                            max_attempts,
                            func.__name__,
                            e,
                            wait,
                        )
                        await asyncio.sleep(wait)
                        current_delay *= backoff
                    else:
                        raise
            assert last_exception is not None
            raise last_exception

        return wrapper

    return decorator
