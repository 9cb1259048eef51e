"""
Backoff policy for coach completions.

The coach talks to a hosted model that rate limits and occasionally times
out. Those failures are retried with exponential backoff via tenacity;
anything else (bad key, rejected prompt) fails on the first attempt.
"""
import logging
from typing import Any, Callable, TypeVar

import httpx
import openai
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)


logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_MIN_WAIT_SECONDS = 1
DEFAULT_MAX_WAIT_SECONDS = 10

# Throttling, lock conflicts and upstream outages
RETRYABLE_STATUS_CODES = frozenset({408, 409, 429, 500, 502, 503, 504})

_TRANSIENT_ERRORS = (
    openai.APITimeoutError,
    openai.APIConnectionError,
    httpx.TimeoutException,
    httpx.TransportError,
)


def is_retryable_error(exception: BaseException) -> bool:
    """True for timeouts, dropped connections and the status codes above."""
    if isinstance(exception, _TRANSIENT_ERRORS):
        return True
    if isinstance(exception, openai.APIStatusError):
        return exception.status_code in RETRYABLE_STATUS_CODES
    return False


def _check_backoff(max_attempts: int, min_wait_seconds: float, max_wait_seconds: float) -> None:
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
    if min_wait_seconds < 0:
        raise ValueError(f"min_wait_seconds cannot be negative, got {min_wait_seconds}")
    if max_wait_seconds < min_wait_seconds:
        raise ValueError(
            f"max_wait_seconds ({max_wait_seconds}) is below "
            f"min_wait_seconds ({min_wait_seconds})"
        )


def create_retry_decorator(
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    min_wait_seconds: float = DEFAULT_MIN_WAIT_SECONDS,
    max_wait_seconds: float = DEFAULT_MAX_WAIT_SECONDS,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Build a tenacity decorator for one coach call.

    ``max_attempts`` counts the first call. The wait doubles from
    ``min_wait_seconds`` up to ``max_wait_seconds``. When attempts run out
    the last error is raised unchanged so callers can inspect its status.

    Raises:
        ValueError: for a non-positive attempt count or an inverted wait range
    """
    _check_backoff(max_attempts, min_wait_seconds, max_wait_seconds)

    return retry(
        retry=retry_if_exception(is_retryable_error),
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=1, min=min_wait_seconds, max=max_wait_seconds),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )


def retry_sync_call(
    func: Callable[..., T],
    *args: Any,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    min_wait_seconds: float = DEFAULT_MIN_WAIT_SECONDS,
    max_wait_seconds: float = DEFAULT_MAX_WAIT_SECONDS,
    **kwargs: Any,
) -> T:
    """Call ``func(*args, **kwargs)`` under the backoff policy."""
    wrapped = create_retry_decorator(max_attempts, min_wait_seconds, max_wait_seconds)(func)
    return wrapped(*args, **kwargs)
