"""Retry utilities for text generation calls with a fixed backoff."""
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar

from tenacity import (
    AsyncRetrying,
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)


logger = logging.getLogger(__name__)

T = TypeVar("T")

# Default retry configuration
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_BACKOFF_SECONDS = 2.0

# Generation services report some failures in-band as text starting with this
ERROR_MARKER = "Error:"

EMPTY_RESPONSE_MESSAGE = "Empty response from text generation service"


class TransientResponseError(Exception):
    """A generation response that should be retried (empty or error-shaped)."""


def is_transient_response(text: Optional[str]) -> bool:
    """
    Determine if a generation response counts as a transient failure.

    Transient responses are:
    - None or empty / whitespace-only content
    - Content starting with the "Error:" marker
    """
    if text is None or not text.strip():
        return True
    return text.lstrip().startswith(ERROR_MARKER)


def check_response(text: Optional[str]) -> str:
    """
    Return ``text`` unchanged, or raise if it is a transient failure.

    Raises:
        TransientResponseError: carrying the error text, or a generic
            message for empty responses
    """
    if text is None or not text.strip():
        raise TransientResponseError(EMPTY_RESPONSE_MESSAGE)
    if is_transient_response(text):
        raise TransientResponseError(text.strip())
    return text


def _retry_kwargs(max_attempts: int, backoff_seconds: float) -> dict[str, Any]:
    # Every exception is retried: transport faults and transient responses alike
    return {
        "retry": retry_if_exception_type(Exception),
        "stop": stop_after_attempt(max_attempts),
        "wait": wait_fixed(backoff_seconds),
        "before_sleep": before_sleep_log(logger, logging.WARNING),
        "reraise": True,
    }


def create_retrying(
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    backoff_seconds: float = DEFAULT_BACKOFF_SECONDS,
    sleep: Optional[Callable[[float], None]] = None,
) -> Retrying:
    """
    Create a synchronous retry controller with a fixed wait between attempts.

    Args:
        max_attempts: Total number of attempts, including the first
        backoff_seconds: Constant wait between attempts
        sleep: Sleep function override (defaults to tenacity's time.sleep)

    Returns:
        A tenacity ``Retrying`` that re-raises the last error when exhausted
    """
    kwargs = _retry_kwargs(max_attempts, backoff_seconds)
    if sleep is not None:
        kwargs["sleep"] = sleep
    return Retrying(**kwargs)


def create_async_retrying(
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    backoff_seconds: float = DEFAULT_BACKOFF_SECONDS,
    sleep: Optional[Callable[[float], Awaitable[None]]] = None,
) -> AsyncRetrying:
    """Async counterpart of :func:`create_retrying` (sleeps with asyncio.sleep)."""
    kwargs = _retry_kwargs(max_attempts, backoff_seconds)
    if sleep is not None:
        kwargs["sleep"] = sleep
    return AsyncRetrying(**kwargs)


def retry_sync_call(
    func: Callable[..., T],
    *args: Any,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    backoff_seconds: float = DEFAULT_BACKOFF_SECONDS,
    sleep: Optional[Callable[[float], None]] = None,
    **kwargs: Any,
) -> T:
    """
    Execute a sync function with fixed-delay retry.

    Args:
        func: Sync function to execute
        *args: Positional arguments for the function
        max_attempts: Total number of attempts
        backoff_seconds: Constant wait between attempts
        sleep: Sleep function override
        **kwargs: Keyword arguments for the function

    Returns:
        Result of the function call

    Raises:
        Exception: The last error once all attempts have failed
    """
    try:
        for attempt in create_retrying(max_attempts, backoff_seconds, sleep):
            with attempt:
                result = func(*args, **kwargs)
    except Exception as e:
        logger.error(f"All {max_attempts} attempts failed. Last error: {e}")
        raise
    return result


async def retry_async_call(
    func: Callable[..., Awaitable[T]],
    *args: Any,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    backoff_seconds: float = DEFAULT_BACKOFF_SECONDS,
    sleep: Optional[Callable[[float], Awaitable[None]]] = None,
    **kwargs: Any,
) -> T:
    """
    Execute an async function with fixed-delay retry.

    Raises:
        Exception: The last error once all attempts have failed
    """
    try:
        async for attempt in create_async_retrying(max_attempts, backoff_seconds, sleep):
            with attempt:
                result = await func(*args, **kwargs)
    except Exception as e:
        logger.error(f"All {max_attempts} attempts failed. Last error: {e}")
        raise
    return result
