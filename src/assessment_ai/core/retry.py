"""
Backoff wrapper for rate-limited generation calls.
"""
import logging
import time
from typing import Callable, TypeVar

from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from assessment_ai import config
from assessment_ai.errors import UpstreamError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def is_rate_limit_error(error: BaseException) -> bool:
    """
    Whether an error signals rate limiting or quota exhaustion.

    Tagged upstream errors carry their own reason code. Anything else
    falls back to looking for "429" or "quota" in the message.
    """
    if isinstance(error, UpstreamError):
        return error.retryable
    message = str(error)
    return "429" in message or "quota" in message.lower()


def with_retry(
    operation: Callable[[], T],
    retries: int = config.RETRY_COUNT,
    initial_delay: float = config.RETRY_INITIAL_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep
) -> T:
    """
    Call an operation, retrying rate-limit failures with exponential backoff.

    Args:
        operation: Zero-argument callable to invoke
        retries: Retries allowed after the first call
        initial_delay: Seconds to wait before the first retry; doubled each time
        sleep: Function used to wait between attempts

    Returns:
        The operation's result

    Raises:
        The last error once attempts are exhausted, or any
        non-rate-limit error immediately.
    """
    retryer = Retrying(
        stop=stop_after_attempt(retries + 1),
        wait=wait_exponential(multiplier=initial_delay, exp_base=2),
        retry=retry_if_exception(is_rate_limit_error),
        sleep=sleep,
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    return retryer(operation)
