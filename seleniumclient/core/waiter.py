"""
Polling Waiter

Bounded retry of a zero-argument operation. Only the "not found yet"
signal (by default ``NoSuchElementError``) triggers another attempt; any
other error propagates on the spot.
"""

import math
import time
from typing import Callable, TypeVar

import structlog
from tenacity import (
    RetryCallState,
    RetryError,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    stop_after_delay,
    wait_fixed,
)

from seleniumclient.config import settings
from seleniumclient.core.errors import NoSuchElementError, WaitTimeout

logger = structlog.get_logger()

T = TypeVar("T")


def _log_retry(retry_state: RetryCallState) -> None:
    logger.debug(
        "poll_retry",
        attempt=retry_state.attempt_number,
        elapsed=round(retry_state.seconds_since_start or 0, 3),
        next_sleep=retry_state.next_action.sleep if retry_state.next_action else None,
    )


class PollingWaiter:
    """
    Repeats an operation until it succeeds or the time budget is spent.

    Usage:
        waiter = PollingWaiter(interval=1.0)
        element = waiter.until(lambda: resolver.find_element(locator), timeout=5)
    """

    def __init__(
        self,
        interval: float | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.interval = interval if interval is not None else settings.poll_interval
        if self.interval <= 0:
            raise ValueError("Polling interval must be positive")
        self.sleep = sleep

    def max_attempts(self, timeout: float, interval: float) -> int:
        """One attempt at start plus one after every full interval."""
        return max(1, math.floor(timeout / interval) + 1)

    def until(
        self,
        operation: Callable[[], T],
        timeout: float,
        interval: float | None = None,
        retry_on: tuple[type[BaseException], ...] = (NoSuchElementError,),
    ) -> T:
        """
        Poll ``operation`` until it returns.

        Args:
            operation: Zero-argument call; raising one of ``retry_on`` means
                "not yet"
            timeout: Time budget in seconds
            interval: Sleep between attempts, defaults to the waiter's
            retry_on: Exception types that trigger another attempt

        Returns:
            The first value returned by ``operation``

        Raises:
            WaitTimeout: every attempt within the budget signalled "not yet"
        """
        interval = interval if interval is not None else self.interval
        if interval <= 0:
            raise ValueError("Polling interval must be positive")
        if timeout < 0:
            raise ValueError("Timeout must not be negative")

        retrying = Retrying(
            retry=retry_if_exception_type(retry_on),
            stop=stop_after_delay(timeout) | stop_after_attempt(self.max_attempts(timeout, interval)),
            wait=wait_fixed(interval),
            sleep=self.sleep,
            before_sleep=_log_retry,
            reraise=False,
        )

        try:
            return retrying(operation)
        except RetryError as e:
            attempts = e.last_attempt.attempt_number
            cause = e.last_attempt.exception()
            logger.info("wait_timed_out", timeout=timeout, attempts=attempts)
            raise WaitTimeout(
                f"Condition not met after {timeout}s ({attempts} attempts): {cause}",
                timeout=timeout,
                attempts=attempts,
            ) from cause
