"""Retry Strategy - Bounded retry with a fixed (or exponential) delay."""

import logging
import threading
import time
from typing import Callable, List, Optional, Type, TypeVar

from ..exceptions import DeliveryInterruptedError, RetriesExhaustedError

logger = logging.getLogger(__name__)

T = TypeVar('T')


class RetryStrategy:
    """Configurable retry logic. Fixed delay unless exponential_backoff is set."""

    def __init__(
        self,
        max_attempts: int = 3,
        delay: float = 1.0,
        exponential_backoff: bool = False,
        retryable_exceptions: Optional[List[Type[Exception]]] = None,
    ):
        """
        Initialize retry strategy.

        Args:
            max_attempts: Total attempts, including the first one
            delay: Delay between attempts in seconds
            exponential_backoff: Double the delay after every failed attempt
            retryable_exceptions: Exception types to retry on (None = all)
        """
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")

        self.max_attempts = max_attempts
        self.delay = delay
        self.exponential_backoff = exponential_backoff
        self.retryable_exceptions = retryable_exceptions or [Exception]

    def execute(
        self,
        func: Callable[[], T],
        on_retry: Optional[Callable[[int, Exception], None]] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> T:
        """
        Execute function with retries.

        Args:
            func: Function to execute
            on_retry: Optional callback called before each delay with (attempt, exception)
            cancel_event: Optional event; once set, no further attempt is made

        Returns:
            Result of the function

        Raises:
            RetriesExhaustedError: All attempts failed (last exception as __cause__)
            DeliveryInterruptedError: cancel_event was set before an attempt
                or during a delay
        """
        last_exception: Optional[Exception] = None

        for attempt in range(self.max_attempts):
            if cancel_event is not None and cancel_event.is_set():
                raise DeliveryInterruptedError(
                    f"Cancelled before attempt {attempt + 1}"
                ) from last_exception

            try:
                return func()
            except tuple(self.retryable_exceptions) as e:
                last_exception = e

                if attempt < self.max_attempts - 1:
                    delay = self._calculate_delay(attempt)

                    if on_retry:
                        on_retry(attempt + 1, e)

                    self._wait(delay, cancel_event, last_exception)

        raise RetriesExhaustedError(self.max_attempts, last_exception) from last_exception

    def _calculate_delay(self, attempt: int) -> float:
        """Calculate delay for a given attempt number."""
        if self.exponential_backoff:
            return self.delay * (2 ** attempt)
        return self.delay

    def _wait(
        self,
        delay: float,
        cancel_event: Optional[threading.Event],
        last_exception: Optional[Exception],
    ) -> None:
        if cancel_event is None:
            time.sleep(delay)
            return

        if cancel_event.wait(delay):
            logger.warning("Retry cancelled while waiting %.2fs", delay)
            raise DeliveryInterruptedError(
                "Interrupted while waiting to retry"
            ) from last_exception
