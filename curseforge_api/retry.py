"""
Retry logic with a fixed backoff for the CurseForge client.

This module provides the retry loop for transient failures using Tenacity.
"""

import time
from typing import Callable, TypeVar
import logging
from tenacity import (
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_fixed,
    RetryCallState,
)

from .config import CurseForgeConfig
from .exceptions import CurseForgeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryHandler:
    """Handler for executing requests with retry logic using Tenacity."""

    def __init__(
        self,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize retry handler.

        Args:
            max_retries: Maximum number of retry attempts
            retry_delay: Fixed delay between attempts in seconds
            sleep: Function used to wait between attempts
        """
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.sleep = sleep

    @classmethod
    def from_config(
        cls,
        config: CurseForgeConfig,
        sleep: Callable[[float], None] = time.sleep,
    ) -> "RetryHandler":
        """Create a retry handler from a client configuration."""
        return cls(
            max_retries=config.max_retries,
            retry_delay=config.retry_delay,
            sleep=sleep,
        )

    @staticmethod
    def _should_retry(exception: BaseException) -> bool:
        """Check if an exception should trigger a retry."""
        return isinstance(exception, CurseForgeError) and exception.is_retryable

    def _log_retry_attempt(self, retry_state: RetryCallState):
        """Log retry attempts."""
        exception = retry_state.outcome.exception()
        logger.warning(
            f"Request failed with {type(exception).__name__}: {exception}, "
            f"retrying in {self.retry_delay}s "
            f"(attempt {retry_state.attempt_number}/{self.max_retries + 1})..."
        )

    def execute(self, func: Callable[[], T]) -> T:
        """
        Execute a synchronous request with retry logic.

        The function is called once per attempt, so it must build a fresh
        request every time it runs.

        Args:
            func: Function that performs one attempt and returns its result

        Returns:
            The result of the first successful attempt

        Raises:
            CurseForgeError: The normalized last error once the request is
                not retryable or all retries are exhausted
        """
        retrying = Retrying(
            retry=retry_if_exception(self._should_retry),
            stop=stop_after_attempt(self.max_retries + 1),
            wait=wait_fixed(self.retry_delay),
            sleep=self.sleep,
            before_sleep=self._log_retry_attempt,
            reraise=True,
        )

        try:
            return retrying(func)
        except CurseForgeError as exc:
            raise exc.normalized() from None
