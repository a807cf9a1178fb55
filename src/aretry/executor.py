r"""Synchronous retry executor.

This module implements the retry loop that repeatedly invokes an
operation until it succeeds, the retry predicate declines to continue,
or the attempt budget is exhausted.
"""

from __future__ import annotations

__all__ = ["RetryExecutor", "do", "handle_failure", "should_continue"]

import logging
import time
from typing import TYPE_CHECKING, Callable, TypeVar

from aretry.config import build_config
from aretry.exceptions import RetryError

if TYPE_CHECKING:
    from aretry.config import Option, RetryConfig

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


def should_continue(attempt: int, attempts: int) -> bool:
    r"""Indicate if the attempt ``attempt`` may run.

    The first attempt always runs, whatever the attempt budget is.

    Args:
        attempt: The attempt index (0-indexed).
        attempts: The attempt budget.

    Returns:
        ``True`` if the attempt may run, otherwise ``False``.
    """
    return attempt == 0 or attempt < attempts


def handle_failure(
    config: RetryConfig,
    attempt: int,
    error: Exception,
    errors: list[Exception],
    log: logging.Logger = logger,
) -> bool:
    r"""Record a failed attempt and decide whether to wait and retry.

    The observer is notified first, then the error is appended to
    ``errors`` and the retry predicate is consulted.

    Args:
        config: The retry configuration.
        attempt: The index of the failed attempt (0-indexed).
        error: The exception raised by the operation.
        errors: The errors of the previous failed attempts.
        log: The logger receiving the debug messages.

    Returns:
        ``True`` if the executor should sleep then try again, ``False``
        if it should stop now.
    """
    log.debug(
        f"Attempt {attempt + 1}/{max(1, config.attempts)} failed with "
        f"{type(error).__name__}: {error}"
    )
    config.on_retry(attempt, error)
    errors.append(error)
    if not config.retry_if(error):
        log.debug(f"retry_if returned False after attempt {attempt + 1}, stop retrying")
        return False
    # No wait after the last permitted attempt
    if not should_continue(attempt + 1, config.attempts):
        log.debug(f"All {max(1, config.attempts)} attempts failed")
        return False
    return True


class RetryExecutor:
    """Run an operation until it succeeds or the retry policy gives up.

    Args:
        config: The retry configuration. It is not mutated.

    Attributes:
        config: The retry configuration.

    Example:
        ```pycon
        >>> from aretry import RetryExecutor, build_config
        >>> from aretry.options import delay
        >>> executor = RetryExecutor(build_config(delay(0)))
        >>> executor.execute(lambda: 42)
        42

        ```
    """

    def __init__(self, config: RetryConfig) -> None:
        self.config = config

    def execute(self, operation: Callable[[], T]) -> T:
        """Invoke the operation, retrying it after each failure.

        Args:
            operation: A zero-argument callable. It signals a failure by
                raising an ``Exception``.

        Returns:
            The value returned by the first successful invocation.

        Raises:
            RetryError: If no invocation succeeded. It holds the
                exception of every failed attempt and is chained to the
                last one.
            OverflowError: If ``delay * unit`` is too large for
                ``time.sleep``. The collected errors are then lost.
        """
        errors: list[Exception] = []
        attempt = 0
        while should_continue(attempt, self.config.attempts):
            try:
                return operation()
            except Exception as exc:  # noqa: BLE001
                if not handle_failure(self.config, attempt, exc, errors):
                    break
            self._sleep()
            attempt += 1

        raise RetryError(errors) from errors[-1]

    def _sleep(self) -> None:
        sleep_time = self.config.sleep_time
        if sleep_time <= 0:
            return
        logger.debug(f"Waiting {sleep_time:.3f}s before next attempt")
        time.sleep(sleep_time)


def do(operation: Callable[[], T], *options: Option) -> T:
    """Invoke an operation until it succeeds or the retry policy gives
    up.

    The defaults are 10 attempts with 100ms between them, retrying on
    any ``Exception``. The first attempt always runs, so an attempt
    budget of 0 behaves like a budget of 1. No delay is applied after
    the last attempt.

    Args:
        operation: A zero-argument callable. It signals a failure by
            raising an ``Exception``.
        *options: Options applied in order on top of the defaults.

    Returns:
        The value returned by the first successful invocation.

    Raises:
        RetryError: If the attempt budget is exhausted or ``retry_if``
            returned ``False``. Its message is the message of the last
            failure.

    Example:
        ```pycon
        >>> from aretry import do
        >>> from aretry.options import attempts, delay
        >>> calls = []
        >>> def flaky() -> str:
        ...     calls.append(1)
        ...     if len(calls) < 3:
        ...         raise ConnectionError("unreachable")
        ...     return "ok"
        ...
        >>> do(flaky, attempts(5), delay(0))
        'ok'
        >>> len(calls)
        3

        ```
    """
    return RetryExecutor(build_config(*options)).execute(operation)

