r"""Asynchronous retry executor.

This module implements the same retry loop as ``aretry.executor`` for
coroutine functions. The task awaits ``asyncio.sleep`` between two
attempts instead of blocking the thread.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor", "do_async"]

import asyncio
import logging
from typing import TYPE_CHECKING, Awaitable, Callable, TypeVar

from aretry.config import build_config
from aretry.exceptions import RetryError
from aretry.executor import handle_failure, should_continue

if TYPE_CHECKING:
    from aretry.config import Option, RetryConfig

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


class AsyncRetryExecutor:
    """Await an operation until it succeeds or the retry policy gives up.

    Args:
        config: The retry configuration. It is not mutated.

    Attributes:
        config: The retry configuration.
    """

    def __init__(self, config: RetryConfig) -> None:
        self.config = config

    async def execute(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Await the operation, retrying it after each failure.

        Args:
            operation: A zero-argument callable returning an awaitable.

        Returns:
            The result of the first successful invocation.

        Raises:
            RetryError: If no invocation succeeded.
        """
        errors: list[Exception] = []
        attempt = 0
        while should_continue(attempt, self.config.attempts):
            try:
                return await operation()
            except Exception as exc:  # noqa: BLE001
                if not handle_failure(self.config, attempt, exc, errors, log=logger):
                    break
            await self._sleep()
            attempt += 1

        raise RetryError(errors) from errors[-1]

    async def _sleep(self) -> None:
        sleep_time = self.config.sleep_time
        if sleep_time <= 0:
            return
        logger.debug(f"Waiting {sleep_time:.3f}s before next attempt")
        await asyncio.sleep(sleep_time)


async def do_async(operation: Callable[[], Awaitable[T]], *options: Option) -> T:
    """Await an operation until it succeeds or the retry policy gives
    up.

    Async counterpart of ``aretry.do``, with the same defaults and the
    same semantics.

    Args:
        operation: A zero-argument callable returning an awaitable.
        *options: Options applied in order on top of the defaults.

    Returns:
        The result of the first successful invocation.

    Raises:
        RetryError: If the attempt budget is exhausted or ``retry_if``
            returned ``False``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import do_async
        >>> async def fetch() -> str:
        ...     return "data"
        ...
        >>> asyncio.run(do_async(fetch))
        'data'

        ```
    """
    return await AsyncRetryExecutor(build_config(*options)).execute(operation)
