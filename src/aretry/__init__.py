r"""aretry - Simple retry executor for fallible operations.

This package repeatedly invokes a caller-supplied operation until it
succeeds, a retry predicate declines to continue, or the attempt budget
is exhausted. The failures of every attempt are aggregated in a single
``RetryError``.

Key Features:
    - Attempt budget with a fixed delay between attempts
    - Composable options applied in order on top of the defaults
    - Custom retry predicate and retry observer
    - Sync, async and decorator APIs

Example:
    ```pycon
    >>> import httpx
    >>> from aretry import do
    >>> from aretry.options import attempts, delay, units
    >>> from aretry.units import SECOND
    >>> def fetch() -> bytes:
    ...     response = httpx.get("https://example.com")
    ...     response.raise_for_status()
    ...     return response.content
    ...
    >>> body = do(fetch, attempts(3), delay(1), units(SECOND))  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "HOUR",
    "MICROSECOND",
    "MILLISECOND",
    "MINUTE",
    "NANOSECOND",
    "SECOND",
    "AsyncRetryExecutor",
    "RetryConfig",
    "RetryError",
    "RetryExecutor",
    "__version__",
    "attempts",
    "build_config",
    "delay",
    "do",
    "do_async",
    "log_retry",
    "on_retry",
    "retry",
    "retry_if",
    "units",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.callbacks import log_retry
from aretry.config import RetryConfig, build_config
from aretry.decorator import retry
from aretry.exceptions import RetryError
from aretry.executor import RetryExecutor, do
from aretry.executor_async import AsyncRetryExecutor, do_async
from aretry.options import attempts, delay, on_retry, retry_if, units
from aretry.units import HOUR, MICROSECOND, MILLISECOND, MINUTE, NANOSECOND, SECOND

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
