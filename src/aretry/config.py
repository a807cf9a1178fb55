r"""Configuration dataclass and defaults for the retry executors.

This module provides the default retry policy and the ``build_config``
function that folds a sequence of options into a fresh configuration.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_ATTEMPTS",
    "DEFAULT_DELAY",
    "DEFAULT_UNIT",
    "Option",
    "RetryConfig",
    "build_config",
]

from dataclasses import dataclass
from typing import Callable

from aretry.units import MILLISECOND

# Default maximum number of attempts, including the first one
DEFAULT_ATTEMPTS = 10

# Default delay between attempts, expressed in DEFAULT_UNIT
# With the defaults, the executor waits 100ms between two attempts
DEFAULT_DELAY = 100

# Length of one delay unit in seconds
DEFAULT_UNIT = MILLISECOND


def _no_op_on_retry(attempt: int, error: Exception) -> None:  # noqa: ARG001
    pass


def _always_retry(error: Exception) -> bool:  # noqa: ARG001
    return True


@dataclass
class RetryConfig:
    """Configuration for retry behavior.

    The configuration is fully built before the first attempt and never
    mutated by the executors. No validation is performed: degenerate
    values such as ``attempts=0`` are accepted as is.

    Args:
        attempts: Maximum number of times the operation may be invoked.
            The first attempt always runs, even if ``attempts`` is 0.
        delay: Delay magnitude between two attempts, in ``unit``.
        unit: Length in seconds of one ``delay`` unit, see ``aretry.units``.
        on_retry: Callback invoked after each failed attempt with the
            zero-based attempt index and the raised exception.
        retry_if: Predicate invoked after each failed attempt. Returning
            ``False`` stops retrying immediately.

    Example:
        ```pycon
        >>> from aretry.config import RetryConfig
        >>> config = RetryConfig()
        >>> config.attempts
        10
        >>> config.sleep_time
        0.1

        ```
    """

    attempts: int = DEFAULT_ATTEMPTS
    delay: float = DEFAULT_DELAY
    unit: float = DEFAULT_UNIT
    on_retry: Callable[[int, Exception], None] = _no_op_on_retry
    retry_if: Callable[[Exception], bool] = _always_retry

    @property
    def sleep_time(self) -> float:
        """The time to wait between two attempts, in seconds."""
        return self.delay * self.unit


Option = Callable[[RetryConfig], None]


def build_config(*options: Option) -> RetryConfig:
    """Build a retry configuration from the defaults and some options.

    The options are applied in order, so a later option overrides an
    earlier one for the same field.

    Args:
        *options: The options to apply on top of the defaults.

    Returns:
        A new configuration. Each call returns a distinct instance.

    Example:
        ```pycon
        >>> from aretry.config import build_config
        >>> from aretry.options import attempts
        >>> build_config(attempts(3), attempts(5)).attempts
        5

        ```
    """
    config = RetryConfig()
    for option in options:
        option(config)
    return config
