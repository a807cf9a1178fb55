r"""Option constructors to customize the retry configuration.

Each function returns an option, that is a callable mutating a
``RetryConfig`` in place. Options are passed to ``do``, ``do_async`` or
``retry`` and applied in order.

Example:
    ```pycon
    >>> from aretry import do
    >>> from aretry.options import attempts, delay, units
    >>> from aretry.units import SECOND
    >>> do(lambda: None, attempts(3), delay(1), units(SECOND))

    ```
"""

from __future__ import annotations

__all__ = ["attempts", "delay", "on_retry", "retry_if", "units"]

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from aretry.config import Option, RetryConfig


def attempts(value: int) -> Option:
    """Set the maximum number of attempts.

    Args:
        value: The attempt budget. The first attempt always runs, so 0
            and 1 both mean a single invocation.

    Returns:
        The option.
    """

    def apply(config: RetryConfig) -> None:
        config.attempts = value

    return apply


def delay(value: float) -> Option:
    """Set the delay between two attempts, expressed in the delay unit.

    Args:
        value: The delay magnitude.

    Returns:
        The option.
    """

    def apply(config: RetryConfig) -> None:
        config.delay = value

    return apply


def units(value: float) -> Option:
    """Set the time unit of the delay.

    Args:
        value: The length of one unit in seconds, for example
            ``aretry.units.SECOND``.

    Returns:
        The option.
    """

    def apply(config: RetryConfig) -> None:
        config.unit = value

    return apply


def on_retry(callback: Callable[[int, Exception], None]) -> Option:
    """Set the callback invoked after each failed attempt.

    Args:
        callback: Called with the zero-based attempt index and the
            exception raised by the operation.

    Returns:
        The option.
    """

    def apply(config: RetryConfig) -> None:
        config.on_retry = callback

    return apply


def retry_if(predicate: Callable[[Exception], bool]) -> Option:
    """Set the predicate deciding whether to keep retrying.

    Args:
        predicate: Called with the exception raised by the operation.
            Returning ``False`` stops retrying without waiting.

    Returns:
        The option.

    Example:
        ```pycon
        >>> from aretry import RetryError, do
        >>> from aretry.options import retry_if
        >>> def fail() -> None:
        ...     raise ValueError("bad input")
        ...
        >>> try:
        ...     do(fail, retry_if(lambda exc: not isinstance(exc, ValueError)))
        ... except RetryError as exc:
        ...     print(len(exc), exc)
        ...
        1 bad input

        ```
    """

    def apply(config: RetryConfig) -> None:
        config.retry_if = predicate

    return apply
