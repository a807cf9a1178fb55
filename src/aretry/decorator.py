r"""Decorator retrying each call of a function.

Both regular functions and coroutine functions are supported. A
coroutine function is retried with ``AsyncRetryExecutor`` so that each
attempt awaits the coroutine and its failures are caught.
"""

from __future__ import annotations

__all__ = ["retry"]

import functools
import inspect
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from aretry.config import build_config
from aretry.executor import RetryExecutor
from aretry.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    from aretry.config import Option

T = TypeVar("T")


def retry(*options: Option) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Decorate a function so that each call is retried.

    The configuration is built once, when the function is decorated.

    Args:
        *options: Options applied in order on top of the defaults.

    Returns:
        The decorator.

    Example:
        ```pycon
        >>> from aretry import retry
        >>> from aretry.options import attempts
        >>> @retry(attempts(3))
        ... def add(x: int, y: int) -> int:
        ...     return x + y
        ...
        >>> add(1, 2)
        3

        ```
    """
    config = build_config(*options)

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        if inspect.iscoroutinefunction(func):
            async_executor = AsyncRetryExecutor(config)

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                return await async_executor.execute(lambda: func(*args, **kwargs))

            return async_wrapper

        executor = RetryExecutor(config)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            return executor.execute(lambda: func(*args, **kwargs))

        return wrapper

    return decorator
