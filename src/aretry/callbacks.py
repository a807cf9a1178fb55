r"""Ready-made retry observers.

Example:
    ```pycon
    >>> import logging
    >>> from aretry import do
    >>> from aretry.callbacks import log_retry
    >>> from aretry.options import on_retry
    >>> do(lambda: None, on_retry(log_retry(logging.getLogger("my_app"))))

    ```
"""

from __future__ import annotations

__all__ = ["log_retry"]

import logging
from typing import Callable


def log_retry(
    logger: logging.Logger | None = None, level: int = logging.WARNING
) -> Callable[[int, Exception], None]:
    """Create a retry observer that logs each failed attempt.

    Args:
        logger: The logger to use. Defaults to the ``aretry`` logger.
        level: The logging level of the messages.

    Returns:
        A callback to pass to ``aretry.options.on_retry``.
    """
    if logger is None:
        logger = logging.getLogger("aretry")

    def callback(attempt: int, error: Exception) -> None:
        logger.log(level, f"Attempt {attempt + 1} failed with {type(error).__name__}: {error}")

    return callback
