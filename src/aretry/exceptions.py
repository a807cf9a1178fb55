r"""Exception raised when all the attempts of an operation failed."""

from __future__ import annotations

__all__ = ["RetryError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class RetryError(Exception):
    """Aggregated error of a retried operation.

    It holds one exception per failed attempt, in the order they
    occurred. Its message is the message of the most recent failure,
    while the full history is available through ``errors``, iteration
    and indexing.

    Args:
        errors: The exceptions raised by the failed attempts.

    Example:
        ```pycon
        >>> from aretry import RetryError
        >>> error = RetryError([ValueError("a"), ValueError("b")])
        >>> str(error)
        'b'
        >>> len(error)
        2
        >>> [str(exc) for exc in error]
        ['a', 'b']

        ```
    """

    def __init__(self, errors: Iterable[Exception]) -> None:
        self._errors = list(errors)
        super().__init__(self._errors)

    @property
    def errors(self) -> list[Exception]:
        """A copy of the exceptions of every failed attempt."""
        return list(self._errors)

    @property
    def last_error(self) -> Exception | None:
        """The exception of the most recent failed attempt."""
        return self._errors[-1] if self._errors else None

    def __str__(self) -> str:
        if not self._errors:
            return ""
        return str(self._errors[-1])

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self._errors!r})"

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[Exception]:
        return iter(self._errors)

    def __getitem__(self, index: int) -> Exception:
        return self._errors[index]
