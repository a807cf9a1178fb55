r"""Shared test helpers for the retry executor tests."""

from __future__ import annotations

from typing import Callable


def failing_operation(*messages: str, result: object = None) -> Callable[[], object]:
    r"""Create an operation raising one ``RuntimeError`` per message, then
    returning ``result``.

    Args:
        *messages: The messages of the successive failures.
        result: The value returned once all the failures are consumed.

    Returns:
        A zero-argument operation with a ``calls`` counter attribute.
    """
    remaining = list(messages)

    def operation() -> object:
        operation.calls += 1
        if remaining:
            raise RuntimeError(remaining.pop(0))
        return result

    operation.calls = 0
    return operation


def always_failing_operation(message: str = "boom") -> Callable[[], None]:
    r"""Create an operation that always raises ``RuntimeError(message)``.

    Args:
        message: The exception message.

    Returns:
        A zero-argument operation with a ``calls`` counter attribute.
    """

    def operation() -> None:
        operation.calls += 1
        raise RuntimeError(message)

    operation.calls = 0
    return operation
