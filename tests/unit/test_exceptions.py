r"""Unit tests for RetryError."""

from __future__ import annotations

import pickle

import pytest

from aretry import RetryError

################################
#     Tests for RetryError     #
################################


def test_retry_error_is_exception() -> None:
    """Test that RetryError can be raised and caught as an Exception."""
    with pytest.raises(Exception, match="last"):
        raise RetryError([RuntimeError("first"), RuntimeError("last")])


@pytest.mark.parametrize(
    "messages",
    [["a"], ["a", "b"], ["a", "b", "c"], ["timeout", "refused", "reset", "closed"]],
)
def test_retry_error_str_is_last_message(messages: list[str]) -> None:
    """Test that the message is the message of the last error."""
    error = RetryError([RuntimeError(message) for message in messages])
    assert str(error) == messages[-1]


def test_retry_error_empty_str() -> None:
    """Test that an empty RetryError has an empty message."""
    assert str(RetryError([])) == ""


def test_retry_error_errors() -> None:
    """Test that errors exposes every error in order."""
    errors = [ValueError("a"), KeyError("b"), RuntimeError("c")]
    assert RetryError(errors).errors == errors


def test_retry_error_errors_is_copy() -> None:
    """Test that mutating errors does not change the RetryError."""
    error = RetryError([ValueError("a")])
    error.errors.append(ValueError("b"))
    assert len(error) == 1


def test_retry_error_last_error() -> None:
    """Test that last_error is the most recent error."""
    last = RuntimeError("c")
    assert RetryError([RuntimeError("a"), last]).last_error is last


def test_retry_error_last_error_empty() -> None:
    """Test that last_error is None for an empty RetryError."""
    assert RetryError([]).last_error is None


def test_retry_error_sequence_protocol() -> None:
    """Test len, iteration and indexing."""
    errors = [ValueError("a"), RuntimeError("b")]
    error = RetryError(iter(errors))

    assert len(error) == 2
    assert list(error) == errors
    assert error[0] is errors[0]
    assert error[-1] is errors[1]


def test_retry_error_repr() -> None:
    """Test the representation lists the errors."""
    assert repr(RetryError([ValueError("a")])) == "RetryError([ValueError('a')])"


def test_retry_error_pickle() -> None:
    """Test that RetryError survives a pickle round trip."""
    error = pickle.loads(pickle.dumps(RetryError([ValueError("a"), ValueError("b")])))
    assert str(error) == "b"
    assert len(error) == 2
