r"""Unit tests for the ready-made retry observers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from aretry import do
from aretry.callbacks import log_retry
from aretry.options import attempts, delay, on_retry
from tests.helpers import failing_operation

if TYPE_CHECKING:
    import pytest


def test_log_retry_default_logger(caplog: pytest.LogCaptureFixture) -> None:
    """Test that log_retry logs to the aretry logger at WARNING level."""
    callback = log_retry()
    with caplog.at_level(logging.WARNING, logger="aretry"):
        callback(0, RuntimeError("boom"))

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.name == "aretry"
    assert record.levelno == logging.WARNING
    assert record.getMessage() == "Attempt 1 failed with RuntimeError: boom"


def test_log_retry_custom_logger_and_level(caplog: pytest.LogCaptureFixture) -> None:
    """Test log_retry with a custom logger and level."""
    logger = logging.getLogger("my_app")
    callback = log_retry(logger, level=logging.INFO)
    with caplog.at_level(logging.INFO, logger="my_app"):
        callback(2, ValueError("bad"))

    assert [(r.name, r.levelno, r.getMessage()) for r in caplog.records] == [
        ("my_app", logging.INFO, "Attempt 3 failed with ValueError: bad")
    ]


def test_log_retry_with_do(caplog: pytest.LogCaptureFixture) -> None:
    """Test that log_retry logs once per failed attempt."""
    operation = failing_operation("a", "b", result="ok")
    logger = logging.getLogger("my_app")
    with caplog.at_level(logging.WARNING, logger="my_app"):
        assert do(operation, attempts(5), delay(0), on_retry(log_retry(logger))) == "ok"

    assert [r.getMessage() for r in caplog.records if r.name == "my_app"] == [
        "Attempt 1 failed with RuntimeError: a",
        "Attempt 2 failed with RuntimeError: b",
    ]
