"""Tests for error types and logging setup."""

import json
import logging
import sys
from logging.handlers import RotatingFileHandler

import pytest

from fourier_lab.utils import (
    FourierLabError,
    InvalidParameterError,
    JSONFormatter,
    LengthMismatchError,
    get_logger,
    setup_logging,
)


@pytest.fixture
def restore_root_logger(monkeypatch):
    root = logging.getLogger()
    level = root.level
    monkeypatch.setattr(root, "handlers", [])
    yield root
    for handler in root.handlers:
        handler.close()
    root.setLevel(level)


class TestErrors:
    def test_invalid_parameter_details(self):
        err = InvalidParameterError("sr must be positive", parameter="sr", value=0)

        assert isinstance(err, FourierLabError)
        assert isinstance(err, ValueError)
        assert err.parameter == "sr"
        assert "sr must be positive" in str(err)
        assert "'parameter': 'sr'" in str(err)

    def test_length_mismatch_details(self):
        err = LengthMismatchError("bad length", expected=4, actual=3)

        assert err.expected == 4
        assert err.actual == 3
        assert err.details == {"expected": 4, "actual": 3}

    def test_base_error_without_details(self):
        assert str(FourierLabError("plain")) == "plain"


class TestLogging:
    def test_text_setup(self, restore_root_logger):
        setup_logging(level="DEBUG", log_format="text")

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        assert not isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)

    def test_json_setup_with_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "lab.log"
        setup_logging(level="info", log_format="json", log_file=str(log_file))

        handlers = restore_root_logger.handlers
        assert isinstance(handlers[0].formatter, JSONFormatter)
        assert any(isinstance(h, RotatingFileHandler) for h in handlers)

        get_logger("fourier_lab.test").info("hello %s", "lab")
        for handler in handlers:
            handler.flush()
        record = json.loads(log_file.read_text().splitlines()[-1])
        assert record["message"] == "hello lab"
        assert record["level"] == "INFO"

    def test_repeat_setup_does_not_stack_handlers(self, restore_root_logger):
        setup_logging()
        setup_logging()

        assert len(restore_root_logger.handlers) == 1

    def test_json_formatter_includes_exception(self):
        try:
            raise InvalidParameterError("boom", parameter="nfft", value=0)
        except InvalidParameterError:
            record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())

        payload = json.loads(JSONFormatter().format(record))
        assert payload["message"] == "failed"
        assert "InvalidParameterError" in payload["exception"]
