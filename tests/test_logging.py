"""Tests for logging setup and secret redaction."""

import logging

import pytest

from config.logging_setup import RedactSecrets, setup_logging


def _record(msg, *args):
    return logging.LogRecord("forge", logging.INFO, __file__, 1, msg, args, None)


@pytest.mark.parametrize("message, expected", [
    ("sending Bearer abc.def.ghi upstream", "sending Bearer [REDACTED] upstream"),
    ("token=abc123 rest", "token=[REDACTED] rest"),
    ('{"password": "hunter22"}', '{"password": "[REDACTED]"}'),
    ("Calling tool get-server-tool", "Calling tool get-server-tool"),
])
def test_redaction(message, expected):
    record = _record(message)
    assert RedactSecrets().filter(record) is True
    assert record.getMessage() == expected


def test_redaction_applies_to_formatted_arguments():
    record = _record("headers %s", {"Authorization": "Bearer abc"})
    RedactSecrets().filter(record)
    assert "abc" not in record.getMessage()
    assert record.args == ()


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_log_file(monkeypatch, tmp_path, restore_root_logger):
    log_file = tmp_path / "logs" / "forge.log"
    monkeypatch.setenv("LOG_FILE", str(log_file))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    setup_logging()
    logging.getLogger("forge.test").debug("using token=abc123")
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "DEBUG | forge.test | using token=[REDACTED]" in content
    assert logging.getLogger("httpx").level == logging.WARNING
