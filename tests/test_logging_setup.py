from __future__ import annotations

import io
import logging

import pytest

from nordpaths.logging_setup import configure_logging

pytestmark = pytest.mark.usefixtures("restore_logging")


def test_level_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert configure_logging() == logging.DEBUG


def test_invalid_level_falls_back_with_warning(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    stream = io.StringIO()

    level = configure_logging(default_level="INFO", stream=stream)

    assert level == logging.INFO
    assert "Invalid LOG_LEVEL 'CHATTY'; using INFO" in stream.getvalue()


def test_log_file_receives_records(monkeypatch, tmp_path) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    log_file = tmp_path / "nordfileshared.log"

    configure_logging(default_level="INFO", log_file=str(log_file), stream=io.StringIO())
    logging.getLogger("nordpaths.test").info("transfer finished")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "INFO [nordpaths.test] transfer finished" in log_file.read_text(encoding="utf-8")


def test_unwritable_log_file_keeps_stream(monkeypatch, tmp_path) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    stream = io.StringIO()

    configure_logging(log_file=str(tmp_path / "missing" / "x.log"), stream=stream)

    assert "cannot open log file" in stream.getvalue()
