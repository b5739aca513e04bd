"""Tests for logging setup."""

from __future__ import annotations

import logging

import pytest

from scrolldialog.core.logging import get_log_directory, setup_logging


@pytest.fixture
def logger_name(request) -> str:
    name = f"ScrollDialogTest.{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()


def test_info_level_by_default(logger_name, monkeypatch) -> None:
    monkeypatch.delenv("SCROLLDIALOG_DEBUG", raising=False)
    logger = setup_logging(logger_name, log_to_file=False)
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_env_var_enables_debug(logger_name, monkeypatch) -> None:
    monkeypatch.setenv("SCROLLDIALOG_DEBUG", "1")
    logger = setup_logging(logger_name, log_to_file=False)
    assert logger.level == logging.DEBUG


def test_suppress_env_var_wins(logger_name, monkeypatch) -> None:
    monkeypatch.setenv("SCROLLDIALOG_DEBUG", "1")
    monkeypatch.setenv("SCROLLDIALOG_SUPPRESS_DEBUG", "1")
    logger = setup_logging(logger_name, debug_enabled=True, log_to_file=False)
    assert logger.level == logging.INFO


def test_second_call_only_updates_level(logger_name, monkeypatch) -> None:
    monkeypatch.delenv("SCROLLDIALOG_DEBUG", raising=False)
    setup_logging(logger_name, log_to_file=False)
    logger = setup_logging(logger_name, debug_enabled=True, log_to_file=False)
    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == logging.DEBUG


def test_file_handler_written_to_log_directory(logger_name, tmp_path, monkeypatch) -> None:
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    logger = setup_logging(logger_name)
    assert get_log_directory(logger_name) == str(tmp_path / logger_name)
    assert (tmp_path / logger_name / "log.txt").exists()
    assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)
