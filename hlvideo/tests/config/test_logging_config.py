"""Tests for the loguru sink manager."""

from __future__ import annotations

from loguru import logger

from hlvideo.config.settings import LoggingConfig
from hlvideo.utils.logging_config import LoggerManager


def test_configure_adds_file_sink(tmp_path) -> None:
    log_file = tmp_path / "hlvideo.log"
    manager = LoggerManager()
    manager.configure(LoggingConfig(level="warning", enable_file_logging=True, log_file=str(log_file)))

    logger.info("quiet")
    logger.warning("brief relay degraded")
    logger.remove(manager.file_sink_id)

    content = log_file.read_text(encoding="utf-8")
    assert "brief relay degraded" in content
    assert "quiet" not in content
    assert manager.level == "WARNING"


def test_console_sink_toggles() -> None:
    manager = LoggerManager()

    manager.enable_console()
    sink_id = manager.console_sink_id
    manager.enable_console()
    assert manager.console_sink_id == sink_id

    manager.disable_console()
    assert manager.console_sink_id is None


def test_file_sink_needs_a_path() -> None:
    manager = LoggerManager()

    manager.configure(LoggingConfig(enable_file_logging=True, log_file=None))

    assert manager.file_sink_id is None
