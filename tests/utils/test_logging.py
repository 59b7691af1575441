"""Tests for scoped logging setup."""

import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler

from vault_mcp.settings.models import LoggingSettings
from vault_mcp.utils.logging import ROOT_LOGGER_NAME, build_handlers, logging_scope, resolve_level


class TestResolveLevel:
    @pytest.mark.parametrize(
        ("name", "level"),
        [
            ("trace", logging.DEBUG),
            ("debug", logging.DEBUG),
            ("INFO", logging.INFO),
            ("warn", logging.WARNING),
            ("warning", logging.WARNING),
            ("error", logging.ERROR),
            ("critical", logging.CRITICAL),
        ],
    )
    def test_known(self, name: str, level: int) -> None:
        assert resolve_level(name) == level

    def test_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            resolve_level("verbose")


class TestBuildHandlers:
    def test_console_handler_on_stderr(self) -> None:
        handlers = build_handlers(LoggingSettings())
        assert len(handlers) == 1
        assert isinstance(handlers[0], RichHandler)
        assert handlers[0].console.stderr

    def test_no_handlers(self) -> None:
        assert build_handlers(LoggingSettings(console=False)) == []

    def test_file_handler_creates_parent(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "server.log"
        handlers = build_handlers(LoggingSettings(console=False, file=str(log_file)))
        try:
            assert len(handlers) == 1
            assert isinstance(handlers[0], logging.FileHandler)
            assert log_file.parent.is_dir()
        finally:
            for handler in handlers:
                handler.close()


class TestLoggingScope:
    def test_writes_file_and_restores(self, tmp_path: Path) -> None:
        log_file = tmp_path / "server.log"
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        before_handlers = list(logger.handlers)
        before_level = logger.level
        before_propagate = logger.propagate

        settings = LoggingSettings(level="debug", console=False, file=str(log_file))
        with logging_scope(settings) as scoped:
            assert scoped is logger
            assert logger.level == logging.DEBUG
            assert logger.propagate is False
            logging.getLogger("vault_mcp.vault.writer").debug("hello from writer")

        assert "hello from writer" in log_file.read_text(encoding="utf-8")
        assert logger.handlers == before_handlers
        assert logger.level == before_level
        assert logger.propagate is before_propagate

    def test_level_filters(self, tmp_path: Path) -> None:
        log_file = tmp_path / "server.log"
        settings = LoggingSettings(level="error", console=False, file=str(log_file))

        with logging_scope(settings):
            logging.getLogger("vault_mcp.server").info("quiet")
            logging.getLogger("vault_mcp.server").error("loud")

        text = log_file.read_text(encoding="utf-8")
        assert "loud" in text
        assert "quiet" not in text

    def test_restores_on_error(self) -> None:
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        before = list(logger.handlers)

        with pytest.raises(RuntimeError):
            with logging_scope(LoggingSettings()):
                raise RuntimeError("boom")

        assert logger.handlers == before
