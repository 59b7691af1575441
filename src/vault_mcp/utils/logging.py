"""Scoped logging setup for the server process.

Handlers are attached to the ``vault_mcp`` logger for the lifetime of a
``with logging_scope(...)`` block and closed on exit.  Console records go to
stderr through rich; stdout belongs to the JSON-RPC stream.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from vault_mcp.settings.models import LoggingSettings

ROOT_LOGGER_NAME = "vault_mcp"

_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def resolve_level(name: str) -> int:
    """Map a configured level name to a :mod:`logging` level."""
    try:
        return _LEVELS[name.lower()]
    except KeyError:
        msg = f"Unknown log level: {name}. Must be one of: {', '.join(_LEVELS)}"
        raise ValueError(msg) from None


def build_handlers(settings: LoggingSettings) -> list[logging.Handler]:
    """Create (but do not install) the handlers described by *settings*."""
    handlers: list[logging.Handler] = []

    if settings.console:
        console = Console(stderr=True)
        handlers.append(RichHandler(console=console, show_path=False, rich_tracebacks=True))

    if settings.file:
        log_path = Path(settings.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(file_handler)

    return handlers


@contextmanager
def logging_scope(settings: LoggingSettings) -> Iterator[logging.Logger]:
    """Install handlers for the duration of the block, then remove and close them."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = build_handlers(settings)
    previous_level = logger.level
    previous_propagate = logger.propagate

    logger.setLevel(resolve_level(settings.level))
    logger.propagate = False
    for handler in handlers:
        logger.addHandler(handler)

    try:
        yield logger
    finally:
        for handler in handlers:
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(previous_level)
        logger.propagate = previous_propagate
