"""VaultServer — wires settings, vault writer, tools, dispatcher, and transport."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from vault_mcp.protocol.dispatcher import ProtocolDispatcher
from vault_mcp.protocol.transport import StdioTransport
from vault_mcp.settings.loader import check_vault_path
from vault_mcp.tools.ping import PingTool
from vault_mcp.tools.registry import ToolRegistry
from vault_mcp.tools.save_markdown import SaveMarkdownFileTool
from vault_mcp.utils.logging import logging_scope
from vault_mcp.utils.telemetry import configure_telemetry
from vault_mcp.vault.writer import VaultWriter

if TYPE_CHECKING:
    from typing import BinaryIO

    from vault_mcp.settings.models import Settings

logger = logging.getLogger(__name__)


def build_registry(writer: VaultWriter) -> ToolRegistry:
    """Create a registry holding the built-in tools, in listing order."""
    registry = ToolRegistry()
    registry.register(SaveMarkdownFileTool(writer))
    registry.register(PingTool())
    return registry


def build_dispatcher(settings: Settings) -> ProtocolDispatcher:
    """Construct the dispatcher described by *settings*."""
    writer = VaultWriter(settings.vault.root, settings.vault.target_directory)
    return ProtocolDispatcher(
        build_registry(writer),
        server_name=settings.server.name,
        server_version=settings.server.version,
    )


class VaultServer:
    """Run the stdio MCP server for one process lifetime.

    Usage::

        server = VaultServer(load_settings())
        server.run()            # async loop; ``run(sync=True)`` for blocking
    """

    def __init__(
        self,
        settings: Settings,
        *,
        reader: BinaryIO | None = None,
        writer: BinaryIO | None = None,
    ) -> None:
        self.settings = settings
        self.dispatcher = build_dispatcher(settings)
        self.transport = StdioTransport(self.dispatcher, reader=reader, writer=writer)

    def run(self, *, sync: bool = False) -> int:
        """Serve until end-of-input; returns the number of messages handled.

        Logging and telemetry are set up for the duration of the call and torn
        down before returning.

        Raises:
            TransportError: stdin/stdout failed.
            SettingsError: The vault path exists but is not a directory.
        """
        with logging_scope(self.settings.logging):
            provider = self._start_telemetry()
            try:
                check_vault_path(self.settings)
                logger.info(
                    "Starting %s %s (vault=%s, target=%s)",
                    self.settings.server.name,
                    self.settings.server.version,
                    self.settings.vault.root,
                    self.settings.vault.target_directory,
                )
                if sync:
                    return self.transport.serve_sync()
                return asyncio.run(self.transport.serve())
            finally:
                if provider is not None:
                    provider.shutdown()

    def _start_telemetry(self) -> Any:
        telemetry = self.settings.telemetry
        if not telemetry.enabled:
            return None
        return configure_telemetry(
            service_name=self.settings.server.name,
            otlp_endpoint=telemetry.otlp_endpoint,
        )
