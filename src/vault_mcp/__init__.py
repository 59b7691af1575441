"""vault-mcp — a stdio MCP server that saves markdown notes into a vault."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from vault_mcp.protocol.dispatcher import ProtocolDispatcher as ProtocolDispatcher
    from vault_mcp.server import VaultServer as VaultServer

_LAZY_EXPORTS = {
    "ProtocolDispatcher": "vault_mcp.protocol.dispatcher",
    "VaultServer": "vault_mcp.server",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'vault_mcp' has no attribute {name!r}")
