"""Command line for the vault-mcp server.

``vault-mcp serve`` speaks MCP on stdin/stdout; the other commands are
helpers for inspecting tools and the YAML settings file.
"""

from __future__ import annotations

import click

from vault_mcp import __version__
from vault_mcp.cli_commands import register_commands

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"], "max_content_width": 100}


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="vault-mcp")
def main() -> None:
    """Save markdown notes into a local vault over MCP.

    \b
    serve         run the stdio server (stdout carries protocol only)
    tools list    show the tools a client will discover
    config        manage the YAML settings file
    """


register_commands(main)

if __name__ == "__main__":
    main()
