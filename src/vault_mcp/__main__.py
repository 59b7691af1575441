from vault_mcp.cli import main

main()
