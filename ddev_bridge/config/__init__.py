"""Settings for the hook, MCP and CLI surfaces."""
