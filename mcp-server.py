#!/usr/bin/env -S uv run
"""
DDEV Bridge MCP Server.

Provides DDEV status and log tools to Claude Code.

Setup:
    claude mcp add --transport stdio ddev-bridge -- uv run "$REPO_ROOT/mcp-server.py"

Example:
    # Last 50 lines of the web container log
    ddev_logs()
"""

from __future__ import annotations

from ddev_bridge.mcp.server import main

if __name__ == '__main__':
    main()
