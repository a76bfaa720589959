"""MCP server entry point for ddev-bridge."""

from __future__ import annotations

from ddev_bridge.mcp.server import main

__all__ = ['main']
