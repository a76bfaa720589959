"""
MCP server configuration.

Extends base configuration with MCP-specific settings.
"""

from __future__ import annotations

import pathlib

from ddev_bridge.config.base import BaseBridgeSettings, lazy_settings


class McpServerSettings(BaseBridgeSettings):
    """MCP server-specific configuration."""

    # Host directory probed at startup. Unset: CLAUDE_PROJECT_DIR, then the working directory.
    PROJECT_DIR: pathlib.Path | None = None


# Module-level singleton (lazy-loaded)
settings = lazy_settings(McpServerSettings)
