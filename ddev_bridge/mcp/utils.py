"""
Shared utilities for the MCP server.

stdout carries the stdio transport, so console output goes to stderr.
"""

from __future__ import annotations

# Standard Library
import sys
from datetime import UTC, datetime
from typing import Any

# Third-Party Libraries
from mcp.server.fastmcp import Context


class DualLogger:
    """Logs messages to both the console and MCP client context."""

    def __init__(self, ctx: Context[Any, Any, Any] | None) -> None:
        self.ctx = ctx  # None when the tool is called outside a request

    def _timestamp(self) -> str:
        return datetime.now(UTC).strftime('%Y-%m-%d %H:%M:%S')

    async def info(self, message: str) -> None:
        print(f'[{self._timestamp()}] [INFO] {message}', file=sys.stderr)
        if self.ctx is not None:
            await self.ctx.info(message)

    async def debug(self, message: str) -> None:
        print(f'[{self._timestamp()}] [DEBUG] {message}', file=sys.stderr)
        if self.ctx is not None:
            await self.ctx.debug(message)

    async def warning(self, message: str) -> None:
        print(f'[{self._timestamp()}] [WARNING] {message}', file=sys.stderr)
        if self.ctx is not None:
            await self.ctx.warning(message)

    async def error(self, message: str) -> None:
        print(f'[{self._timestamp()}] [ERROR] {message}', file=sys.stderr)
        if self.ctx is not None:
            await self.ctx.error(message)


class ConsoleLogger:
    """Timestamped console logger for server startup, before any client context exists."""

    def _timestamp(self) -> str:
        return datetime.now(UTC).strftime('%Y-%m-%d %H:%M:%S')

    async def info(self, message: str) -> None:
        print(f'[{self._timestamp()}] [INFO] {message}', file=sys.stderr)

    async def debug(self, message: str) -> None:
        print(f'[{self._timestamp()}] [DEBUG] {message}', file=sys.stderr)

    async def warning(self, message: str) -> None:
        print(f'[{self._timestamp()}] [WARNING] {message}', file=sys.stderr)

    async def error(self, message: str) -> None:
        print(f'[{self._timestamp()}] [ERROR] {message}', file=sys.stderr)
