"""
Shared protocols for ddev-bridge services.

Services depend on these seams instead of concrete classes. Each entry
point (hook, MCP server, CLI) plugs in its own implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

import attrs


class LoggerProtocol(Protocol):
    """
    Async logger used by every service.

    Implementations:
    - DualLogger (mcp/utils.py): stderr plus the MCP client context
    - ConsoleLogger (mcp/utils.py): stderr during server startup
    - CLILogger (cli/logger.py): stderr, debug and info only when verbose
    - HookLogger (hooks/logger.py): Appends JSON lines to the hook log file
    - NullLogger (below): discards everything
    """

    async def debug(self, message: str) -> None: ...
    async def info(self, message: str) -> None: ...
    async def warning(self, message: str) -> None: ...
    async def error(self, message: str) -> None: ...


class NullLogger:
    """Logger for code paths that never produce log output (session-start hook)."""

    async def debug(self, message: str) -> None:
        pass

    async def info(self, message: str) -> None:
        pass

    async def warning(self, message: str) -> None:
        pass

    async def error(self, message: str) -> None:
        pass


@attrs.define(frozen=True)
class CommandResult:
    """Captured outcome of an external command."""

    exit_code: int
    stdout: str
    stderr: str
    timed_out: bool = False


class CommandRunner(Protocol):
    """
    Runs external commands without raising on non-zero exit.

    Failures are signaled through CommandResult.exit_code. Implementations
    may still raise OSError when the executable cannot be started.
    """

    async def run(self, args: Sequence[str], *, timeout: float | None = None) -> CommandResult: ...


class MessengerProtocol(Protocol):
    """
    One-way channel to the agent of a session.

    Messages are informational; no reply is requested from the agent.
    """

    async def send(self, session_id: str, text: str) -> None: ...
