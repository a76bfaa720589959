"""
DDEV Bridge MCP Server.

Provides tools for inspecting the DDEV environment of the current project.
Tools that need a DDEV project are only registered when one was detected at
startup.

Setup:
    claude mcp add --scope project ddev-bridge -- uv run --directory "$REPO_ROOT" ddev-bridge-mcp

Example:
    # Last 50 lines of the web container log
    ddev_logs()

    # Database log with timestamps
    ddev_logs(service='db', tail=200, time=True)
"""

from __future__ import annotations

import contextlib
import os
from collections.abc import AsyncIterator, Awaitable, Callable, Sequence
from pathlib import Path
from typing import Any

import attrs
from mcp.server.fastmcp import Context, FastMCP

from ddev_bridge.config.mcp import settings
from ddev_bridge.mcp.utils import ConsoleLogger, DualLogger
from ddev_bridge.schemas.operations import StatusReport
from ddev_bridge.schemas.state import BridgeState, EnvironmentStatus
from ddev_bridge.services.factory import build_logs_service, build_status_cache
from ddev_bridge.services.logs import DdevLogsService
from ddev_bridge.services.process import SubprocessRunner
from ddev_bridge.services.status import EnvironmentStatusCache

# ==============================================================================
# Server State (immutable)
# ==============================================================================


@attrs.define(frozen=True)
class ServerState:
    """
    Immutable server state initialized at startup.

    Contains all services and configuration needed for tool execution.
    """

    project_dir: Path
    startup_status: EnvironmentStatus
    status_cache: EnvironmentStatusCache
    logs_service: DdevLogsService


@attrs.define(frozen=True)
class ToolDefinition:
    """A tool the server can offer, with the condition for offering it."""

    name: str
    fn: Callable[..., Awaitable[Any]]
    requires_environment: bool


# ==============================================================================
# Lifespan Management
# ==============================================================================


def _project_dir() -> Path:
    """Claude Code exports CLAUDE_PROJECT_DIR to MCP servers it launches."""
    if settings.PROJECT_DIR is not None:
        return settings.PROJECT_DIR.expanduser()
    return Path(os.environ.get('CLAUDE_PROJECT_DIR') or os.getcwd())


@contextlib.asynccontextmanager
async def lifespan(mcp_server: FastMCP) -> AsyncIterator[None]:
    """
    Manage server lifecycle and state initialization.

    Probes DDEV once, then registers the tools the probe result allows.
    """
    console = ConsoleLogger()
    project_dir = _project_dir()
    runner = SubprocessRunner()

    status_cache = build_status_cache(BridgeState(), settings, runner, console)
    startup_status = await status_cache.refresh(str(project_dir))

    state = ServerState(
        project_dir=project_dir,
        startup_status=startup_status,
        status_cache=status_cache,
        logs_service=build_logs_service(settings, runner),
    )

    registered = register_tools(state)

    await console.info(f'Project: {project_dir}')
    await console.info(f'DDEV available: {startup_status.available}, running: {startup_status.running}')
    await console.info(f'Tools: {", ".join(registered)}')

    yield  # Setup successful; application active


# ==============================================================================
# Server Setup
# ==============================================================================

server = FastMCP('ddev-bridge', lifespan=lifespan)


# ==============================================================================
# Tool Registration (Builder Pattern)
# ==============================================================================


def build_tools(state: ServerState) -> list[ToolDefinition]:
    """
    Build every tool with closure over server state.

    Args:
        state: Server state containing services

    Returns:
        All tool definitions, regardless of the startup probe result
    """

    async def ddev_status() -> StatusReport:
        """
        Report whether DDEV is available and running for this project.

        Returns the container directory Bash commands are redirected to and
        the `ddev exec` prefix to use for explicit container execution.
        """
        return await state.status_cache.report(str(state.project_dir))

    async def ddev_logs(
        service: str | None = None,
        follow: bool = False,
        tail: int | None = None,
        time: bool = False,
        ctx: Context[Any, Any, Any] | None = None,
    ) -> str:
        """
        Get logs from DDEV services (web, db, etc.).

        Use this to debug issues or monitor service output. It gives insight
        into questions like 'is my request reaching the application?' or
        'why is my database connection failing?'.

        Args:
            service: Service to get logs from (e.g. 'web', 'db'). Defaults to 'web'.
            follow: Stream logs for a few seconds instead of reading the tail. Cannot be combined with tail.
            tail: Number of lines from the end of the log. Defaults to 50. Ignored when following.
            time: Add timestamps to log output.

        Returns:
            Log output exactly as printed by `ddev logs`
        """
        logger = DualLogger(ctx)
        args = state.logs_service.build_command(service=service, follow=follow, tail=tail, time=time)
        await logger.debug(f'Running: {" ".join(args)}')

        return await state.logs_service.fetch(service=service, follow=follow, tail=tail, time=time)

    return [
        ToolDefinition(name='ddev_status', fn=ddev_status, requires_environment=False),
        ToolDefinition(name='ddev_logs', fn=ddev_logs, requires_environment=True),
    ]


def select_tools(tools: Sequence[ToolDefinition], status: EnvironmentStatus) -> list[ToolDefinition]:
    """Keep the tools whose requirements the startup status satisfies."""
    return [tool for tool in tools if status.available or not tool.requires_environment]


def register_tools(state: ServerState) -> list[str]:
    """
    Register the tools allowed by the startup probe.

    Args:
        state: Server state containing services

    Returns:
        Names of the registered tools
    """
    selected = select_tools(build_tools(state), state.startup_status)
    for tool in selected:
        server.add_tool(tool.fn, name=tool.name)
    return [tool.name for tool in selected]


# ==============================================================================
# Server Entry Point
# ==============================================================================


def main() -> None:
    """Run the MCP server."""
    server.run()


if __name__ == '__main__':
    main()
