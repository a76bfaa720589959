"""
Interception of agent shell commands.

Decision sequence for every command (first terminal step wins):

1. Host-only command (git, gh, docker, ddev, or `ddev ...`) -> unchanged
2. Refresh environment status
3. DDEV unavailable -> unchanged
4. DDEV stopped -> nudge once per session, unchanged
5. DDEV running -> notice once per session, rewrite to `ddev exec`
"""

from __future__ import annotations

import asyncio
from collections.abc import Collection, MutableMapping
from typing import Any

import attrs

from ddev_bridge.paths import CONTAINER_ROOT
from ddev_bridge.protocols import LoggerProtocol
from ddev_bridge.schemas.state import BridgeState, EnvironmentStatus
from ddev_bridge.services.notifier import SessionNotifier
from ddev_bridge.services.rewriter import wrap_command
from ddev_bridge.services.status import EnvironmentStatusCache

__all__ = [
    'DEFAULT_HOST_ONLY_COMMANDS',
    'DEFAULT_SHELL_TOOL_NAMES',
    'InterceptionOrchestrator',
    'InterceptionResult',
]

DEFAULT_HOST_ONLY_COMMANDS = ('git', 'gh', 'docker', 'ddev')
DEFAULT_SHELL_TOOL_NAMES = ('Bash', 'bash')

# Debug log previews are cut to this many characters
LOG_PREVIEW_LENGTH = 80


@attrs.define(frozen=True)
class InterceptionResult:
    """Outcome of intercepting one command."""

    command: str
    rewritten: bool
    status: EnvironmentStatus | None  # None when the status was never checked


class InterceptionOrchestrator:
    """Wires the status cache, notifier and rewriter together for one host session."""

    def __init__(
        self,
        state: BridgeState,
        status_cache: EnvironmentStatusCache,
        notifier: SessionNotifier,
        logger: LoggerProtocol,
        *,
        host_only_commands: Collection[str] = DEFAULT_HOST_ONLY_COMMANDS,
        shell_tool_names: Collection[str] = DEFAULT_SHELL_TOOL_NAMES,
        ddev_binary: str = 'ddev',
        container_root: str = CONTAINER_ROOT,
    ) -> None:
        self.state = state
        self.status_cache = status_cache
        self.notifier = notifier
        self.logger = logger
        self.host_only_commands = frozenset(host_only_commands)
        self.shell_tool_names = frozenset(shell_tool_names)
        self.ddev_binary = ddev_binary
        self.container_root = container_root
        self._lock = asyncio.Lock()

    def should_run_on_host(self, command: str) -> bool:
        """Check whether a command must bypass the container."""
        if command.startswith(f'{self.ddev_binary} '):
            return True

        tokens = command.split()
        if not tokens:
            return True
        return tokens[0] in self.host_only_commands

    async def on_session_created(self, session_id: str) -> None:
        """Reset per-session notification state."""
        async with self._lock:
            self.notifier.on_session_created(session_id)

    async def intercept(self, command: str, host_dir: str) -> InterceptionResult:
        """
        Decide whether ``command`` runs on the host or inside the container.

        Args:
            command: Shell command issued by the agent
            host_dir: Host directory the command was issued from

        Returns:
            InterceptionResult with the command to execute

        Raises:
            Exception: Whatever the messenger raises while sending a notice
        """
        if self.should_run_on_host(command):
            return InterceptionResult(command=command, rewritten=False, status=None)

        async with self._lock:
            status = await self.status_cache.refresh(host_dir)

            if not status.available:
                return InterceptionResult(command=command, rewritten=False, status=status)

            if not status.running:
                await self.notifier.ask_to_start_if_needed()
                return InterceptionResult(command=command, rewritten=False, status=status)

            await self.notifier.notify_if_needed()
            wrapped = wrap_command(
                command,
                self.state.project_root,
                self.state.container_working_dir,
                container_root=self.container_root,
                ddev_binary=self.ddev_binary,
            )

        if wrapped != command and not command.startswith(f'{self.ddev_binary} exec'):
            preview = command[:LOG_PREVIEW_LENGTH] + ('...' if len(command) > LOG_PREVIEW_LENGTH else '')
            await self.logger.debug(f'Wrapped command (cd removed if redundant): {preview}')

        return InterceptionResult(command=wrapped, rewritten=wrapped != command, status=status)

    async def before_tool_execute(
        self,
        tool_name: str,
        tool_input: MutableMapping[str, Any],
        host_dir: str,
    ) -> InterceptionResult | None:
        """
        Rewrite the ``command`` argument of a shell tool call in place.

        Returns:
            InterceptionResult, or None if the tool call was not a shell command
        """
        if tool_name not in self.shell_tool_names:
            return None

        command = tool_input.get('command')
        if not isinstance(command, str):
            return None

        result = await self.intercept(command, host_dir)
        if result.rewritten:
            tool_input['command'] = result.command
        return result
