"""
DDEV environment status detection with a short-lived cache.

Only "running" results are cached. A stopped or missing environment is
probed again on every call, since the user may run `ddev start` between two
commands and the next command should pick that up immediately.
"""

from __future__ import annotations

import time
from collections.abc import Callable

import pydantic

from ddev_bridge.exceptions import ProbeError
from ddev_bridge.paths import CONTAINER_ROOT, is_within, to_container_path
from ddev_bridge.protocols import CommandRunner, LoggerProtocol
from ddev_bridge.schemas.ddev import DdevDescription
from ddev_bridge.schemas.operations import StatusReport
from ddev_bridge.schemas.state import RUNNING, STOPPED, UNAVAILABLE, BridgeState, EnvironmentStatus, StatusCacheEntry

__all__ = ['DEFAULT_CACHE_DURATION_SECONDS', 'EnvironmentStatusCache']

DEFAULT_CACHE_DURATION_SECONDS = 120.0


class EnvironmentStatusCache:
    """Probes `ddev describe -j` and keeps positive results in BridgeState."""

    def __init__(
        self,
        state: BridgeState,
        runner: CommandRunner,
        logger: LoggerProtocol,
        *,
        ddev_binary: str = 'ddev',
        container_root: str = CONTAINER_ROOT,
        cache_duration: float = DEFAULT_CACHE_DURATION_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Initialize status cache.

        Args:
            state: Context object receiving the cache entry and working directory
            runner: Executes the probe command
            logger: Receives probe failures at error level
            ddev_binary: ddev executable name or path
            container_root: Mount point of the project inside the container
            cache_duration: Seconds a "running" result stays valid
            clock: Returns the current time in epoch seconds
        """
        self.state = state
        self.runner = runner
        self.logger = logger
        self.ddev_binary = ddev_binary
        self.container_root = container_root
        self.cache_duration = cache_duration
        self.clock = clock

    async def refresh(self, host_dir: str) -> EnvironmentStatus:
        """
        Return the environment status, probing only when the cache is stale.

        Never raises: probe failures collapse to an unavailable status.

        Args:
            host_dir: Current host directory of the agent

        Returns:
            EnvironmentStatus of the DDEV project
        """
        entry = self.state.cache
        if entry is not None and self.clock() - entry.captured_at < self.cache_duration:
            if entry.host_dir != host_dir:
                self._apply_project_root(entry.project_root, host_dir)
                self.state.cache = entry.model_copy(
                    update={'host_dir': host_dir, 'container_working_dir': self.state.container_working_dir}
                )
            return entry.status

        try:
            description = await self.describe()
        except ProbeError as e:
            self.state.cache = None
            await self.logger.error(f'DDEV availability check failed: {e}')
            return UNAVAILABLE
        except Exception as e:
            self.state.cache = None
            await self.logger.error(f'DDEV availability check failed: {type(e).__name__}: {e}')
            return UNAVAILABLE

        if not description.is_running:
            self.state.cache = None
            return STOPPED

        project_root = description.project_root
        self._apply_project_root(project_root, host_dir)
        self.state.cache = StatusCacheEntry(
            captured_at=self.clock(),
            status=RUNNING,
            project_root=project_root,
            host_dir=host_dir,
            container_working_dir=self.state.container_working_dir,
        )
        return RUNNING

    async def report(self, host_dir: str) -> StatusReport:
        """Refresh the status and describe it together with the path mapping."""
        status = await self.refresh(host_dir)
        working_dir = self.state.container_working_dir if status.running else self.container_root
        project_root = self.state.project_root if status.running else None
        return StatusReport(
            available=status.available,
            running=status.running,
            host_dir=host_dir,
            project_root=project_root,
            container_working_dir=working_dir,
            inside_project=project_root is not None and is_within(host_dir, project_root),
            exec_prefix=f'{self.ddev_binary} exec --dir="{working_dir}"' if status.running else None,
        )

    async def describe(self) -> DdevDescription:
        """
        Run the probe and parse its output.

        Raises:
            ProbeError: If ddev exits non-zero or prints something that is not JSON
        """
        result = await self.runner.run([self.ddev_binary, 'describe', '-j'])

        if result.exit_code != 0:
            detail = result.stderr.strip() or result.stdout.strip() or 'no output'
            raise ProbeError(f'ddev describe exited with code {result.exit_code}: {detail}', result.exit_code)

        try:
            return DdevDescription.model_validate_json(result.stdout)
        except pydantic.ValidationError as e:
            raise ProbeError(f'Failed to parse DDEV JSON output: {e.error_count()} error(s)') from e

    def _apply_project_root(self, project_root: str | None, host_dir: str) -> None:
        self.state.project_root = project_root
        if project_root is None:
            self.state.container_working_dir = self.container_root
        else:
            self.state.container_working_dir = to_container_path(host_dir, project_root, self.container_root)
