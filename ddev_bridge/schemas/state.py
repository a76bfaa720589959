"""
Environment status and per-session state.

BridgeState is the context object owned by one interception orchestrator.
The hook adapter persists it between invocations (one file per session),
so every model here round-trips through JSON.
"""

from __future__ import annotations

import pydantic
from pydantic import ConfigDict, Field

from ddev_bridge.base_model import StrictModel
from ddev_bridge.paths import CONTAINER_ROOT


class EnvironmentStatus(StrictModel):
    """Result of one environment probe."""

    available: bool
    running: bool

    @pydantic.model_validator(mode='after')
    def check_running_implies_available(self) -> EnvironmentStatus:
        if self.running and not self.available:
            raise ValueError('An unavailable environment cannot be running')
        return self


UNAVAILABLE = EnvironmentStatus(available=False, running=False)
STOPPED = EnvironmentStatus(available=True, running=False)
RUNNING = EnvironmentStatus(available=True, running=True)


class StatusCacheEntry(StrictModel):
    """A cached "running" probe result.

    Only running results are cached; anything else is re-probed on the next command.
    """

    captured_at: float = Field(strict=False)  # Epoch seconds (JSON may hold an int)
    status: EnvironmentStatus
    project_root: str | None
    host_dir: str
    container_working_dir: str


class SessionState(StrictModel):
    """Notification flags of the active session."""

    model_config = ConfigDict(extra='forbid', strict=True, frozen=False)

    session_id: str | None = None
    notified: bool = False
    asked_to_start: bool = False


class BridgeState(StrictModel):
    """Mutable context shared by the status cache, notifier and orchestrator.

    This model is NOT frozen; services update it in place.
    """

    model_config = ConfigDict(extra='forbid', strict=True, frozen=False)

    schema_version: str = '1.0'
    cache: StatusCacheEntry | None = None
    session: SessionState = Field(default_factory=SessionState)
    project_root: str | None = None
    container_working_dir: str = CONTAINER_ROOT
