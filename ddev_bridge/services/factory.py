"""Construct the service graph from settings."""

from __future__ import annotations

import time
from collections.abc import Callable, Collection

from ddev_bridge.config.base import BaseBridgeSettings
from ddev_bridge.protocols import CommandRunner, LoggerProtocol, MessengerProtocol
from ddev_bridge.schemas.state import BridgeState
from ddev_bridge.services.interception import DEFAULT_SHELL_TOOL_NAMES, InterceptionOrchestrator
from ddev_bridge.services.logs import DdevLogsService
from ddev_bridge.services.notifier import SessionNotifier
from ddev_bridge.services.status import EnvironmentStatusCache


def build_status_cache(
    state: BridgeState,
    settings: BaseBridgeSettings,
    runner: CommandRunner,
    logger: LoggerProtocol,
    clock: Callable[[], float] = time.time,
) -> EnvironmentStatusCache:
    return EnvironmentStatusCache(
        state,
        runner,
        logger,
        ddev_binary=settings.DDEV_BINARY,
        container_root=settings.CONTAINER_ROOT,
        cache_duration=settings.CACHE_DURATION_SECONDS,
        clock=clock,
    )


def build_orchestrator(
    state: BridgeState,
    settings: BaseBridgeSettings,
    *,
    runner: CommandRunner,
    messenger: MessengerProtocol,
    logger: LoggerProtocol,
    shell_tool_names: Collection[str] = DEFAULT_SHELL_TOOL_NAMES,
    clock: Callable[[], float] = time.time,
) -> InterceptionOrchestrator:
    """
    Build an orchestrator whose services all share ``state``.

    Args:
        state: Context object of the host session
        settings: Bridge settings (ddev binary, container root, cache duration)
        runner: Executes the environment probe
        messenger: Delivers session notices to the agent
        logger: Receives probe failures and rewrite debug lines
        shell_tool_names: Tool names whose command argument is intercepted
        clock: Time source for the status cache

    Returns:
        InterceptionOrchestrator ready to intercept commands
    """
    return InterceptionOrchestrator(
        state,
        build_status_cache(state, settings, runner, logger, clock),
        SessionNotifier(state, messenger, ddev_binary=settings.DDEV_BINARY),
        logger,
        host_only_commands=settings.HOST_ONLY_COMMANDS,
        shell_tool_names=shell_tool_names,
        ddev_binary=settings.DDEV_BINARY,
        container_root=settings.CONTAINER_ROOT,
    )


def build_logs_service(settings: BaseBridgeSettings, runner: CommandRunner) -> DdevLogsService:
    return DdevLogsService(
        runner,
        ddev_binary=settings.DDEV_BINARY,
        default_service=settings.DEFAULT_LOG_SERVICE,
        default_tail=settings.DEFAULT_TAIL_LINES,
        follow_seconds=settings.LOG_FOLLOW_SECONDS,
    )
