"""Service layer: status detection, rewriting, notices and interception."""

from ddev_bridge.services.factory import build_logs_service, build_orchestrator, build_status_cache
from ddev_bridge.services.interception import InterceptionOrchestrator, InterceptionResult
from ddev_bridge.services.logs import DdevLogsService
from ddev_bridge.services.notifier import SessionNotifier
from ddev_bridge.services.process import SubprocessRunner
from ddev_bridge.services.rewriter import clean_command, wrap_command
from ddev_bridge.services.status import EnvironmentStatusCache

__all__ = [
    'DdevLogsService',
    'EnvironmentStatusCache',
    'InterceptionOrchestrator',
    'InterceptionResult',
    'SessionNotifier',
    'SubprocessRunner',
    'build_logs_service',
    'build_orchestrator',
    'build_status_cache',
    'clean_command',
    'wrap_command',
]
