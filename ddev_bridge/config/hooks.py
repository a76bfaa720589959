"""
Claude Code hook configuration.

Extends base configuration with hook-specific settings.
"""

from __future__ import annotations

from typing import Literal

import pydantic

from ddev_bridge.config.base import BaseBridgeSettings, lazy_settings

LogLevel = Literal['debug', 'info', 'warning', 'error']


class HookSettings(BaseBridgeSettings):
    """Hook-specific configuration."""

    # Tool names whose `command` argument is intercepted
    SHELL_TOOL_NAMES: tuple[str, ...] = ('Bash', 'bash')

    # Sent alongside updatedInput. Claude Code applies updatedInput together with a
    # decision; 'ask' shows the rewritten command to the user first.
    PERMISSION_DECISION: Literal['allow', 'ask'] | None = 'allow'

    # Minimum level written to <STATE_DIR>/hook.log
    LOG_LEVEL: LogLevel = 'info'

    # hook.log is moved to hook.log.1 once it reaches this size; one backup is kept
    LOG_MAX_BYTES: int = 1_000_000

    @pydantic.field_validator('LOG_MAX_BYTES')
    @classmethod
    def validate_log_max_bytes(cls, v: int) -> int:
        """Rotation size must be positive."""
        if v < 1:
            raise ValueError('LOG_MAX_BYTES must be at least 1')
        return v


# Module-level singleton (lazy-loaded)
settings = lazy_settings(HookSettings)
