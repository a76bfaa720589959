"""
Base configuration for ddev-bridge.

Shared settings and helper functions for all entry points (hooks, MCP, CLI).
"""

from __future__ import annotations

import os
import pathlib
from typing import TypeVar

import lazy_object_proxy
import pydantic
import pydantic_settings

from ddev_bridge.paths import CONTAINER_ROOT

T = TypeVar('T', bound='BaseBridgeSettings')


class BaseBridgeSettings(pydantic_settings.BaseSettings):
    """Shared configuration across all entry points."""

    model_config = pydantic_settings.SettingsConfigDict(
        env_prefix='DDEV_BRIDGE_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,  # Fail fast on misconfiguration
        extra='ignore',  # .env may hold settings of other tools
    )

    # Application metadata
    APP_NAME: str = 'ddev-bridge'
    VERSION: str = '0.1.0'

    # Environment probe
    DDEV_BINARY: str = 'ddev'
    CONTAINER_ROOT: str = CONTAINER_ROOT
    CACHE_DURATION_SECONDS: float = 120.0  # Only "running" results are cached

    # Commands that always run on the host, matched against the first token
    HOST_ONLY_COMMANDS: tuple[str, ...] = ('git', 'gh', 'docker', 'ddev')

    # Service name attached to log entries
    LOG_SERVICE_NAME: str = 'ddev-bridge'

    # Per-session state files and the hook log
    STATE_DIR: pathlib.Path = pathlib.Path.home() / '.ddev-bridge'

    # Log retrieval defaults. A small tail keeps tool output out of the way.
    DEFAULT_LOG_SERVICE: str = 'web'
    DEFAULT_TAIL_LINES: int = 50
    LOG_FOLLOW_SECONDS: float = 10.0  # Follow mode returns what was captured in this window

    @pydantic.field_validator('CONTAINER_ROOT')
    @classmethod
    def validate_container_root(cls, v: str) -> str:
        """Container root must be an absolute POSIX path."""
        if not v.startswith('/'):
            raise ValueError('CONTAINER_ROOT must be an absolute path')
        return v

    @pydantic.field_validator('CACHE_DURATION_SECONDS')
    @classmethod
    def validate_cache_duration(cls, v: float) -> float:
        """Validate cache duration is not negative."""
        if v < 0:
            raise ValueError('CACHE_DURATION_SECONDS must not be negative')
        return v

    @pydantic.field_validator('DEFAULT_TAIL_LINES')
    @classmethod
    def validate_tail_lines(cls, v: int) -> int:
        """Tail must request at least one line."""
        if v < 1:
            raise ValueError('DEFAULT_TAIL_LINES must be at least 1')
        return v


def get_settings(settings_class: type[T], env_file: str | None = None) -> T:
    """
    Factory for creating settings with dynamic .env file loading.

    LOAD_ENV_FILE environment variable specifies custom .env file path.
    When unset (production), loads from environment variables only.

    Args:
        settings_class: Settings class to instantiate
        env_file: Optional path to .env file (overrides LOAD_ENV_FILE)

    Returns:
        Settings instance

    Raises:
        FileNotFoundError: If specified .env file doesn't exist
    """
    env_file_path = env_file or os.getenv('LOAD_ENV_FILE')

    if not env_file_path:
        return settings_class(_env_file=None)  # No .env file, load from environment only

    resolved_path = pathlib.Path(env_file_path).resolve()
    if not resolved_path.exists():
        raise FileNotFoundError(f'Environment file not found: {resolved_path}')

    return settings_class(_env_file=resolved_path)


def lazy_settings(settings_class: type[T]) -> T:
    """
    Lazy settings - defers instantiation until first access.

    Args:
        settings_class: Settings class to instantiate

    Returns:
        Proxy that instantiates settings on first access
    """
    return lazy_object_proxy.Proxy(lambda: get_settings(settings_class))
