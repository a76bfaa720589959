"""Pydantic models for ddev output, persisted state and hook payloads."""

from ddev_bridge.schemas.ddev import DdevDescription, DdevRawDescription
from ddev_bridge.schemas.state import BridgeState, EnvironmentStatus, SessionState, StatusCacheEntry

__all__ = [
    'BridgeState',
    'DdevDescription',
    'DdevRawDescription',
    'EnvironmentStatus',
    'SessionState',
    'StatusCacheEntry',
]
