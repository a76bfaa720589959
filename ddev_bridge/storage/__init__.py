"""Persistence of per-session bridge state."""

from ddev_bridge.storage.state import SessionStateStore

__all__ = ['SessionStateStore']
