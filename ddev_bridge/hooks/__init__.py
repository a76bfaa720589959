"""Claude Code hook entry points."""

from ddev_bridge.hooks.main import app

__all__ = ['app']
