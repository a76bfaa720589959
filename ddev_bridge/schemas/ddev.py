"""
Models for `ddev describe -j` output.

Only the fields we consume are typed; everything else ddev reports is kept
as extra data. Example (abridged):

    {
      "level": "info",
      "msg": "...",
      "raw": {
        "name": "app",
        "status": "running",
        "shortroot": "~/sites/app",
        "approot": "/Users/foo/sites/app"
      }
    }
"""

from __future__ import annotations

from ddev_bridge.base_model import PermissiveModel
from ddev_bridge.paths import expand_home_path

RUNNING_STATUS = 'running'


class DdevRawDescription(PermissiveModel):
    """The `raw` object of `ddev describe -j`."""

    name: str | None = None
    status: str | None = None
    shortroot: str | None = None
    approot: str | None = None


class DdevDescription(PermissiveModel):
    """Top-level `ddev describe -j` document."""

    raw: DdevRawDescription | None = None

    @property
    def is_running(self) -> bool:
        return self.raw is not None and self.raw.status == RUNNING_STATUS

    @property
    def project_root(self) -> str | None:
        """Host project root with `~` expanded, or None if ddev did not report one."""
        if self.raw is None:
            return None
        root = self.raw.shortroot or self.raw.approot
        if not root:
            return None
        return expand_home_path(root)
