"""
Results returned by MCP tools and CLI commands.
"""

from __future__ import annotations

from ddev_bridge.base_model import StrictModel


class StatusReport(StrictModel):
    """DDEV environment status as seen from a host directory."""

    available: bool
    running: bool
    host_dir: str
    project_root: str | None  # None until a running environment reported one
    container_working_dir: str
    inside_project: bool  # False when host_dir lies outside the project and maps to the container root
    exec_prefix: str | None  # `ddev exec --dir=...` prefix when running
