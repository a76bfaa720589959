"""
Path translation between the host project and the DDEV web container.

DDEV mounts the project root at a fixed location inside the web container:

    <project_root>/wp-content/plugins  ->  /var/www/html/wp-content/plugins

Both directions are total: a path outside the tree maps to the root of the
other side instead of raising.
"""

from __future__ import annotations

import os

__all__ = [
    'CONTAINER_ROOT',
    'expand_home_path',
    'is_within',
    'to_container_path',
    'to_host_path',
]

CONTAINER_ROOT = '/var/www/html'


def expand_home_path(path: str) -> str:
    """
    Expand a leading ``~`` to the current user's home directory.

    Examples:
        >>> expand_home_path('~/sites/app')  # doctest: +SKIP
        '/Users/chris/sites/app'
    """
    if not path.startswith('~'):
        return path
    return os.path.expanduser(path)


def _normalize_root(root: str) -> str:
    if len(root) > 1:
        return root.rstrip('/')
    return root


def _join(root: str, relative: str) -> str:
    return f"{root.rstrip('/')}/{relative}"


def _relative_to(path: str, root: str) -> str | None:
    """Return ``path`` relative to ``root``, or None if it lies outside."""
    root = _normalize_root(root)
    if path == root:
        return ''
    prefix = root if root.endswith('/') else root + '/'
    if not path.startswith(prefix):
        return None
    return path[len(prefix) :]


def is_within(path: str, root: str) -> bool:
    """Check whether ``path`` equals ``root`` or is a descendant of it."""
    return _relative_to(path, root) is not None


def to_container_path(host_dir: str, project_root: str, container_root: str = CONTAINER_ROOT) -> str:
    """
    Map a host directory to its location inside the container.

    Args:
        host_dir: Absolute host path
        project_root: Absolute host path of the DDEV project
        container_root: Mount point of the project inside the container

    Returns:
        Container path, or ``container_root`` when ``host_dir`` is outside the project

    Examples:
        >>> to_container_path('/Users/foo/project/wp-content', '/Users/foo/project')
        '/var/www/html/wp-content'

        >>> to_container_path('/tmp', '/Users/foo/project')
        '/var/www/html'
    """
    relative = _relative_to(host_dir, project_root)
    if not relative:
        return container_root
    return _join(container_root, relative)


def to_host_path(container_path: str, project_root: str, container_root: str = CONTAINER_ROOT) -> str:
    """
    Map a container path back to the host. Inverse of to_container_path.

    Examples:
        >>> to_host_path('/var/www/html/wp-content', '/Users/foo/project')
        '/Users/foo/project/wp-content'
    """
    relative = _relative_to(container_path, container_root)
    if not relative:
        return _normalize_root(project_root)
    return _join(project_root, relative)
