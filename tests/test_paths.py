"""
Tests for host <-> container path translation.
"""

from __future__ import annotations

import pytest

from ddev_bridge.paths import CONTAINER_ROOT, expand_home_path, is_within, to_container_path, to_host_path

ROOT = '/Users/foo/project'


@pytest.mark.parametrize(
    'host_dir',
    ['/tmp', '/Users/foo', '/Users/foo/project-old', '/Users/foo/projectx/sub', '/'],
)
def test_outside_project_maps_to_container_root(host_dir: str) -> None:
    assert to_container_path(host_dir, ROOT) == CONTAINER_ROOT


def test_project_root_maps_to_container_root_exactly() -> None:
    assert to_container_path(ROOT, ROOT) == '/var/www/html'


def test_subdirectory_maps_below_container_root() -> None:
    assert to_container_path(f'{ROOT}/wp-content/plugins/sync', ROOT) == '/var/www/html/wp-content/plugins/sync'


def test_trailing_slash_on_project_root_is_ignored() -> None:
    assert to_container_path(f'{ROOT}/web', f'{ROOT}/') == '/var/www/html/web'
    assert to_container_path(ROOT, f'{ROOT}/') == '/var/www/html'


def test_custom_container_root() -> None:
    assert to_container_path(f'{ROOT}/web', ROOT, container_root='/srv/app') == '/srv/app/web'


@pytest.mark.parametrize(
    'host_dir',
    [ROOT, f'{ROOT}/a', f'{ROOT}/wp-content/plugins/sync', f'{ROOT}/with space/dir', f'{ROOT}/.ddev'],
)
def test_round_trip(host_dir: str) -> None:
    """Every directory inside the project maps back to itself."""
    assert to_host_path(to_container_path(host_dir, ROOT), ROOT) == host_dir


def test_round_trip_with_filesystem_root_as_project() -> None:
    assert to_host_path(to_container_path('/etc/nginx', '/'), '/') == '/etc/nginx'


def test_to_host_path_outside_container_root_maps_to_project_root() -> None:
    assert to_host_path('/usr/local/bin', ROOT) == ROOT


def test_is_within_is_component_wise() -> None:
    assert is_within(ROOT, ROOT)
    assert is_within(f'{ROOT}/src', ROOT)
    assert not is_within(f'{ROOT}-old', ROOT)


def test_expand_home_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('HOME', '/home/dev')

    assert expand_home_path('~/sites/app') == '/home/dev/sites/app'
    assert expand_home_path('~') == '/home/dev'
    assert expand_home_path('/abs/path') == '/abs/path'
