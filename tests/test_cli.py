"""
Tests for the ddev-bridge command-line interface.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from conftest import PROJECT_ROOT, FakeRunner, failed_result, running_result, stopped_result
from typer.testing import CliRunner

from ddev_bridge.cli import main as cli_main
from ddev_bridge.config.hooks import HookSettings
from ddev_bridge.protocols import CommandResult

PLUGIN_HOST_DIR = f'{PROJECT_ROOT}/wp-content/plugins/sync'

cli = CliRunner()


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli_main, 'settings', HookSettings(_env_file=None, STATE_DIR=tmp_path))


def use_runner(monkeypatch: pytest.MonkeyPatch, runner: FakeRunner) -> FakeRunner:
    monkeypatch.setattr(cli_main, 'SubprocessRunner', lambda: runner)
    return runner


def test_wrap_running(monkeypatch: pytest.MonkeyPatch) -> None:
    use_runner(monkeypatch, FakeRunner(running_result()))

    result = cli.invoke(cli_main.app, ['wrap', f'cd {PLUGIN_HOST_DIR} && make', '--cwd', PLUGIN_HOST_DIR])

    assert result.exit_code == 0
    assert result.stdout.strip() == 'ddev exec --dir="/var/www/html/wp-content/plugins/sync" bash -c "make"'


def test_wrap_host_only(monkeypatch: pytest.MonkeyPatch) -> None:
    runner = use_runner(monkeypatch, FakeRunner(running_result()))

    result = cli.invoke(cli_main.app, ['wrap', 'git log', '--cwd', PLUGIN_HOST_DIR])

    assert result.exit_code == 0
    assert result.stdout.strip() == 'git log'
    assert runner.calls == []


def test_wrap_stopped_warns(monkeypatch: pytest.MonkeyPatch) -> None:
    use_runner(monkeypatch, FakeRunner(stopped_result()))

    result = cli.invoke(cli_main.app, ['wrap', 'make', '--cwd', PLUGIN_HOST_DIR])

    assert result.exit_code == 0
    assert 'make' in result.output
    assert 'stopped' in result.output


def test_status_running(monkeypatch: pytest.MonkeyPatch) -> None:
    use_runner(monkeypatch, FakeRunner(running_result()))

    result = cli.invoke(cli_main.app, ['status', '--cwd', PLUGIN_HOST_DIR])

    assert result.exit_code == 0
    report = json.loads(result.stdout)
    assert report['running'] is True
    assert report['container_working_dir'] == '/var/www/html/wp-content/plugins/sync'


def test_status_unavailable_exits_non_zero(monkeypatch: pytest.MonkeyPatch) -> None:
    use_runner(monkeypatch, FakeRunner(failed_result()))

    result = cli.invoke(cli_main.app, ['status', '--cwd', PLUGIN_HOST_DIR])

    assert result.exit_code == 1


def test_logs_prints_output(monkeypatch: pytest.MonkeyPatch) -> None:
    runner = use_runner(monkeypatch, FakeRunner(CommandResult(exit_code=0, stdout='ready\n', stderr='')))

    result = cli.invoke(cli_main.app, ['logs', '--service', 'db', '--tail', '10'])

    assert result.exit_code == 0
    assert result.stdout == 'ready\n'
    assert runner.calls[0][0] == ['ddev', 'logs', '-s', 'db', '--tail', '10']


def test_logs_failure_exits_non_zero(monkeypatch: pytest.MonkeyPatch) -> None:
    use_runner(monkeypatch, FakeRunner(CommandResult(exit_code=1, stdout='', stderr='project is not running')))

    result = cli.invoke(cli_main.app, ['logs'])

    assert result.exit_code == 1
    assert 'project is not running' in result.output
