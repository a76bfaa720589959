"""
Tests for DDEV log retrieval.
"""

from __future__ import annotations

import pytest
from conftest import FakeRunner

from ddev_bridge.exceptions import LogRetrievalError
from ddev_bridge.protocols import CommandResult
from ddev_bridge.services.logs import DdevLogsService


def ok(stdout: str = '') -> CommandResult:
    return CommandResult(exit_code=0, stdout=stdout, stderr='')


@pytest.mark.parametrize(
    ('kwargs', 'expected'),
    [
        ({}, ['ddev', 'logs', '-s', 'web', '--tail', '50']),
        ({'service': 'db'}, ['ddev', 'logs', '-s', 'db', '--tail', '50']),
        ({'tail': 200}, ['ddev', 'logs', '-s', 'web', '--tail', '200']),
        ({'tail': 0}, ['ddev', 'logs', '-s', 'web', '--tail', '0']),
        ({'time': True}, ['ddev', 'logs', '-s', 'web', '--tail', '50', '-t']),
        ({'follow': True, 'tail': 10}, ['ddev', 'logs', '-s', 'web', '-f']),
        ({'follow': True, 'time': True}, ['ddev', 'logs', '-s', 'web', '-f', '-t']),
    ],
)
def test_build_command(kwargs: dict[str, object], expected: list[str]) -> None:
    assert DdevLogsService(FakeRunner(ok())).build_command(**kwargs) == expected


def test_service_name_is_a_single_argument() -> None:
    args = DdevLogsService(FakeRunner(ok())).build_command(service='web; rm -rf /')
    assert args[3] == 'web; rm -rf /'


@pytest.mark.asyncio
async def test_fetch_returns_stdout_verbatim() -> None:
    runner = FakeRunner(ok('line 1\nline 2\n'))

    output = await DdevLogsService(runner, ddev_binary='/opt/ddev').fetch(service='db', tail=2)

    assert output == 'line 1\nline 2\n'
    assert runner.calls == [(['/opt/ddev', 'logs', '-s', 'db', '--tail', '2'], None)]


@pytest.mark.asyncio
async def test_fetch_error_includes_exit_code_and_stderr() -> None:
    runner = FakeRunner(CommandResult(exit_code=2, stdout='', stderr='  no such service: cache\n'))

    with pytest.raises(LogRetrievalError) as exc_info:
        await DdevLogsService(runner).fetch(service='cache')

    assert exc_info.value.exit_code == 2
    assert str(exc_info.value) == 'DDEV logs command failed (exit code 2): no such service: cache'


@pytest.mark.asyncio
async def test_fetch_error_falls_back_to_stdout() -> None:
    runner = FakeRunner(CommandResult(exit_code=1, stdout='project not running', stderr=''))

    with pytest.raises(LogRetrievalError, match='project not running'):
        await DdevLogsService(runner).fetch()


@pytest.mark.asyncio
async def test_fetch_error_without_output() -> None:
    runner = FakeRunner(CommandResult(exit_code=1, stdout='', stderr=''))

    with pytest.raises(LogRetrievalError, match='Command failed with no output'):
        await DdevLogsService(runner).fetch()


@pytest.mark.asyncio
async def test_follow_is_bounded_and_returns_partial_output() -> None:
    runner = FakeRunner(CommandResult(exit_code=0, stdout='partial\n', stderr='', timed_out=True))

    output = await DdevLogsService(runner, follow_seconds=3.0).fetch(follow=True)

    assert output == 'partial\n'
    assert runner.calls == [(['ddev', 'logs', '-s', 'web', '-f'], 3.0)]
