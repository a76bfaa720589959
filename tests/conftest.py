"""
Shared test doubles.

Services receive their collaborators through constructor arguments, so tests
swap in these fakes instead of running ddev.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

import pytest

from ddev_bridge.protocols import CommandResult

PROJECT_ROOT = '/Users/foo/project'


def describe_output(status: str = 'running', shortroot: str | None = PROJECT_ROOT, approot: str | None = None) -> str:
    """Build `ddev describe -j` output."""
    raw: dict[str, object] = {'name': 'project', 'status': status}
    if shortroot is not None:
        raw['shortroot'] = shortroot
    if approot is not None:
        raw['approot'] = approot
    return json.dumps({'level': 'info', 'msg': 'describe', 'raw': raw, 'time': '2026-01-01T00:00:00Z'})


class FakeRunner:
    """CommandRunner returning queued results (the last one repeats)."""

    def __init__(self, *results: CommandResult | Exception) -> None:
        self.results = list(results)
        self.calls: list[tuple[list[str], float | None]] = []

    async def run(self, args: Sequence[str], *, timeout: float | None = None) -> CommandResult:
        self.calls.append((list(args), timeout))
        result = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(result, Exception):
            raise result
        return result


class FakeClock:
    """Manually advanced clock in epoch seconds."""

    def __init__(self, now: float = 1_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingMessenger:
    """MessengerProtocol that records every message."""

    def __init__(self, fail: bool = False) -> None:
        self.sent: list[tuple[str, str]] = []
        self.fail = fail

    async def send(self, session_id: str, text: str) -> None:
        if self.fail:
            raise ConnectionError('messaging sink unavailable')
        self.sent.append((session_id, text))


class RecordingLogger:
    """LoggerProtocol that records (level, message) pairs."""

    def __init__(self) -> None:
        self.entries: list[tuple[str, str]] = []

    async def debug(self, message: str) -> None:
        self.entries.append(('debug', message))

    async def info(self, message: str) -> None:
        self.entries.append(('info', message))

    async def warning(self, message: str) -> None:
        self.entries.append(('warning', message))

    async def error(self, message: str) -> None:
        self.entries.append(('error', message))

    def levels(self) -> list[str]:
        return [level for level, _ in self.entries]


def running_result(**kwargs: str | None) -> CommandResult:
    return CommandResult(exit_code=0, stdout=describe_output('running', **kwargs), stderr='')


def stopped_result() -> CommandResult:
    return CommandResult(exit_code=0, stdout=describe_output('stopped'), stderr='')


def failed_result() -> CommandResult:
    return CommandResult(exit_code=1, stdout='', stderr='Could not find a project')


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def messenger() -> RecordingMessenger:
    return RecordingMessenger()


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()
