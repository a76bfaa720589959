"""
Tests for SubprocessRunner against real child processes.
"""

from __future__ import annotations

import sys

import pytest

from ddev_bridge.services.process import SubprocessRunner


@pytest.mark.asyncio
async def test_captures_output_and_exit_code() -> None:
    script = 'import sys; print("out"); print("err", file=sys.stderr); sys.exit(3)'

    result = await SubprocessRunner().run([sys.executable, '-c', script])

    assert result.exit_code == 3
    assert result.stdout == 'out\n'
    assert result.stderr == 'err\n'
    assert not result.timed_out


@pytest.mark.asyncio
async def test_timeout_returns_partial_output() -> None:
    script = 'import sys, time; print("first", flush=True); time.sleep(30)'

    result = await SubprocessRunner().run([sys.executable, '-c', script], timeout=1.0)

    assert result.timed_out
    assert result.stdout == 'first\n'


@pytest.mark.asyncio
async def test_missing_executable_raises() -> None:
    with pytest.raises(FileNotFoundError):
        await SubprocessRunner().run(['/nonexistent/ddev', 'describe', '-j'])
