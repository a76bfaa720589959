"""Run ddev commands without blocking the event loop."""

from __future__ import annotations

import asyncio
import subprocess
from collections.abc import Sequence

from ddev_bridge.protocols import CommandResult


def _decode(output: str | bytes | None) -> str:
    # TimeoutExpired carries bytes even when text=True
    if output is None:
        return ''
    if isinstance(output, bytes):
        return output.decode('utf-8', errors='replace')
    return output


class SubprocessRunner:
    """CommandRunner backed by subprocess.run in a worker thread."""

    async def run(self, args: Sequence[str], *, timeout: float | None = None) -> CommandResult:
        """
        Run a command and capture its output.

        Non-zero exit codes are returned, not raised. When ``timeout`` expires
        the process is killed and whatever it printed so far is returned with
        ``timed_out=True``.

        Raises:
            OSError: If the executable cannot be started
        """
        try:
            result = await asyncio.to_thread(
                subprocess.run,
                list(args),
                capture_output=True,
                text=True,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired as e:
            return CommandResult(exit_code=0, stdout=_decode(e.stdout), stderr=_decode(e.stderr), timed_out=True)

        return CommandResult(exit_code=result.returncode, stdout=result.stdout, stderr=result.stderr)
