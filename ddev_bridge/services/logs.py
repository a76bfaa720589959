"""
DDEV log retrieval.

Thin translation of tool arguments into a `ddev logs` command line. The
command is run as an argv list, so service names are never interpreted by
a shell.
"""

from __future__ import annotations

from ddev_bridge.exceptions import LogRetrievalError
from ddev_bridge.protocols import CommandRunner

DEFAULT_LOG_SERVICE = 'web'
DEFAULT_TAIL_LINES = 50


class DdevLogsService:
    """Fetches logs of a DDEV service (web, db, ...)."""

    def __init__(
        self,
        runner: CommandRunner,
        *,
        ddev_binary: str = 'ddev',
        default_service: str = DEFAULT_LOG_SERVICE,
        default_tail: int = DEFAULT_TAIL_LINES,
        follow_seconds: float = 10.0,
    ) -> None:
        self.runner = runner
        self.ddev_binary = ddev_binary
        self.default_service = default_service
        self.default_tail = default_tail
        self.follow_seconds = follow_seconds

    def build_command(
        self,
        service: str | None = None,
        follow: bool = False,
        tail: int | None = None,
        time: bool = False,
    ) -> list[str]:
        """
        Build the `ddev logs` argv.

        Follow mode and tail are mutually exclusive; tail is ignored when following.

        Examples:
            >>> DdevLogsService(runner=None).build_command()
            ['ddev', 'logs', '-s', 'web', '--tail', '50']
        """
        args = [self.ddev_binary, 'logs', '-s', service or self.default_service]

        if follow:
            args.append('-f')
        else:
            args.extend(['--tail', str(tail if tail is not None else self.default_tail)])

        if time:
            args.append('-t')

        return args

    async def fetch(
        self,
        service: str | None = None,
        follow: bool = False,
        tail: int | None = None,
        time: bool = False,
    ) -> str:
        """
        Run `ddev logs` and return its standard output verbatim.

        In follow mode the stream is captured for ``follow_seconds`` and the
        output collected so far is returned.

        Raises:
            LogRetrievalError: If ddev exits non-zero
        """
        args = self.build_command(service=service, follow=follow, tail=tail, time=time)
        result = await self.runner.run(args, timeout=self.follow_seconds if follow else None)

        if result.timed_out:
            return result.stdout

        if result.exit_code != 0:
            output = result.stderr.strip() or result.stdout.strip() or 'Command failed with no output'
            raise LogRetrievalError(result.exit_code, output)

        return result.stdout
