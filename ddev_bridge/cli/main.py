#!/usr/bin/env python3
"""
Command-line interface for ddev-bridge.

Inspect what the hooks see without going through Claude Code:

    ddev-bridge status
    ddev-bridge wrap 'cd /Users/foo/project/web && composer install'
    ddev-bridge logs --service db --tail 100
"""

from __future__ import annotations

import asyncio
import os
import traceback
from pathlib import Path

import typer

from ddev_bridge.cli.logger import CLILogger
from ddev_bridge.config.hooks import settings
from ddev_bridge.exceptions import DdevBridgeError
from ddev_bridge.hooks.messenger import AdditionalContextMessenger
from ddev_bridge.schemas.state import BridgeState
from ddev_bridge.services.factory import build_logs_service, build_orchestrator, build_status_cache
from ddev_bridge.services.process import SubprocessRunner

app = typer.Typer(
    name='ddev-bridge',
    help='Run Claude Code shell commands inside the DDEV container',
    add_completion=False,
)


def _resolve_cwd(cwd: Path | None) -> str:
    return str((cwd or Path(os.getcwd())).resolve())


@app.command()
def status(
    cwd: Path | None = typer.Option(None, '--cwd', '-C', help='Host directory to map (default: current)'),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Probe DDEV and print the status with the container path mapping as JSON."""
    asyncio.run(_status_async(_resolve_cwd(cwd), verbose))


async def _status_async(host_dir: str, verbose: bool) -> None:
    """Async implementation of status command."""
    logger = CLILogger(verbose=verbose)
    status_cache = build_status_cache(BridgeState(), settings, SubprocessRunner(), logger)

    report = await status_cache.report(host_dir)
    typer.echo(report.model_dump_json(indent=2))

    if not report.available:
        raise typer.Exit(1)


@app.command()
def wrap(
    command: str = typer.Argument(..., help='Shell command as the agent would issue it'),
    cwd: Path | None = typer.Option(None, '--cwd', '-C', help='Host directory the command is issued from'),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Print the command the pre-tool-use hook would run instead of COMMAND."""
    asyncio.run(_wrap_async(command, _resolve_cwd(cwd), verbose))


async def _wrap_async(command: str, host_dir: str, verbose: bool) -> None:
    """Async implementation of wrap command."""
    logger = CLILogger(verbose=verbose)
    orchestrator = build_orchestrator(
        BridgeState(),
        settings,
        runner=SubprocessRunner(),
        messenger=AdditionalContextMessenger(),
        logger=logger,
    )

    result = await orchestrator.intercept(command, host_dir)

    if result.status is None:
        await logger.info('Host-only command, not redirected')
    elif not result.status.available:
        await logger.info('No DDEV project found, not redirected')
    elif not result.status.running:
        typer.secho('DDEV project is stopped, command runs on the host', fg=typer.colors.YELLOW, err=True)

    typer.echo(result.command)


@app.command()
def logs(
    service: str | None = typer.Option(None, '--service', '-s', help="Service name (default: 'web')"),
    follow: bool = typer.Option(False, '--follow', '-f', help='Stream logs for a few seconds'),
    tail: int | None = typer.Option(None, '--tail', help='Lines from the end of the log (default: 50)'),
    time: bool = typer.Option(False, '--time', '-t', help='Add timestamps'),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Print logs of a DDEV service."""
    asyncio.run(_logs_async(service, follow, tail, time, verbose))


async def _logs_async(
    service: str | None,
    follow: bool,
    tail: int | None,
    time: bool,
    verbose: bool,
) -> None:
    """Async implementation of logs command."""
    logger = CLILogger(verbose=verbose)
    logs_service = build_logs_service(settings, SubprocessRunner())

    try:
        await logger.info(f'Running: {" ".join(logs_service.build_command(service, follow, tail, time))}')
        output = await logs_service.fetch(service=service, follow=follow, tail=tail, time=time)
    except DdevBridgeError as e:
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except OSError as e:
        await logger.error(f'Failed to run {settings.DDEV_BINARY}: {e}')
        if verbose:
            traceback.print_exc()
        raise typer.Exit(1)

    typer.echo(output, nl=False)


def main() -> None:
    """Entry point for CLI."""
    app()


if __name__ == '__main__':
    main()
