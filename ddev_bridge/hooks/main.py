"""
Claude Code hooks for ddev-bridge.

Register in .claude/settings.json:

    {
      "hooks": {
        "PreToolUse": [
          {"matcher": "Bash", "hooks": [{"type": "command", "command": "ddev-bridge-hook pre-tool-use"}]}
        ],
        "SessionStart": [{"hooks": [{"type": "command", "command": "ddev-bridge-hook session-start"}]}],
        "SessionEnd": [{"hooks": [{"type": "command", "command": "ddev-bridge-hook session-end"}]}]
      }
    }

Each command reads the event payload from stdin. Only pre-tool-use prints
an answer, and only when it rewrote the command or has a notice for the
agent. A non-zero exit is a non-blocking error for Claude Code: the
original command runs unmodified.
"""

from __future__ import annotations

import asyncio
import sys
import traceback
from typing import TypeVar

import pydantic
import typer

from ddev_bridge.config.hooks import settings
from ddev_bridge.hooks.logger import HookLogger
from ddev_bridge.hooks.messenger import AdditionalContextMessenger
from ddev_bridge.protocols import NullLogger
from ddev_bridge.schemas.hooks import (
    HookInput,
    HookOutput,
    PreToolUseInput,
    PreToolUseOutput,
    SessionEndInput,
    SessionStartInput,
)
from ddev_bridge.services.factory import build_orchestrator
from ddev_bridge.services.process import SubprocessRunner
from ddev_bridge.storage.state import SessionStateStore

app = typer.Typer(
    name='ddev-bridge-hook',
    help='Claude Code hooks that run Bash commands inside the DDEV container',
    add_completion=False,
)

T = TypeVar('T', bound=HookInput)


def _read_payload(model: type[T]) -> T:
    """Parse the hook payload from stdin."""
    try:
        return model.model_validate_json(sys.stdin.read())
    except pydantic.ValidationError as e:
        typer.secho(f'Error: Invalid {model.__name__} payload: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(1)


def _make_logger() -> HookLogger:
    return HookLogger(
        settings.STATE_DIR / 'hook.log',
        settings.LOG_SERVICE_NAME,
        settings.LOG_LEVEL,
        max_bytes=settings.LOG_MAX_BYTES,
    )


@app.command('pre-tool-use')
def pre_tool_use() -> None:
    """Rewrite a Bash command to run inside the running DDEV container."""
    payload = _read_payload(PreToolUseInput)

    try:
        output = asyncio.run(_pre_tool_use_async(payload))
    except Exception:
        traceback.print_exc()
        raise typer.Exit(1)

    if output is not None:
        typer.echo(output.model_dump_json(exclude_none=True))


async def _pre_tool_use_async(payload: PreToolUseInput) -> HookOutput | None:
    """Async implementation of pre-tool-use."""
    logger = _make_logger()
    messenger = AdditionalContextMessenger()
    store = SessionStateStore(settings.STATE_DIR)
    tool_input = dict(payload.tool_input)

    with store.locked(payload.session_id) as state:
        orchestrator = build_orchestrator(
            state,
            settings,
            runner=SubprocessRunner(),
            messenger=messenger,
            logger=logger,
            shell_tool_names=settings.SHELL_TOOL_NAMES,
        )

        # No SessionStart seen for this session (hook added mid-session)
        if state.session.session_id != payload.session_id:
            await orchestrator.on_session_created(payload.session_id)

        result = await orchestrator.before_tool_execute(payload.tool_name, tool_input, payload.cwd)

    rewritten = result is not None and result.rewritten
    if not rewritten and messenger.additional_context is None:
        return None

    return HookOutput(
        hookSpecificOutput=PreToolUseOutput(
            permissionDecision=settings.PERMISSION_DECISION if rewritten else None,
            updatedInput=tool_input if rewritten else None,
            additionalContext=messenger.additional_context,
        )
    )


@app.command('session-start')
def session_start() -> None:
    """Reset the per-session notices when a session starts, resumes or is cleared."""
    payload = _read_payload(SessionStartInput)
    store = SessionStateStore(settings.STATE_DIR)

    with store.locked(payload.session_id) as state:
        orchestrator = build_orchestrator(
            state,
            settings,
            runner=SubprocessRunner(),
            messenger=AdditionalContextMessenger(),
            logger=NullLogger(),
        )
        asyncio.run(orchestrator.on_session_created(payload.session_id))


@app.command('session-end')
def session_end() -> None:
    """Remove the state file of a finished session."""
    payload = _read_payload(SessionEndInput)
    SessionStateStore(settings.STATE_DIR).delete(payload.session_id)


def main() -> None:
    """Entry point for hooks."""
    app()


if __name__ == '__main__':
    main()
