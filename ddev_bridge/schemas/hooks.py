"""
Claude Code hook payloads.

Inputs arrive as JSON on stdin; outputs are printed as JSON on stdout.
Output field names follow the wire format (camelCase).
"""

from __future__ import annotations

from typing import Any, Literal

from ddev_bridge.base_model import PermissiveModel, StrictModel

# ==============================================================================
# Hook Inputs
# ==============================================================================


class HookInput(PermissiveModel):
    """Fields shared by every hook event."""

    session_id: str
    cwd: str
    hook_event_name: str
    transcript_path: str | None = None


class PreToolUseInput(HookInput):
    """Payload of the PreToolUse event."""

    tool_name: str
    tool_input: dict[str, Any]


class SessionStartInput(HookInput):
    """Payload of the SessionStart event."""

    source: str | None = None  # startup, resume, clear, compact


class SessionEndInput(HookInput):
    """Payload of the SessionEnd event."""

    reason: str | None = None


# ==============================================================================
# Hook Outputs
# ==============================================================================


class PreToolUseOutput(StrictModel):
    """The hookSpecificOutput object of a PreToolUse answer."""

    hookEventName: Literal['PreToolUse'] = 'PreToolUse'
    permissionDecision: Literal['allow', 'ask'] | None = None
    updatedInput: dict[str, Any] | None = None
    additionalContext: str | None = None


class HookOutput(StrictModel):
    """Top-level hook answer."""

    hookSpecificOutput: PreToolUseOutput
