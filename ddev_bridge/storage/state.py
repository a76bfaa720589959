"""
Per-session state files for the hook adapter.

Claude Code starts a fresh hook process for every event, so the status
cache and notification flags live in ~/.ddev-bridge/sessions/<session_id>.json.
A FileLock per session serializes concurrent hook processes of one session;
different sessions never share a file.
"""

from __future__ import annotations

import contextlib
import re
from collections.abc import Iterator
from pathlib import Path

from filelock import FileLock

from ddev_bridge.schemas.state import BridgeState

__all__ = ['SessionStateStore']

# Session IDs are UUIDs; anything else is reduced to a safe file name
_UNSAFE_CHARS = re.compile(r'[^A-Za-z0-9_.-]')


class SessionStateStore:
    """Load and save BridgeState with cross-process locking and atomic writes."""

    def __init__(self, state_dir: Path) -> None:
        """Initialize with the directory holding one JSON file per session."""
        self.sessions_dir = state_dir / 'sessions'

    def state_file(self, session_id: str) -> Path:
        return self.sessions_dir / f'{_UNSAFE_CHARS.sub("_", session_id)}.json'

    def lock_file(self, session_id: str) -> Path:
        return self.state_file(session_id).with_suffix('.lock')

    @contextlib.contextmanager
    def locked(self, session_id: str) -> Iterator[BridgeState]:
        """
        Hold the session lock while the caller mutates its state.

        The state is written back when the block exits normally. On error,
        the file is left untouched.

        Yields:
            BridgeState of the session (fresh state if none was saved yet)
        """
        self.sessions_dir.mkdir(parents=True, exist_ok=True)

        with FileLock(self.lock_file(session_id)):
            state = self.load(session_id)
            yield state
            self.save(session_id, state)

    def load(self, session_id: str) -> BridgeState:
        """Read a session's state. Missing or corrupt files yield a fresh state."""
        state_file = self.state_file(session_id)
        if not state_file.exists():
            return BridgeState()

        try:
            return BridgeState.model_validate_json(state_file.read_text())
        except ValueError:
            # Written by an incompatible version; start over
            return BridgeState()

    def save(self, session_id: str, state: BridgeState) -> None:
        """Write a session's state atomically using temp file + rename."""
        state_file = self.state_file(session_id)
        tmp_file = state_file.with_suffix('.tmp.json')

        with tmp_file.open('w') as f:
            f.write(state.model_dump_json(indent=2))

        # Atomic rename
        tmp_file.replace(state_file)

    def delete(self, session_id: str) -> bool:
        """
        Remove a session's state and lock files.

        Returns:
            True if a state file existed
        """
        state_file = self.state_file(session_id)
        existed = state_file.exists()
        if not self.sessions_dir.exists():
            return existed

        with FileLock(self.lock_file(session_id)):
            state_file.unlink(missing_ok=True)
        self.lock_file(session_id).unlink(missing_ok=True)

        return existed
