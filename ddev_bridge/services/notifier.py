"""
Per-session notices to the agent.

Each session receives at most one "environment in use" notice and at most
one "environment stopped" nudge. The two flags are independent: a session
nudged to start DDEV is still told about the container once it runs.

Flags are set before the message is sent. A failed send propagates to the
caller and is not retried within the session.
"""

from __future__ import annotations

from ddev_bridge.protocols import MessengerProtocol
from ddev_bridge.schemas.state import BridgeState, SessionState


class SessionNotifier:
    """One-shot notification state machine for the active session."""

    def __init__(self, state: BridgeState, messenger: MessengerProtocol, ddev_binary: str = 'ddev') -> None:
        self.state = state
        self.messenger = messenger
        self.ddev_binary = ddev_binary

    def on_session_created(self, session_id: str) -> None:
        """Start tracking a new session with both flags cleared."""
        self.state.session = SessionState(session_id=session_id)

    async def notify_if_needed(self) -> bool:
        """
        Tell the agent that commands run inside the DDEV container.

        Returns:
            True if a notice was sent
        """
        session = self.state.session
        if session.notified or session.session_id is None:
            return False

        session.notified = True
        await self.messenger.send(session.session_id, self.in_use_notice())
        return True

    async def ask_to_start_if_needed(self) -> bool:
        """
        Suggest starting the stopped DDEV project.

        Returns:
            True if a nudge was sent
        """
        session = self.state.session
        if session.asked_to_start or session.session_id is None:
            return False

        session.asked_to_start = True
        await self.messenger.send(session.session_id, self.start_nudge())
        return True

    def in_use_notice(self) -> str:
        return (
            '➡️  DDEV environment is used. Execute commands inside the DDEV container like this: '
            f'`{self.ddev_binary} exec --dir="{self.state.container_working_dir}" bash -c <command>`'
        )

    def start_nudge(self) -> str:
        return (
            '⚠️  A DDEV project was detected but it is not running, so commands run on the host. '
            f'Ask the user whether to start it with `{self.ddev_binary} start`.'
        )
