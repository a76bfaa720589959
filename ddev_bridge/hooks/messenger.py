"""Deliver session notices through the hook's additionalContext field."""

from __future__ import annotations


class AdditionalContextMessenger:
    """
    Collects notices for the current hook answer (implements MessengerProtocol).

    Claude Code adds additionalContext to the conversation without asking
    the model for a reply, which makes it a one-way channel.
    """

    def __init__(self) -> None:
        self.messages: list[str] = []

    async def send(self, session_id: str, text: str) -> None:
        self.messages.append(text)

    @property
    def additional_context(self) -> str | None:
        if not self.messages:
            return None
        return '\n\n'.join(self.messages)
