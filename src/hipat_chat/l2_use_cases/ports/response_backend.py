"""Port: whatever produces the reply text for a user message."""

from __future__ import annotations

from typing import Protocol

from hipat_chat.l1_entities.input_modality import InputModality


class ResponseBackend(Protocol):
    """Abstract reply producer. Implementations may raise; the router fails soft."""

    async def respond(
        self,
        text: str,
        agent_role: str | None = None,
        modality: InputModality = InputModality.TEXT,
    ) -> str:
        """Produce a reply for *text*."""
        ...
