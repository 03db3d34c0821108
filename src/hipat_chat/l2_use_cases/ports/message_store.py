"""Port: persistence gateway for conversation messages."""

from __future__ import annotations

from typing import Protocol

from hipat_chat.l1_entities.stored_message import StoredMessage


class MessageStore(Protocol):
    """Best-effort copy of each appended message. Callers never roll back on failure."""

    def save(self, record: StoredMessage) -> None:
        """Persist one message record."""
        ...

    def load(self, session_id: str) -> list[StoredMessage]:
        """Return the records of a session in insertion order."""
        ...
