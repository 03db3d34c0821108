"""Persistence record for a chat message."""

from __future__ import annotations

from pydantic import BaseModel

from hipat_chat.l1_entities.chat_message import ChatMessage, Role


class StoredMessage(BaseModel):
    """A message copy keyed by session, as handed to the message store."""

    session_id: str
    message_id: str
    role: Role
    content: str
    timestamp: float

    @classmethod
    def from_message(cls, session_id: str, message: ChatMessage) -> StoredMessage:
        return cls(
            session_id=session_id,
            message_id=message.id,
            role=message.role,
            content=message.content,
            timestamp=message.timestamp,
        )
