"""Conversation state entity — lifecycle enum plus the immutable context."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict

from hipat_chat.l1_entities.chat_message import ChatMessage


class ChatState(enum.Enum):
    IDLE = 'idle'
    ACTIVE = 'active'
    PROCESSING = 'processing'
    ERROR = 'error'


class ConversationContext(BaseModel):
    """Snapshot of one chat session. Transitions return a new instance."""

    model_config = ConfigDict(frozen=True)

    state: ChatState = ChatState.IDLE
    messages: tuple[ChatMessage, ...] = ()
    error: str | None = None

    @property
    def is_processing(self) -> bool:
        return self.state is ChatState.PROCESSING

    @property
    def last_message(self) -> ChatMessage | None:
        return self.messages[-1] if self.messages else None
