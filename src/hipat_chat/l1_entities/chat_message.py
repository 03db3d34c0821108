"""Chat message entity — one immutable entry in the conversation log."""

from __future__ import annotations

import time
import uuid
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal['system', 'user', 'assistant']


def new_message_id() -> str:
    return uuid.uuid4().hex


class ChatMessage(BaseModel):
    """A single message in a conversation. Frozen once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_message_id)
    role: Role
    content: str
    timestamp: float = Field(default_factory=time.time, description='Creation time, seconds since epoch')
