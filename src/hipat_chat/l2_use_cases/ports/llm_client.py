"""Port: chat-completion backend used by agent replies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from hipat_chat.l1_entities.chat_message import ChatMessage


def to_wire(messages: list[ChatMessage]) -> list[dict[str, str]]:
    """Strip ids and timestamps; providers only take role and content."""
    return [{'role': m.role, 'content': m.content} for m in messages]


@dataclass(frozen=True)
class ChatResponse:
    content: str
    prompt_tokens: int = 0


class LLMClient(Protocol):
    """Provider-neutral LLM access. Gateways translate SDK types to ChatResponse."""

    async def chat(self, model: str, messages: list[ChatMessage]) -> ChatResponse:
        """Complete a system/user/assistant message list."""
        ...

    def check_connectivity(self) -> tuple[bool, str]:
        """(True, '') when the provider answers, else (False, reason). Blocking."""
        ...

    def check_models(self, models: list[str]) -> list[str]:
        """Subset of *models* the provider reports as unavailable. Blocking."""
        ...
