"""Domain error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hipat_chat.l1_entities.chat_state import ChatState


class InvalidTransitionError(Exception):
    """Raised when an event is not accepted in the current chat state."""

    def __init__(self, state: ChatState, event_type: str, detail: str = '') -> None:
        self.state = state
        self.event_type = event_type
        message = f'{event_type} is not accepted in state {state.value!r}'
        if detail:
            message += f' ({detail})'
        super().__init__(message)


class RoutingError(Exception):
    """Raised by a response backend when it cannot produce a reply."""


class AgentNotFoundError(LookupError):
    """Raised when no agent with the requested role exists."""
