"""Chat state machine — pure transition function over ConversationContext.

The table below is the whole machine:

    idle       + SEND_MESSAGE     -> processing  (append user message)
    active     + SEND_MESSAGE     -> processing  (append user message)
    error      + SEND_MESSAGE     -> processing  (clear error, append user message)
    processing + RECEIVE_MESSAGE  -> active      (append assistant message)
    processing + ERROR            -> error       (record reason)
    idle/active/error + CLEAR_MESSAGES -> idle   (wipe log, clear error)

Any other (state, event) pair raises InvalidTransitionError. Contexts are frozen,
so a rejected event leaves the caller's context untouched.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import cast

from hipat_chat.l1_entities.chat_event import ChatEvent, ClearMessages, ErrorOccurred, ReceiveMessage, SendMessage
from hipat_chat.l1_entities.chat_message import ChatMessage, Role
from hipat_chat.l1_entities.chat_state import ChatState, ConversationContext
from hipat_chat.l1_entities.errors import InvalidTransitionError

_Handler = Callable[[ConversationContext, ChatEvent], ConversationContext]


def initial_context() -> ConversationContext:
    """Empty idle context for a new session."""
    return ConversationContext()


def _append(ctx: ConversationContext, role: Role, content: str) -> tuple[ChatMessage, ...]:
    # Keep timestamps non-decreasing even if the wall clock steps backwards.
    now = time.time()
    last = ctx.last_message
    if last is not None and last.timestamp > now:
        now = last.timestamp
    return (*ctx.messages, ChatMessage(role=role, content=content, timestamp=now))


def _send(ctx: ConversationContext, event: ChatEvent) -> ConversationContext:
    event = cast(SendMessage, event)
    if not event.content.strip():
        raise InvalidTransitionError(ctx.state, event.type, 'message content is blank')
    return ConversationContext(
        state=ChatState.PROCESSING,
        messages=_append(ctx, 'user', event.content),
        error=None,
    )


def _receive(ctx: ConversationContext, event: ChatEvent) -> ConversationContext:
    event = cast(ReceiveMessage, event)
    return ConversationContext(
        state=ChatState.ACTIVE,
        messages=_append(ctx, 'assistant', event.content),
        error=None,
    )


def _fail(ctx: ConversationContext, event: ChatEvent) -> ConversationContext:
    event = cast(ErrorOccurred, event)
    return ConversationContext(state=ChatState.ERROR, messages=ctx.messages, error=event.reason)


def _clear(ctx: ConversationContext, event: ChatEvent) -> ConversationContext:
    return initial_context()


_TRANSITIONS: dict[tuple[ChatState, str], _Handler] = {
    (ChatState.IDLE, 'SEND_MESSAGE'): _send,
    (ChatState.ACTIVE, 'SEND_MESSAGE'): _send,
    (ChatState.ERROR, 'SEND_MESSAGE'): _send,
    (ChatState.PROCESSING, 'RECEIVE_MESSAGE'): _receive,
    (ChatState.PROCESSING, 'ERROR'): _fail,
    (ChatState.IDLE, 'CLEAR_MESSAGES'): _clear,
    (ChatState.ACTIVE, 'CLEAR_MESSAGES'): _clear,
    (ChatState.ERROR, 'CLEAR_MESSAGES'): _clear,
}

EVENT_TYPES = (
    SendMessage.model_fields['type'].default,
    ReceiveMessage.model_fields['type'].default,
    ErrorOccurred.model_fields['type'].default,
    ClearMessages.model_fields['type'].default,
)


def is_accepted(state: ChatState, event_type: str) -> bool:
    """Whether *event_type* has a transition out of *state*."""
    return (state, event_type) in _TRANSITIONS


def accepted_events(state: ChatState) -> list[str]:
    return [t for t in EVENT_TYPES if is_accepted(state, t)]


def transition(ctx: ConversationContext, event: ChatEvent) -> ConversationContext:
    """Apply *event* to *ctx*. Returns the new context or raises InvalidTransitionError."""
    handler = _TRANSITIONS.get((ctx.state, event.type))
    if handler is None:
        raise InvalidTransitionError(ctx.state, event.type)
    return handler(ctx, event)
