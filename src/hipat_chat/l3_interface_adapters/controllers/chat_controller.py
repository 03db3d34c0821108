"""ChatController — drives the state machine, calls the router, persists copies."""

from __future__ import annotations

import logging
import uuid

from hipat_chat.l1_entities.chat_event import ChatEvent, ClearMessages, ErrorOccurred, ReceiveMessage, SendMessage
from hipat_chat.l1_entities.chat_message import ChatMessage
from hipat_chat.l1_entities.chat_state import ChatState, ConversationContext
from hipat_chat.l1_entities.errors import InvalidTransitionError
from hipat_chat.l1_entities.stored_message import StoredMessage
from hipat_chat.l2_use_cases.chat_machine import initial_context, is_accepted, transition
from hipat_chat.l2_use_cases.ports.message_store import MessageStore
from hipat_chat.l2_use_cases.route_message_use_case import MessageRouter, RouteResult

log = logging.getLogger('hipat.controller')


def new_session_id() -> str:
    return uuid.uuid4().hex[:16]


class ChatController:
    """Central orchestrator for one conversation.

    Owns the ConversationContext. The App (L4) delegates every state change here;
    the controller is the only caller of ``transition``.
    """

    def __init__(
        self,
        router: MessageRouter,
        store: MessageStore | None = None,
        session_id: str | None = None,
    ) -> None:
        self._router = router
        self._store = store
        self.session_id = session_id or new_session_id()
        self.context: ConversationContext = initial_context()

    @property
    def router(self) -> MessageRouter:
        return self._router

    @property
    def state(self) -> ChatState:
        return self.context.state

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return self.context.messages

    def can_send(self) -> bool:
        return is_accepted(self.context.state, 'SEND_MESSAGE')

    def dispatch(self, event: ChatEvent) -> bool:
        """Apply *event*. Returns False (and logs) when the machine rejects it."""
        try:
            self.context = transition(self.context, event)
        except InvalidTransitionError as e:
            log.warning('Rejected event: %s', e)
            return False
        return True

    def begin(self, text: str) -> bool:
        """Append the user message and enter processing. False if not accepted."""
        if not self.dispatch(SendMessage(content=text.strip())):
            return False
        self._persist_last()
        return True

    def complete(self, result: RouteResult) -> bool:
        """Apply a router result: assistant reply on success, ERROR on failure."""
        if not result.ok:
            log.info('Routing failed for session %s: %s', self.session_id, result.error)
            return self.dispatch(ErrorOccurred(reason=result.text))
        if not self.dispatch(ReceiveMessage(content=result.text)):
            return False
        self._persist_last()
        return True

    async def submit(self, text: str) -> bool:
        """Run one full turn: SEND, route, RECEIVE or ERROR. False if the SEND was rejected."""
        if not self.begin(text):
            return False
        result = await self._router.execute(self.context.messages[-1].content)
        self.complete(result)
        return True

    def clear(self) -> bool:
        return self.dispatch(ClearMessages())

    def _persist_last(self) -> None:
        if self._store is None:
            return
        message = self.context.messages[-1]
        try:
            self._store.save(StoredMessage.from_message(self.session_id, message))
        except Exception as e:
            log.error('Failed to persist %s message %s: %s', message.role, message.id, e, exc_info=True)
