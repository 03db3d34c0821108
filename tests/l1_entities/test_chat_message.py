"""Tests for ChatMessage and ConversationContext entities."""

import time

import pytest
from pydantic import ValidationError

from hipat_chat.l1_entities.chat_message import ChatMessage
from hipat_chat.l1_entities.chat_state import ChatState, ConversationContext


class TestChatMessage:
    def test_ids_are_unique(self):
        a = ChatMessage(role='user', content='hi')
        b = ChatMessage(role='user', content='hi')
        assert a.id != b.id

    def test_timestamp_defaults_to_now(self):
        before = time.time()
        msg = ChatMessage(role='assistant', content='hello')
        assert before <= msg.timestamp <= time.time()

    def test_frozen(self):
        msg = ChatMessage(role='user', content='hi')
        with pytest.raises(ValidationError):
            msg.content = 'changed'  # type: ignore[misc]

    def test_rejects_unknown_role(self):
        with pytest.raises(ValidationError):
            ChatMessage(role='bot', content='hi')  # type: ignore[arg-type]


class TestConversationContext:
    def test_defaults(self):
        ctx = ConversationContext()
        assert ctx.state is ChatState.IDLE
        assert ctx.messages == ()
        assert ctx.error is None
        assert ctx.last_message is None

    def test_is_processing(self):
        assert ConversationContext(state=ChatState.PROCESSING).is_processing
        assert not ConversationContext(state=ChatState.ACTIVE).is_processing

    def test_last_message(self):
        first = ChatMessage(role='user', content='a')
        second = ChatMessage(role='assistant', content='b')
        ctx = ConversationContext(state=ChatState.ACTIVE, messages=(first, second))
        assert ctx.last_message == second

    def test_state_values(self):
        assert {s.value for s in ChatState} == {'idle', 'active', 'processing', 'error'}
