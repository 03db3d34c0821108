"""Events accepted by the chat state machine."""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict


class _Event(BaseModel):
    model_config = ConfigDict(frozen=True)


class SendMessage(_Event):
    """User submitted text."""

    type: Literal['SEND_MESSAGE'] = 'SEND_MESSAGE'
    content: str


class ReceiveMessage(_Event):
    """Router produced a reply."""

    type: Literal['RECEIVE_MESSAGE'] = 'RECEIVE_MESSAGE'
    content: str


class ErrorOccurred(_Event):
    """Routing attempt failed; reason is safe to show to the user."""

    type: Literal['ERROR'] = 'ERROR'
    reason: str


class ClearMessages(_Event):
    type: Literal['CLEAR_MESSAGES'] = 'CLEAR_MESSAGES'


ChatEvent = Union[SendMessage, ReceiveMessage, ErrorOccurred, ClearMessages]
