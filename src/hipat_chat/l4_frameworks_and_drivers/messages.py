"""Textual Message subclasses — contracts between the routing worker and the App."""

from __future__ import annotations

from textual.message import Message

from hipat_chat.l2_use_cases.route_message_use_case import RouteResult


class RouteFinished(Message):
    """Posted by the routing worker when the router returns (success or soft failure)."""

    def __init__(self, result: RouteResult) -> None:
        super().__init__()
        self.result = result
