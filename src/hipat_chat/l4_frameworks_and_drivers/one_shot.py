"""One-shot mode — route a single message without the TUI."""

from __future__ import annotations

import asyncio

import click

from hipat_chat.l1_entities.chat_state import ChatState
from hipat_chat.l3_interface_adapters.controllers.chat_controller import ChatController


def run_once(controller: ChatController, text: str) -> int:
    """Send *text*, print the reply, and return a process exit code."""
    if not asyncio.run(controller.submit(text)):
        click.echo('Error: message rejected (empty input?)', err=True)
        return 2

    if controller.state is ChatState.ERROR:
        click.echo(f'Error: {controller.context.error}', err=True)
        return 1

    click.echo(controller.messages[-1].content)
    return 0
