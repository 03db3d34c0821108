"""Chat panel — scrolling RichLog of conversation messages."""

from __future__ import annotations

from datetime import datetime

import pyperclip
from rich.markup import escape
from textual.binding import Binding
from textual.widgets import RichLog

from hipat_chat.l1_entities.chat_message import ChatMessage

_ROLE_STYLE = {
    'user': ('You', 'bold cyan'),
    'assistant': ('Pat', 'bold magenta'),
    'system': ('System', 'dim'),
}


def format_clock(timestamp: float) -> str:
    return datetime.fromtimestamp(timestamp).strftime('%H:%M:%S')


class ChatPanel(RichLog):
    """Auto-scrolling conversation display."""

    DEFAULT_CSS = """
    ChatPanel {
        border: solid $primary;
        scrollbar-size: 1 1;
    }
    ChatPanel:focus {
        border: solid $accent;
    }
    """

    BINDINGS = [Binding('c', 'copy_content', 'Copy', show=False)]

    def __init__(self, title: str = 'Chat', **kwargs) -> None:
        super().__init__(highlight=False, markup=True, wrap=True, auto_scroll=True, **kwargs)
        self.border_title = title
        self._all_text: list[str] = []

    @property
    def plain_text(self) -> str:
        return '\n'.join(self._all_text)

    def append_message(self, message: ChatMessage) -> None:
        label, style = _ROLE_STYLE[message.role]
        clock = format_clock(message.timestamp)
        self._all_text.append(f'[{clock}] {label}: {message.content}')
        self.write(f'[dim]\\[{clock}][/dim] [{style}]{label}[/{style}] {escape(message.content)}')

    def append_error(self, reason: str) -> None:
        self._all_text.append(f'! {reason}')
        self.write(f'[bold red]![/bold red] [red]{escape(reason)}[/red]')

    def reset(self) -> None:
        self._all_text.clear()
        self.clear()

    def action_copy_content(self) -> None:
        """Copy the conversation to the system clipboard."""
        if not self._all_text:
            self.app.notify('Nothing to copy yet', severity='warning', timeout=2)
            return
        pyperclip.copy(self.plain_text)
        self.app.notify('Conversation copied', timeout=2)
