"""Help modal — session info, state legend and keybindings over the chat."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Markdown, Static

from hipat_chat.l1_entities.chat_state import ChatState

_STATE_LEGEND = [
    ('○ Idle', 'No messages yet'),
    ('● Ready', 'Waiting for your next message'),
    ('⟳ Thinking…', 'Pat is answering; input is disabled'),
    ('✗ Error', 'Last reply failed; send again to retry'),
]

_KEYS = [
    ('Enter', 'Send message'),
    ('Ctrl+L', 'Clear conversation'),
    ('Ctrl+Y', 'Copy conversation'),
    ('Tab', 'Switch focus'),
    ('F1', 'Toggle this help'),
    ('Ctrl+Q', 'Quit'),
]


def build_help_markdown(session_id: str, backend: str, state: ChatState, accepted: list[str]) -> str:
    lines = [
        f'**Session** `{session_id}` · **Backend** {backend} · **State** {state.value}',
        '',
        f'Accepted now: {", ".join(accepted) or "nothing"}',
        '',
        '| Status | Meaning |',
        '|--------|---------|',
        *(f'| `{icon}` | {meaning} |' for icon, meaning in _STATE_LEGEND),
        '',
        '| Key | Action |',
        '|-----|--------|',
        *(f'| `{key}` | {action} |' for key, action in _KEYS),
    ]
    return '\n'.join(lines)


class HelpModal(ModalScreen[None]):
    DEFAULT_CSS = """
    HelpModal {
        align: center middle;
        background: $background 60%;
    }

    #help-box {
        width: 72;
        height: auto;
        max-height: 90%;
        border: round $accent;
        background: $panel;
        padding: 1 2;
    }

    #help-title {
        text-style: bold;
        color: $accent;
    }

    #help-hint {
        color: $text-muted;
        text-align: right;
    }
    """

    BINDINGS = [
        ('escape', 'dismiss', 'Close'),
        ('f1', 'dismiss', 'Close'),
    ]

    def __init__(self, body_md: str, title: str = 'HiPat help', **kwargs) -> None:
        super().__init__(**kwargs)
        self._body_md = body_md
        self._title = title

    def compose(self) -> ComposeResult:
        with Vertical(id='help-box'):
            yield Static(self._title, id='help-title')
            yield Markdown(self._body_md, id='help-body')
            yield Static('Esc / F1 to close', id='help-hint')
