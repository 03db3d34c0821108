"""Status bar — bottom bar showing chat state, message count, agent, and keybinding hints."""

from __future__ import annotations

from rich.cells import cell_len
from textual.reactive import reactive
from textual.widgets import Static

from hipat_chat.l1_entities.chat_state import ChatState

_STATE_ICONS = {
    ChatState.IDLE: '○ Idle',
    ChatState.ACTIVE: '● Ready',
    ChatState.PROCESSING: '⟳ Thinking…',
    ChatState.ERROR: '✗ Error',
}


class StatusBar(Static):
    """Bottom status bar with chat state on the left and key hints on the right."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $surface;
        color: $text;
        padding: 0 1;
        overflow: hidden hidden;
    }
    """

    chat_state: reactive[ChatState] = reactive(ChatState.IDLE)
    message_count: reactive[int] = reactive(0)
    agent_label: reactive[str] = reactive('')
    backend_label: reactive[str] = reactive('')
    keybinding_hints: reactive[str] = reactive('')

    def render(self) -> str:
        left_parts = []
        if self.backend_label:
            left_parts.append(self.backend_label)
        left_parts.append(_STATE_ICONS[self.chat_state])
        left_parts.append(f'{self.message_count} msg')
        if self.agent_label:
            left_parts.append(self.agent_label)
        left = ' │ '.join(left_parts)

        hints = self.keybinding_hints
        if hints:
            content_width = (self.size.width or 80) - 2
            gap = content_width - cell_len(left) - cell_len(hints.replace(r'\[', '['))
            if gap >= 2:
                left = left + ' ' * gap + hints
        return left
