"""ChatApp — Textual TUI shell: compose, input handling, routing worker."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App as TextualApp
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Button, Input, Static

from hipat_chat.l1_entities.chat_state import ChatState
from hipat_chat.l1_entities.config import AppConfig
from hipat_chat.l2_use_cases.chat_machine import accepted_events
from hipat_chat.l3_interface_adapters.controllers.chat_controller import ChatController
from hipat_chat.l4_frameworks_and_drivers.logging_setup import setup_file_logging
from hipat_chat.l4_frameworks_and_drivers.messages import RouteFinished
from hipat_chat.l4_frameworks_and_drivers.widgets.chat_panel import ChatPanel
from hipat_chat.l4_frameworks_and_drivers.widgets.help_modal import HelpModal, build_help_markdown
from hipat_chat.l4_frameworks_and_drivers.widgets.status_bar import StatusBar

log = logging.getLogger('hipat.app')

SUGGESTIONS = ['Workout plans', 'Nutrition advice', 'Fitness tracking', 'Meal suggestions']


class ChatApp(TextualApp):
    """Main TUI application for chatting with Pat."""

    CSS_PATH = 'app.tcss'

    BINDINGS = [
        Binding('ctrl+q', 'quit_app', 'Quit', priority=True),
        Binding('ctrl+l', 'clear_chat', 'Clear', priority=True),
        Binding('ctrl+y', 'copy_chat', 'Copy', priority=True),
        Binding('f1', 'show_help', 'Help', priority=True),
        Binding('tab', 'focus_next', 'Switch Focus', show=False),
    ]

    def __init__(
        self,
        config: AppConfig,
        output_dir: Path,
        controller: ChatController | None = None,
        missing_models: list[str] | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._config = config
        self._output_dir = output_dir
        self._output_dir.mkdir(parents=True, exist_ok=True)

        setup_file_logging(self._output_dir)

        if controller is not None:
            self._controller = controller
        else:  # pragma: no cover -- composition-root wiring; controller always injected in tests
            from hipat_chat.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: only wired when no controller injected (non-test path)
                DependencyContainer,
            )

            self._controller = DependencyContainer(config, output_dir).controller

        self._missing_models: list[str] = missing_models or []

    @property
    def controller(self) -> ChatController:
        return self._controller

    def _header_text(self) -> str:
        header = '  HiPat | your fitness & nutrition assistant'
        if self._config.router.backend == 'agent':
            header += f' — agent: {self._controller.router.agent_role}'
        return header

    def compose(self) -> ComposeResult:
        yield Static(self._header_text(), id='header')
        yield ChatPanel(id='chat-panel')
        with Horizontal(id='suggestions'):
            for i, label in enumerate(SUGGESTIONS):
                yield Button(label, id=f'suggestion-{i}', classes='suggestion')
        yield Input(placeholder='Ask Pat anything…', id='chat-input')
        yield StatusBar(id='status-bar')

    def on_mount(self) -> None:
        bar = self.query_one('#status-bar', StatusBar)
        bar.backend_label = self._config.router.backend
        if self._config.router.backend == 'agent':
            bar.agent_label = self._controller.router.agent_role or ''
        bar.keybinding_hints = r'\[Enter] send  \[^L] clear  \[^Y] copy  \[F1] help  \[^Q] quit'
        if self._missing_models:
            models_str = ', '.join(self._missing_models)
            self.notify(
                f'Model {models_str} not available; replies will fall back to an apology.',
                severity='warning',
                timeout=10,
            )
        self.query_one('#chat-input', Input).focus()
        self._sync_view()

    def _sync_view(self) -> None:
        """Mirror controller state into the status bar, input and suggestion row."""
        ctx = self._controller.context
        bar = self.query_one('#status-bar', StatusBar)
        bar.chat_state = ctx.state
        bar.message_count = len(ctx.messages)

        chat_input = self.query_one('#chat-input', Input)
        chat_input.disabled = ctx.is_processing
        self.query_one('#suggestions', Horizontal).display = ctx.state is ChatState.IDLE

    # --- Input ---

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != 'chat-input':
            return
        self._send(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id and event.button.id.startswith('suggestion-'):
            self._send(str(event.button.label))

    def _send(self, text: str) -> None:
        text = text.strip()
        if not text:
            return
        if not self._controller.can_send():
            self.notify('Pat is still answering, please wait', severity='warning', timeout=3)
            return
        if not self._controller.begin(text):
            return

        self.query_one('#chat-input', Input).value = ''
        self.query_one('#chat-panel', ChatPanel).append_message(self._controller.messages[-1])
        self._sync_view()
        self._run_route_worker(text)

    # --- Workers ---

    def _run_route_worker(self, text: str) -> None:
        router = self._controller.router

        async def _route_task() -> None:
            result = await router.execute(text)
            self.post_message(RouteFinished(result))

        self.run_worker(_route_task, exclusive=True, group='route')

    def on_route_finished(self, message: RouteFinished) -> None:
        result = message.result
        if not self._controller.complete(result):
            log.debug('Dropped route result outside processing')
            return
        panel = self.query_one('#chat-panel', ChatPanel)
        if result.ok:
            panel.append_message(self._controller.messages[-1])
        else:
            panel.append_error(self._controller.context.error or result.text)
            log.info('Reply failed: %s', result.error)
        self._sync_view()
        self.query_one('#chat-input', Input).focus()

    # --- Actions ---

    def action_clear_chat(self) -> None:
        if not self._controller.clear():
            self.notify('Cannot clear while Pat is answering', severity='warning', timeout=3)
            return
        self.query_one('#chat-panel', ChatPanel).reset()
        self._sync_view()

    def action_copy_chat(self) -> None:
        self.query_one('#chat-panel', ChatPanel).action_copy_content()

    def action_show_help(self) -> None:
        if isinstance(self.screen, HelpModal):
            self.screen.dismiss()
            return

        state = self._controller.state
        body = build_help_markdown(
            self._controller.session_id,
            self._config.router.backend,
            state,
            accepted_events(state),
        )
        self.push_screen(HelpModal(body_md=body))

    def action_quit_app(self) -> None:
        self.exit()
