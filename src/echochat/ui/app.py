"""Main Textual TUI application.

Renders the controller's UiState and forwards user intents to it. Holds
no conversation logic of its own.
"""

import asyncio
import threading

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from ..conversation import (
    DEFAULT_REPLY_DELAY,
    ConversationController,
    DraftChanged,
    SendRequested,
    UiState,
)
from ..store import MessageStore, Subscription
from .config import LogLevel
from .styles import APP_CSS
from .themes import ECHO_DARK
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel


class EchoChatApp(App):
    """Textual TUI for the echo chat."""

    CSS = APP_CSS
    TITLE = "Echo Chat"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        # Priority so the focused Input does not swallow them
        Binding("ctrl+k", "clear_chat", "Clear Chat", priority=True),
        Binding("ctrl+r", "copy_last_reply", "Copy Reply", priority=True),
        Binding("ctrl+d", "toggle_debug", "Debug", priority=True),
    ]

    def __init__(
        self,
        store: MessageStore,
        reply_delay: float = DEFAULT_REPLY_DELAY,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._store = store
        self._reply_delay = reply_delay
        self._log_level = log_level
        self._controller: ConversationController | None = None
        self._state_subscription: Subscription | None = None
        self._loop: asyncio.AbstractEventLoop | None = None

    @property
    def controller(self) -> ConversationController | None:
        return self._controller

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ChatHistoryWidget(id="chat-history")
        yield DebugPanel(id="debug-panel")
        yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(ECHO_DARK)
        self.theme = "echo-dark"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self._loop = asyncio.get_running_loop()
        self._controller = ConversationController(self._store, reply_delay=self._reply_delay)
        self._controller.set_debug_callback(self._route_debug)
        self._state_subscription = self._controller.ui_state.subscribe(self._on_state_changed)

        self.sub_title = f"{self._store.backend_type} | replies after {self._reply_delay:g}s"
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def on_unmount(self) -> None:
        """Stop observing the conversation."""
        if self._state_subscription is not None:
            self._state_subscription.cancel()
            self._state_subscription = None
        if self._controller is not None:
            # The log panel is gone by now
            self._controller.set_debug_callback(None)
            self._controller.dispose()

    def _route_debug(self, level: str, component: str, message: str) -> None:
        """Route debug messages to the log panel."""
        self._call_thread_safe(self._write_log, level, component, message)

    def _call_thread_safe(self, func, *args) -> None:
        # Never block: other threads may still hold the store lock here
        if self._thread_id != threading.get_ident():
            self._loop.call_soon_threadsafe(func, *args)
        else:
            func(*args)

    def _observing(self) -> bool:
        # Handoffs from other threads can land after unmount
        return self._controller is not None and not self._controller.disposed

    def _write_log(self, level: str, component: str, message: str) -> None:
        if not self._observing():
            return
        log_panel = self.query_one("#debug-panel", DebugPanel)
        log_panel.add_entry(component, message, LogLevel.from_string(level))

    def _on_state_changed(self, state: UiState) -> None:
        self._call_thread_safe(self._render_state)

    def _render_state(self) -> None:
        # Always the newest state; a queued handoff may be older
        if not self._observing():
            return
        state = self._controller.state
        self.query_one("#chat-history", ChatHistoryWidget).show_messages(state.messages)
        input_bar = self.query_one("#chat-input-bar", ChatInputBar)
        input_bar.set_sending(state.is_sending)
        input_bar.sync_draft(state.draft_text)

    def on_chat_input_bar_draft_edited(self, event: ChatInputBar.DraftEdited) -> None:
        if self._controller is not None:
            self._controller.submit_event(DraftChanged(event.value))

    def on_chat_input_bar_send_pressed(self, event: ChatInputBar.SendPressed) -> None:
        if self._controller is not None:
            self._controller.submit_event(SendRequested())

    def action_clear_chat(self) -> None:
        """Clear the conversation log."""
        self._store.reset()
        self.notify("Chat cleared", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        visible = log_panel.toggle()
        self.notify("Log panel shown" if visible else "Log panel hidden", timeout=2)

    def action_copy_last_reply(self) -> None:
        """Copy the last reply to the clipboard."""
        reply = self.query_one("#chat-history", ChatHistoryWidget).get_last_reply()
        if reply is not None:
            self.copy_to_clipboard(reply)
            self.notify("Reply copied")
        else:
            self.notify("No reply to copy", severity="warning")


async def run_textual_tui(
    store: MessageStore,
    reply_delay: float = DEFAULT_REPLY_DELAY,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        store: Message store shared with the conversation controller
        reply_delay: Seconds before each echo reply appears
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = EchoChatApp(store=store, reply_delay=reply_delay, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
