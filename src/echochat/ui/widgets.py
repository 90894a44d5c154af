"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Bubble rendering and incremental mounting of the message list
- Draft input and send button state
- Log rendering with level filtering
"""

from collections.abc import Sequence
from datetime import datetime

from rich.markup import escape
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.widgets import Button, Input, RichLog, Static

from ..store.models import Message as ChatMessage
from .config import (
    INCOMING_LABEL,
    INPUT_PLACEHOLDER,
    LOG_TIMESTAMP_FORMAT,
    MESSAGE_TIME_FORMAT,
    OUTGOING_LABEL,
    LogLevel,
)


def format_message_time(msg: ChatMessage) -> str:
    """Format a message timestamp in local time, e.g. "03:15 PM"."""
    return msg.created_at.astimezone().strftime(MESSAGE_TIME_FORMAT)


class MessageBubble(Vertical):
    """A single chat message: header with sender and time, then the text."""

    def __init__(self, msg: ChatMessage, *args, **kwargs) -> None:
        direction = "incoming" if msg.is_incoming else "outgoing"
        super().__init__(*args, classes=f"message-bubble {direction}", **kwargs)
        self.chat_message = msg

    def compose(self):
        label = INCOMING_LABEL if self.chat_message.is_incoming else OUTGOING_LABEL
        yield Static(
            f"{label} [{format_message_time(self.chat_message)}]",
            classes="message-header",
            markup=False,
        )
        yield Static(self.chat_message.text, classes="message-content", markup=False)


class ChatHistoryWidget(VerticalScroll):
    """Scrollable chat history, oldest message first."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "No messages"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._messages: tuple[ChatMessage, ...] = ()

    @property
    def message_count(self) -> int:
        return len(self._messages)

    def show_messages(self, messages: Sequence[ChatMessage]) -> None:
        """Render a full snapshot of the conversation.

        Messages already on screen are kept; only new ones are mounted.
        A snapshot that does not extend the current one (reset, bulk
        replacement) re-renders everything.
        """
        messages = tuple(messages)
        current_ids = [m.id for m in self._messages]
        new_ids = [m.id for m in messages[:len(current_ids)]]

        if new_ids == current_ids and len(messages) >= len(current_ids):
            fresh = messages[len(current_ids):]
        else:
            self.remove_children()
            fresh = messages

        self._messages = messages
        if fresh:
            self.mount(*(MessageBubble(m) for m in fresh))
            self.scroll_end(animate=False)

        self.border_subtitle = f"{len(messages)} messages" if messages else "No messages"

    def get_last_reply(self) -> str | None:
        """Get the text of the most recent incoming message."""
        for msg in reversed(self._messages):
            if msg.is_incoming:
                return msg.text
        return None


class ChatInputBar(Horizontal):
    """Draft input with a Send button."""

    class DraftEdited(Message):
        """Posted when the draft text changes."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class SendPressed(Message):
        """Posted when the user asks to send the draft."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._sending = False

    def compose(self):
        yield Input(id="chat-input", placeholder=INPUT_PLACEHOLDER)
        yield Button("Send", id="send-btn", variant="success").with_tooltip(
            "Send message (Enter)"
        )

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.post_message(self.DraftEdited(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._request_send()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._request_send()

    def _request_send(self) -> None:
        # Send is disabled while a message is in flight
        if not self._sending:
            self.post_message(self.SendPressed())

    def set_sending(self, sending: bool) -> None:
        """Enable or disable the send action."""
        self._sending = sending
        self.query_one("#send-btn", Button).disabled = sending

    def sync_draft(self, text: str) -> None:
        """Make the input show `text` if it does not already."""
        text_input = self.query_one("#chat-input", Input)
        if text_input.value != text:
            text_input.value = text

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", Input).focus()


class DebugPanel(RichLog):
    """Log panel for controller and store tracing with level filtering.

    Hidden by default, shown with --log-level or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Hidden"

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "Controller": "green",
        "Store": "bright_magenta",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )
        self._log_level = log_level
        # Hidden until --log-level or Ctrl+D
        self.display = False

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def add_entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Controller, Store)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{LogLevel.name(level):<5}[/] "
            f"[{comp_color}]\\[{component}][/] {escape(message)}"
        )

    def info(self, component: str, message: str) -> None:
        """Log an INFO level message."""
        self.add_entry(component, message, LogLevel.INFO)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self._update_subtitle()

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
