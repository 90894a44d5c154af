"""Conversation controller.

Translates user intents into store operations and keeps a UI-facing
state projection current. The rendering layer only reads `ui_state` and
forwards intents through `submit_event`.
"""

import asyncio
from dataclasses import replace
from typing import Any

from ..errors import ConfigurationError
from ..store.base import MessageStore
from ..store.models import Message
from ..store.observable import ObservableValue
from .config import DEFAULT_REPLY_DELAY, ECHO_PREFIX
from .events import ChatEvent, DraftChanged, MessagesReplaced, SendRequested
from .state import UiState


class ConversationController:
    """Reducer over chat intents bound to a MessageStore.

    The busy flag (`is_sending`) is cleared only by observing the store's
    own confirmation of an append, never by the send call returning.

    Example:
        store = create_message_store()
        controller = ConversationController(store, reply_delay=0.5)
        controller.ui_state.subscribe(render)
        controller.submit_event(DraftChanged("hi"))
        controller.submit_event(SendRequested())  # needs a running event loop

    Args:
        store: Shared message store
        reply_delay: Seconds before the echo reply is appended
    """

    def __init__(
        self,
        store: MessageStore,
        reply_delay: float = DEFAULT_REPLY_DELAY,
    ) -> None:
        if reply_delay < 0:
            raise ConfigurationError(
                f"reply delay must be non-negative, got {reply_delay}",
                setting="reply_delay",
            )
        self._store = store
        self._reply_delay = reply_delay
        self._debug_callback: Any | None = None
        self._reply_tasks: set[asyncio.Task[Message]] = set()
        self._disposed = False
        self._ui_state: ObservableValue[UiState] = ObservableValue(UiState())
        # Observe the store and map every snapshot into UI state
        self._subscription = store.messages.subscribe(self._on_log_changed)

    @property
    def ui_state(self) -> ObservableValue[UiState]:
        """Observable UI state."""
        return self._ui_state

    @property
    def state(self) -> UiState:
        """Current UI state."""
        return self._ui_state.value

    @property
    def reply_delay(self) -> float:
        return self._reply_delay

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def pending_replies(self) -> int:
        """Number of scheduled replies that have not completed yet."""
        return len(self._reply_tasks)

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
        """
        self._debug_callback = callback
        # Propagate callback to the store
        self._store.set_debug_callback(callback)

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    def _update(self, **changes: Any) -> None:
        self._ui_state.set(replace(self._ui_state.value, **changes))

    def _on_log_changed(self, messages: tuple[Message, ...]) -> None:
        self._update(messages=messages, is_sending=False)

    def submit_event(self, event: ChatEvent) -> None:
        """Process a chat intent.

        - DraftChanged: stores the text verbatim as the draft
        - SendRequested: sends the trimmed draft and schedules the echo reply
        - MessagesReplaced: replaces the displayed messages and clears the draft

        Raises:
            TypeError: If the event is not a known intent
            RuntimeError: If a non-blank draft is sent outside a running
                event loop; nothing is appended in that case
        """
        if self._disposed:
            self._debug("warning", "Controller", f"Ignoring {type(event).__name__} after dispose")
            return

        if isinstance(event, DraftChanged):
            self._update(draft_text=event.text)
        elif isinstance(event, SendRequested):
            self._send()
        elif isinstance(event, MessagesReplaced):
            self._update(messages=tuple(event.messages), draft_text="", is_sending=False)
        else:
            raise TypeError(f"Unsupported chat event: {event!r}")

    def _send(self) -> None:
        text = self.state.draft_text.strip()
        if not text:
            return

        # Raises before any state changes when no event loop is running
        loop = asyncio.get_running_loop()

        self._update(is_sending=True)
        msg = self._store.append_outgoing(text)
        self._update(draft_text="")
        self._debug("info", "Controller", f"Sent message #{msg.id}")

        task = loop.create_task(
            self._store.schedule_incoming_reply(f"{ECHO_PREFIX}{text}", self._reply_delay)
        )
        self._reply_tasks.add(task)
        task.add_done_callback(self._on_reply_done)
        self._debug("debug", "Controller", f"Reply scheduled in {self._reply_delay:g}s")

    def _on_reply_done(self, task: "asyncio.Task[Message]") -> None:
        self._reply_tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            self._debug("error", "Controller", f"Reply failed: {error}")

    async def wait_for_replies(self) -> None:
        """Wait until every scheduled reply has been appended."""
        while self._reply_tasks:
            await asyncio.gather(*list(self._reply_tasks), return_exceptions=True)

    def dispose(self) -> None:
        """Stop observing the store.

        The UI state is frozen at its last value. Already scheduled replies
        still run and append to the store, but are no longer observed here.
        """
        if self._disposed:
            return
        self._disposed = True
        self._subscription.cancel()
        self._debug("info", "Controller", f"Disposed ({self.pending_replies} replies still pending)")
