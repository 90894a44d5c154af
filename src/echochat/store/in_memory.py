"""In-memory message store.

Holds the log in an observable tuple for the lifetime of the process.
Data is lost when the application exits.
"""

import asyncio
import threading
from collections.abc import Awaitable, Callable

from .base import MessageStore
from .models import Message
from .observable import ObservableValue

Sleep = Callable[[float], Awaitable[None]]


class InMemoryMessageStore(MessageStore):
    """In-memory message store (session-only).

    Identifier assignment and the append happen under a single lock, so
    concurrent appends from threads or tasks never collide or get lost.

    Args:
        sleep: Coroutine function used for reply delays. Defaults to
            asyncio.sleep; tests inject a virtual clock.
    """

    def __init__(self, sleep: Sleep | None = None) -> None:
        super().__init__()
        self._sleep = sleep or asyncio.sleep
        self._lock = threading.RLock()
        self._last_id = 0
        self._messages: ObservableValue[tuple[Message, ...]] = ObservableValue(())

    @property
    def messages(self) -> ObservableValue[tuple[Message, ...]]:
        return self._messages

    def _append(self, text: str, is_incoming: bool) -> Message:
        with self._lock:
            self._last_id += 1
            msg = Message(id=self._last_id, text=text, is_incoming=is_incoming)
            self._messages.set(self._messages.value + (msg,))
        self._debug("debug", "Store", f"Appended {msg.direction} message #{msg.id}")
        return msg

    def append_outgoing(self, text: str) -> Message:
        return self._append(text, is_incoming=False)

    def append_incoming(self, text: str) -> Message:
        return self._append(text, is_incoming=True)

    async def schedule_incoming_reply(self, text: str, delay: float) -> Message:
        await self._sleep(delay)
        return self.append_incoming(text)

    def reset(self) -> None:
        with self._lock:
            self._last_id = 0
            self._messages.set(())
        self._debug("info", "Store", "Conversation log cleared")

    @property
    def backend_type(self) -> str:
        return "memory"
