"""Abstract base class for message stores.

This module defines the interface for the conversation log.
The abstraction hides:
- How identifiers are assigned and kept unique
- Where the ordered log lives
- How changes are broadcast to observers
"""

from abc import ABC, abstractmethod
from typing import Any

from .models import Message
from .observable import ObservableValue


class MessageStore(ABC):
    """Abstract message store.

    Single source of truth for the conversation log. Every mutation
    publishes the complete, new ordered sequence through `messages`.
    """

    def __init__(self) -> None:
        self._debug_callback: Any | None = None

    def set_debug_callback(self, callback: Any) -> None:
        """Set debug callback for logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        """Send debug message if callback is set."""
        if self._debug_callback:
            self._debug_callback(level, component, message)

    @property
    @abstractmethod
    def messages(self) -> ObservableValue[tuple[Message, ...]]:
        """Observable snapshot of the full log, oldest first."""

    @abstractmethod
    def append_outgoing(self, text: str) -> Message:
        """Append a message written by the user."""

    @abstractmethod
    def append_incoming(self, text: str) -> Message:
        """Append a message produced by the simulated responder."""

    @abstractmethod
    async def schedule_incoming_reply(self, text: str, delay: float) -> Message:
        """Wait `delay` seconds, then append an incoming message."""

    @abstractmethod
    def reset(self) -> None:
        """Empty the log and restart identifiers at 1."""

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Get the backend type identifier."""

    def snapshot(self) -> tuple[Message, ...]:
        """Current log contents."""
        return self.messages.value
