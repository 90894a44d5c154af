"""Latest-value broadcaster used to publish store and UI state.

Hides how subscribers are notified:
- Synchronous callbacks, called in subscription order on every change
- Async iteration with conflation (slow consumers only see the newest value)
- Thread-safe delivery into an event loop via call_soon_threadsafe
"""

import asyncio
import threading
from collections.abc import AsyncIterator, Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class Subscription:
    """Handle returned by ObservableValue.subscribe()."""

    def __init__(self, owner: "ObservableValue", token: int) -> None:
        self._owner = owner
        self._token = token
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        """Stop receiving updates. Safe to call more than once."""
        if not self._active:
            return
        self._active = False
        self._owner._unsubscribe(self._token)


class ObservableValue(Generic[T]):
    """Single-slot container that broadcasts every new value to subscribers.

    Every subscriber independently receives the newest value followed by
    each subsequent update. There is no buffering: only the latest value
    matters.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._lock = threading.RLock()
        self._subscribers: dict[int, Callable[[T], None]] = {}
        self._next_token = 0

    @property
    def value(self) -> T:
        """Current value."""
        return self._value

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def set(self, value: T) -> None:
        """Replace the value and notify every subscriber synchronously."""
        with self._lock:
            self._value = value
            callbacks = list(self._subscribers.values())
            for callback in callbacks:
                callback(value)

    def subscribe(
        self,
        callback: Callable[[T], None],
        replay: bool = True
    ) -> Subscription:
        """Register a callback for value changes.

        Args:
            callback: Called with each new value
            replay: If True, the callback immediately receives the current value

        Returns:
            Subscription handle used to cancel delivery
        """
        with self._lock:
            token = self._next_token
            self._next_token += 1
            self._subscribers[token] = callback
            if replay:
                callback(self._value)
        return Subscription(self, token)

    def _unsubscribe(self, token: int) -> None:
        with self._lock:
            self._subscribers.pop(token, None)

    async def updates(self) -> AsyncIterator[T]:
        """Iterate over the current value and every later one.

        Values published while the consumer is busy are conflated; only the
        newest one is yielded. set() may be called from any thread.
        """
        loop = asyncio.get_running_loop()
        loop_thread = threading.get_ident()
        changed = asyncio.Event()
        latest: list[T] = []

        def _deliver(value: T) -> None:
            latest[:] = [value]
            changed.set()

        def _on_change(value: T) -> None:
            if threading.get_ident() == loop_thread:
                _deliver(value)
            else:
                loop.call_soon_threadsafe(_deliver, value)

        subscription = self.subscribe(_on_change)
        try:
            while True:
                await changed.wait()
                changed.clear()
                yield latest.pop()
        finally:
            subscription.cancel()
