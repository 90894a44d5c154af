"""Pytest configuration and shared fixtures."""
import asyncio
import heapq

import pytest

from echochat.conversation import ConversationController
from echochat.store import InMemoryMessageStore


class VirtualClock:
    """Injectable sleep() whose time only moves when advance() is called."""

    def __init__(self) -> None:
        self.now = 0.0
        self._sleepers: list[tuple[float, int, asyncio.Future]] = []
        self._seq = 0

    async def sleep(self, delay: float) -> None:
        future = asyncio.get_running_loop().create_future()
        heapq.heappush(self._sleepers, (self.now + delay, self._seq, future))
        self._seq += 1
        await future

    @staticmethod
    async def settle(rounds: int = 10) -> None:
        """Let ready tasks run until they block again."""
        for _ in range(rounds):
            await asyncio.sleep(0)

    @property
    def pending(self) -> int:
        return len(self._sleepers)

    async def advance(self, delay: float) -> None:
        """Move time forward, waking every sleeper whose deadline has passed."""
        await self.settle()
        target = self.now + delay
        while self._sleepers and self._sleepers[0][0] <= target:
            deadline, _, future = heapq.heappop(self._sleepers)
            self.now = deadline
            if not future.done():
                future.set_result(None)
            await self.settle()
        self.now = target


@pytest.fixture
def clock():
    """Return a fresh virtual clock."""
    return VirtualClock()


@pytest.fixture
def store(clock):
    """Return an in-memory store whose reply delays use the virtual clock."""
    return InMemoryMessageStore(sleep=clock.sleep)


@pytest.fixture
def controller(store):
    """Return a controller with a 2 second reply delay; disposed after the test."""
    ctrl = ConversationController(store, reply_delay=2.0)
    yield ctrl
    ctrl.dispose()
