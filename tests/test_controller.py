"""Unit tests for the conversation controller."""
import pytest

from echochat.conversation import (
    DEFAULT_REPLY_DELAY,
    ConversationController,
    DraftChanged,
    MessagesReplaced,
    SendRequested,
    UiState,
)
from echochat.errors import ConfigurationError
from echochat.store import InMemoryMessageStore, Message


class TestControllerConstruction:
    """Tests for controller setup."""

    def test_default_reply_delay(self, store):
        controller = ConversationController(store)
        assert controller.reply_delay == DEFAULT_REPLY_DELAY == 5.0
        controller.dispose()

    def test_negative_reply_delay_rejected(self, store):
        with pytest.raises(ConfigurationError, match="non-negative"):
            ConversationController(store, reply_delay=-1)

    def test_initial_state_mirrors_store(self, store):
        existing = store.append_outgoing("already here")
        controller = ConversationController(store)

        assert controller.state == UiState(messages=(existing,))
        controller.dispose()


class TestDraftChanged:
    """Tests for the DraftChanged intent."""

    def test_updates_draft_text(self, controller):
        controller.submit_event(DraftChanged("Hello World"))

        assert controller.state.draft_text == "Hello World"
        assert controller.state.is_sending is False
        assert controller.state.messages == ()

    def test_keeps_text_verbatim(self, controller, store):
        controller.submit_event(DraftChanged("  padded \n"))

        assert controller.state.draft_text == "  padded \n"
        assert store.snapshot() == ()

    def test_multiple_changes(self, controller):
        for text in ("Hello", "Hello World", ""):
            controller.submit_event(DraftChanged(text))
            assert controller.state.draft_text == text


class TestSendRequested:
    """Tests for the SendRequested intent."""

    @pytest.mark.asyncio
    async def test_send_trims_and_clears_draft(self, controller):
        controller.submit_event(DraftChanged("  Hello World  "))
        controller.submit_event(SendRequested())

        state = controller.state
        assert state.draft_text == ""
        assert len(state.messages) == 1
        assert state.messages[0].text == "Hello World"
        assert state.messages[0].is_incoming is False
        assert state.is_sending is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("draft", ["", "   \n\t  "])
    async def test_blank_draft_is_ignored(self, controller, clock, draft):
        controller.submit_event(DraftChanged(draft))
        controller.submit_event(SendRequested())
        await clock.advance(10.0)

        assert controller.state == UiState(draft_text=draft)
        assert controller.pending_replies == 0

    @pytest.mark.asyncio
    async def test_blank_draft_is_not_logged(self, controller):
        entries = []
        controller.set_debug_callback(lambda *entry: entries.append(entry))

        controller.submit_event(DraftChanged("   "))
        controller.submit_event(SendRequested())

        assert entries == []

    def test_send_without_event_loop_changes_nothing(self, controller, store):
        controller.submit_event(DraftChanged("Hello"))

        with pytest.raises(RuntimeError):
            controller.submit_event(SendRequested())

        assert store.snapshot() == ()
        assert controller.state == UiState(draft_text="Hello")
        assert controller.pending_replies == 0

    @pytest.mark.asyncio
    async def test_reply_arrives_after_delay(self, controller, clock):
        controller.submit_event(DraftChanged("Hello"))
        controller.submit_event(SendRequested())

        await clock.advance(1.0)
        messages = controller.state.messages
        assert [(m.text, m.is_incoming) for m in messages] == [("Hello", False)]

        await clock.advance(1.0)
        messages = controller.state.messages
        assert [(m.text, m.is_incoming) for m in messages] == [
            ("Hello", False),
            ("Echo: Hello", True),
        ]
        assert controller.pending_replies == 0

    @pytest.mark.asyncio
    async def test_is_sending_set_then_cleared_by_store_confirmation(self, controller):
        transitions = []
        controller.ui_state.subscribe(
            lambda state: transitions.append((len(state.messages), state.is_sending)),
            replay=False,
        )

        controller.submit_event(DraftChanged("Test"))
        controller.submit_event(SendRequested())

        assert (0, True) in transitions
        assert transitions.index((0, True)) < transitions.index((1, False))
        assert controller.state.is_sending is False

    @pytest.mark.asyncio
    async def test_sequential_sends_keep_order(self, controller, clock):
        controller.submit_event(DraftChanged("First"))
        controller.submit_event(SendRequested())
        await clock.advance(3.0)
        assert len(controller.state.messages) == 2

        controller.submit_event(DraftChanged("Second"))
        controller.submit_event(SendRequested())
        await clock.advance(3.0)

        messages = controller.state.messages
        assert [(m.id, m.text, m.is_incoming) for m in messages] == [
            (1, "First", False),
            (2, "Echo: First", True),
            (3, "Second", False),
            (4, "Echo: Second", True),
        ]

    @pytest.mark.asyncio
    async def test_rapid_sends_reply_independently(self, controller, clock):
        for text in ("one", "two", "three"):
            controller.submit_event(DraftChanged(text))
            controller.submit_event(SendRequested())

        assert controller.pending_replies == 3
        await clock.advance(2.0)

        texts = [m.text for m in controller.state.messages]
        assert texts == ["one", "two", "three", "Echo: one", "Echo: two", "Echo: three"]
        assert [m.id for m in controller.state.messages] == [1, 2, 3, 4, 5, 6]

    @pytest.mark.asyncio
    async def test_wait_for_replies(self):
        store = InMemoryMessageStore()
        controller = ConversationController(store, reply_delay=0)
        controller.submit_event(DraftChanged("ping"))
        controller.submit_event(SendRequested())

        await controller.wait_for_replies()

        assert [m.text for m in controller.state.messages] == ["ping", "Echo: ping"]
        controller.dispose()


class TestMessagesReplaced:
    """Tests for the MessagesReplaced intent."""

    def test_replaces_messages_and_clears_draft(self, controller, store):
        messages = [
            Message(id=1, text="Message 1", is_incoming=False),
            Message(id=2, text="Message 2", is_incoming=True),
        ]
        controller.submit_event(DraftChanged("unsent"))
        controller.submit_event(MessagesReplaced(messages))

        assert controller.state.messages == tuple(messages)
        assert controller.state.draft_text == ""
        assert controller.state.is_sending is False
        assert store.snapshot() == ()

    def test_empty_list(self, controller):
        controller.submit_event(MessagesReplaced([]))
        assert controller.state.messages == ()

    def test_next_store_update_overrides_replacement(self, controller, store):
        controller.submit_event(MessagesReplaced([Message(id=9, text="x", is_incoming=True)]))
        msg = store.append_outgoing("real")
        assert controller.state.messages == (msg,)


class TestStoreObservation:
    """Tests for mapping store snapshots into UI state."""

    def test_store_appends_update_ui_state(self, controller, store):
        store.append_outgoing("Manual message")

        assert len(controller.state.messages) == 1
        assert controller.state.messages[0].text == "Manual message"
        assert controller.state.is_sending is False

    def test_store_reset_clears_messages(self, controller, store):
        store.append_outgoing("a")
        store.reset()
        assert controller.state.messages == ()

    def test_unknown_event_raises(self, controller):
        with pytest.raises(TypeError, match="Unsupported chat event"):
            controller.submit_event("send")  # type: ignore[arg-type]


class TestDispose:
    """Tests for controller teardown."""

    def test_dispose_freezes_ui_state(self, controller, store):
        store.append_outgoing("before")
        frozen = controller.state

        controller.dispose()
        store.append_outgoing("Should not appear")

        assert controller.disposed
        assert controller.state == frozen
        assert len(store.snapshot()) == 2

    def test_dispose_is_idempotent(self, controller, store):
        controller.dispose()
        controller.dispose()
        assert store.messages.subscriber_count == 0

    def test_events_after_dispose_are_ignored(self, controller):
        entries = []
        controller.set_debug_callback(lambda level, component, message: entries.append(level))
        controller.dispose()

        controller.submit_event(DraftChanged("late"))

        assert controller.state.draft_text == ""
        assert entries[-1] == "warning"

    @pytest.mark.asyncio
    async def test_pending_reply_still_lands_in_store(self, controller, store, clock):
        controller.submit_event(DraftChanged("Hello"))
        controller.submit_event(SendRequested())
        frozen = controller.state

        controller.dispose()
        await clock.advance(2.0)

        assert [m.text for m in store.snapshot()] == ["Hello", "Echo: Hello"]
        assert controller.state == frozen
        assert controller.pending_replies == 0
