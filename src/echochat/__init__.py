"""
Echochat: a minimal echo chat with an observable in-memory message store.

Each module hides a specific design decision:
- store: how the log and its identifiers are kept and broadcast
- conversation: how user intents become store operations and UI state
- ui / cli: how the state is rendered and launched
"""

__version__ = "0.1.0"

from .conversation import (
    ConversationController,
    DraftChanged,
    MessagesReplaced,
    SendRequested,
    UiState,
)
from .errors import ConfigurationError, EchoChatError
from .store import InMemoryMessageStore, Message, MessageStore, create_message_store

__all__ = [
    "ConfigurationError",
    "ConversationController",
    "DraftChanged",
    "EchoChatError",
    "InMemoryMessageStore",
    "Message",
    "MessageStore",
    "MessagesReplaced",
    "SendRequested",
    "UiState",
    "create_message_store",
]
