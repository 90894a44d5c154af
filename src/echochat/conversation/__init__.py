"""Conversation module for echochat.

Module structure:
- events.py: User intents (draft changes, send, bulk replacement)
- state.py: UiState projection consumed by the rendering layer
- controller.py: Intent reducer bound to a MessageStore
- config.py: Reply delay and echo prefix defaults
"""

from .config import DEFAULT_REPLY_DELAY, ECHO_PREFIX
from .controller import ConversationController
from .events import ChatEvent, DraftChanged, MessagesReplaced, SendRequested
from .state import UiState

__all__ = [
    "DEFAULT_REPLY_DELAY",
    "ECHO_PREFIX",
    "ChatEvent",
    "ConversationController",
    "DraftChanged",
    "MessagesReplaced",
    "SendRequested",
    "UiState",
]
