"""User intents consumed by the ConversationController."""

from collections.abc import Sequence
from dataclasses import dataclass

from ..store.models import Message


@dataclass(frozen=True)
class DraftChanged:
    """The input text changed."""

    text: str


@dataclass(frozen=True)
class SendRequested:
    """The user asked to send the current draft."""


@dataclass(frozen=True)
class MessagesReplaced:
    """Bulk replacement of the displayed messages."""

    messages: Sequence[Message]


ChatEvent = DraftChanged | SendRequested | MessagesReplaced
