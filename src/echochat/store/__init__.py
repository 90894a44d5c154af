"""Message store module for echochat.

Owns the ordered conversation log and the identifier counter.
"""

from .base import MessageStore
from .factory import create_message_store
from .in_memory import InMemoryMessageStore
from .models import Message
from .observable import ObservableValue, Subscription

__all__ = [
    "InMemoryMessageStore",
    "Message",
    "MessageStore",
    "ObservableValue",
    "Subscription",
    "create_message_store",
]
