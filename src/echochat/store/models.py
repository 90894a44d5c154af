"""Data models for the message store.

Defines the immutable chat message record, independent of the store
implementation that assigns its identifiers.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Message(BaseModel):
    """A single chat message.

    Identifiers are assigned by the store at append time and increase
    strictly within one store instance until it is reset.
    """

    id: int = Field(description="Store-assigned identifier, increasing per append")
    text: str = Field(description="Message body; may be empty")
    is_incoming: bool = Field(description="True for simulated replies, False for user messages")
    created_at: datetime = Field(default_factory=_utcnow)

    model_config = ConfigDict(frozen=True)

    @property
    def direction(self) -> str:
        """Human-readable direction ("incoming" or "outgoing")."""
        return "incoming" if self.is_incoming else "outgoing"
