"""UI-facing state produced by the ConversationController."""

from dataclasses import dataclass

from ..store.models import Message


@dataclass(frozen=True)
class UiState:
    """Projection of store and input state consumed by the rendering layer.

    Always replaced as a whole; never merged with stale data.
    """

    messages: tuple[Message, ...] = ()
    draft_text: str = ""
    is_sending: bool = False
