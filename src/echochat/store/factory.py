"""Factory for creating message stores."""

from typing import Any

from ..errors import ConfigurationError
from .base import MessageStore


def create_message_store(
    backend: str = "memory",
    **kwargs: Any
) -> MessageStore:
    """Create a message store.

    Args:
        backend: Backend type (only "memory" is available)
        **kwargs: Backend-specific configuration

    Returns:
        MessageStore instance

    Raises:
        ConfigurationError: If backend type is not supported
    """
    if backend == "memory":
        from .in_memory import InMemoryMessageStore
        return InMemoryMessageStore(**kwargs)

    raise ConfigurationError(
        f"Unsupported store backend: {backend}. Supported backends: memory",
        setting="ECHOCHAT_STORE_BACKEND",
    )
