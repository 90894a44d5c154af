"""Provider functions for CLI.

Centralizes creation of the message store and reading of configuration
from environment variables. Hides configuration details from command
implementations.
"""

import os

from ..conversation import DEFAULT_REPLY_DELAY
from ..errors import ConfigurationError
from ..store import MessageStore, create_message_store
from ..ui.config import LogLevel


def get_reply_delay(override: float | None = None) -> float:
    """Resolve the reply delay in seconds.

    Args:
        override: Value from the command line; wins over the environment

    Returns:
        Non-negative delay in seconds

    Raises:
        ConfigurationError: If the value is not a number or is negative

    Environment variables:
        ECHOCHAT_REPLY_DELAY: Reply delay in seconds (default: 5.0)
    """
    if override is not None:
        value = override
    else:
        raw = os.getenv("ECHOCHAT_REPLY_DELAY")
        if raw is None or not raw.strip():
            return DEFAULT_REPLY_DELAY
        try:
            value = float(raw)
        except ValueError:
            raise ConfigurationError(
                f"reply delay must be a number, got {raw!r}",
                setting="ECHOCHAT_REPLY_DELAY",
            ) from None

    if value < 0:
        raise ConfigurationError(
            f"reply delay must be non-negative, got {value}",
            setting="ECHOCHAT_REPLY_DELAY",
        )
    return value


def get_store() -> MessageStore:
    """Create the message store.

    Environment variables:
        ECHOCHAT_STORE_BACKEND: Store backend (default: memory)
    """
    return create_message_store(os.getenv("ECHOCHAT_STORE_BACKEND", "memory"))


def get_log_level(override: str | None = None) -> str | None:
    """Resolve the TUI log panel level, or None to keep the panel hidden.

    Raises:
        ConfigurationError: If the level name is unknown

    Environment variables:
        ECHOCHAT_LOG_LEVEL: debug, info, warning or error (default: hidden)
    """
    level = override if override is not None else os.getenv("ECHOCHAT_LOG_LEVEL")
    if not level:
        return None
    if not LogLevel.is_valid(level):
        raise ConfigurationError(
            f"unknown log level {level!r} (expected debug, info, warning or error)",
            setting="ECHOCHAT_LOG_LEVEL",
        )
    return level.lower()
