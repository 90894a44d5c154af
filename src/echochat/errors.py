"""Exception hierarchy for echochat.

The conversation core itself has no failure paths. These errors cover the
configuration surface around it (reply delay, store backend selection).
"""


class EchoChatError(Exception):
    """Base class for echochat errors."""


class ConfigurationError(EchoChatError, ValueError):
    """Invalid configuration value (bad delay, unknown backend, ...)."""

    def __init__(self, message: str, setting: str | None = None):
        msg = f"Invalid configuration: {message}"
        if setting:
            msg += f" (setting: {setting})"
        super().__init__(msg)
        self.setting = setting
