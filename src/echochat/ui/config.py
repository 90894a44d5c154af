"""UI configuration constants.

Centralizes magic numbers and configuration values for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Lower numeric value = more verbose (shows more messages).
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)

    @classmethod
    def is_valid(cls, level_str: str) -> bool:
        return level_str.lower() in cls._from_string


# Message bubble timestamps, e.g. "03:15 PM"
MESSAGE_TIME_FORMAT = "%I:%M %p"

# Debug panel timestamps
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"

# Input placeholder
INPUT_PLACEHOLDER = "Type a message"

# Bubble headers
OUTGOING_LABEL = "You"
INCOMING_LABEL = "Echo"
