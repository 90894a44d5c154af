"""Conversation configuration constants."""

# Seconds between a send and the simulated reply
DEFAULT_REPLY_DELAY = 5.0

# Prepended to the trimmed user text to form the reply body
ECHO_PREFIX = "Echo: "
