"""Terminal UI module for echochat.

Provides a Textual-based TUI bound to a ConversationController.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (bubble list, input bar, log panel)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette and theme configuration
- config.py: Log levels and display constants
- app.py: Application orchestration (state rendering, intent forwarding)
"""

from .app import EchoChatApp, run_textual_tui
from .config import LogLevel
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "EchoChatApp",
    "LogLevel",
    "run_textual_tui",
]
