"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Single column: chat history on top, optional log panel, input bar docked
at the bottom.
"""

APP_CSS = """
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Chat History - Scrolling Bubble List
   ============================================ */
#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

.message-bubble {
    width: 1fr;
    height: auto;
    margin: 0 0 1 0;
    padding: 0 1;
}

/* Outgoing bubbles sit on the right */
.outgoing {
    margin-left: 16;
    border-right: tall $primary;
    background: $primary 10%;

    & .message-header {
        color: $primary;
        text-style: bold;
        text-align: right;
    }

    & .message-content {
        text-align: right;
    }
}

/* Incoming replies sit on the left */
.incoming {
    margin-right: 16;
    border-left: tall $secondary;
    background: $secondary 10%;

    & .message-header {
        color: $secondary;
        text-style: bold;
    }
}

.message-header {
    height: auto;
}

.message-content {
    height: auto;
    color: $foreground;
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
}

/* ============================================
   Chat Input Bar - Text Entry + Send
   ============================================ */
ChatInputBar {
    dock: bottom;
    height: 5;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }
}

#chat-input {
    width: 1fr;
    border: none;
    background: transparent;
}

#send-btn {
    width: 10;
    margin: 0 0 0 1;
    background: $success;
    color: $background;
    text-style: bold;

    &:disabled {
        background: $surface;
        color: $text-muted;
    }
}

Header {
    background: $panel;
    dock: top;
    height: 1;
}
"""
