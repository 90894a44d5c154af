"""Theme definitions for the TUI.

Color palette and theme variables. To add a new theme, define it here and
register it in the app.
"""

from textual.theme import Theme

# Dark slate with a teal accent for outgoing bubbles and amber for replies
ECHO_DARK = Theme(
    name="echo-dark",
    primary="#4fd1c5",      # Teal - outgoing messages, focus
    secondary="#f6ad55",    # Amber - incoming replies
    accent="#90cdf4",       # Sky - highlights
    foreground="#e2e8f0",
    background="#0f141a",
    success="#68d391",
    warning="#f6e05e",
    error="#fc8181",
    surface="#1a202c",
    panel="#141a21",
    dark=True,
    variables={
        "border": "#2d3748",
        "border-blurred": "#1f2733",
        "input-cursor-background": "#e2e8f0",
        "input-cursor-foreground": "#0f141a",
        "input-selection-background": "#4fd1c5 30%",
        "scrollbar": "#2d3748",
        "scrollbar-hover": "#4a5568",
        "scrollbar-active": "#4fd1c5",
        "scrollbar-background": "#141a21",
        "footer-key-foreground": "#f6ad55",
        "footer-background": "#0f141a",
        "text-muted": "#718096",
    },
)
