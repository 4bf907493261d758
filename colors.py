"""ANSI color codes for terminal output.

Colors used by the collection plan, progress bar and status lines.
Optimized for dark terminal backgrounds.
"""

from enum import StrEnum


class Color(StrEnum):
    """Active colors used for terminal display."""

    GREEN = "\033[92m"  # Done / success
    CYAN = "\033[96m"  # Progress bar
    YELLOW = "\033[93m"  # Prompt / warning
    BOLD = "\033[1m"  # Headings
    RESET = "\033[0m"  # Reset (don't change)


def colorize(text: str, color: Color, enabled: bool = True) -> str:
    """Wrap text in a color code (no-op when disabled).

    Args:
        text: Text to color
        color: Color to apply
        enabled: False returns text unchanged (e.g. output not a TTY)

    Returns:
        Colored or plain text.
    """
    if not enabled:
        return text
    return f"{color}{text}{Color.RESET}"
