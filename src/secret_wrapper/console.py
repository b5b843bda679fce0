"""Rich console utilities for styled terminal output.

This module provides a consistent interface for all CLI output using
the Rich library. Messages go to stderr so the tool never mixes its
own chatter with anything an editor writes to stdout.
"""

from rich.console import Console
from rich.theme import Theme

# Custom theme with consistent colors
_STYLES = {
    "info": "cyan",
    "success": "green",
    "error": "red bold",
    "highlight": "cyan bold",
}
_THEME = Theme(_STYLES)

# Shared console instance
console = Console(theme=_THEME, stderr=True)


def info(message: str) -> None:
    """Print an informational message.

    Args:
        message: The message to display.

    """
    console.print(f"[info]ℹ[/info] {message}")


def success(message: str) -> None:
    """Print a success message.

    Args:
        message: The message to display.

    """
    console.print(f"[success]✓[/success] {message}")


def error(message: str) -> None:
    """Print an error message.

    Args:
        message: The message to display.

    """
    console.print(f"[error]✗[/error] {message}")


def action(message: str) -> None:
    """Print an action/progress message."""
    console.print(f"[info]→[/info] {message}")


def highlight(text: str) -> str:
    """Return text wrapped in highlight markup.

    Args:
        text: The text to highlight.

    Returns:
        Text wrapped in Rich markup for highlighting.

    """
    return f"[highlight]{text}[/highlight]"
