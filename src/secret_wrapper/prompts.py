"""Interactive user prompts.

This module provides the confirmation asked when an edited Secret cannot
be encoded and written back.
"""

import questionary
from questionary import Style

# ANSI 256 palette shared by all prompts
PROMPT_STYLE = Style(
    [
        ("qmark", "fg:#af87ff bold"),
        ("question", "bold"),
        ("answer", "fg:#ff87d7 bold"),
        ("instruction", "fg:#6c6c6c italic"),
    ]
)

QMARK = "? "


def confirm_reopen_editor() -> bool:
    """Ask whether to re-open the editor after a failed save.

    Returns:
        True if the user wants to fix the file, False to give up.

    """
    return bool(
        questionary.confirm(
            "Re-open the editor to fix it?",
            default=True,
            style=PROMPT_STYLE,
            qmark=QMARK,
        ).unsafe_ask()
    )
