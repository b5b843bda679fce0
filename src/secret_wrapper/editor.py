"""External editor selection and launch.

This module decides which editor to open and runs it attached to the
current terminal, waiting until the user closes it.
"""

import os
import shlex
import subprocess
from pathlib import Path

from icecream import ic

from secret_wrapper.exceptions import EditorError

# Environment variables consulted in priority order
_EDITOR_ENV_VARS = ("EDITOR", "VISUAL")
DEFAULT_EDITOR = "vi"


def select_editor(flag_value: str | None = None) -> str:
    """Determine which editor command to use.

    Priority order: the command-line flag, $EDITOR, $VISUAL, then vi.
    Empty values are skipped.

    Args:
        flag_value: Editor given on the command line, if any.

    Returns:
        The editor command line.

    """
    if flag_value:
        return flag_value

    for var in _EDITOR_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return value

    return DEFAULT_EDITOR


def build_editor_cmd(editor: str, path: Path) -> list[str]:
    """Build the argument list for opening a file in an editor.

    The editor value is split shell-style so commands such as
    ``code --wait`` keep their arguments.

    Args:
        editor: The editor command line.
        path: The file to open.

    Returns:
        List of command arguments ready for subprocess execution.

    Raises:
        EditorError: If the editor value is empty or has unbalanced quotes.

    """
    try:
        args = shlex.split(editor)
    except ValueError as err:
        raise EditorError(f"Cannot parse editor command '{editor}': {err}") from err

    if not args:
        raise EditorError("Editor command is empty")

    return [*args, str(path)]


def launch_editor(editor: str, path: Path) -> None:
    """Open a file in the editor and wait for it to exit.

    The editor inherits stdin, stdout and stderr so it can run
    interactively in the current terminal.

    Args:
        editor: The editor command line.
        path: The file to open.

    Raises:
        EditorError: If the editor cannot be started or exits with an error.

    """
    cmd = build_editor_cmd(editor, path)
    ic(cmd)

    try:
        subprocess.run(cmd, check=True)
    except FileNotFoundError as err:
        raise EditorError(f"Editor '{cmd[0]}' not found; set --editor, $EDITOR or $VISUAL") from err
    except OSError as err:
        raise EditorError(f"Cannot start editor '{cmd[0]}': {err.strerror}") from err
    except subprocess.CalledProcessError as err:
        raise EditorError(f"Editor exited with error (exit code {err.returncode})") from err
