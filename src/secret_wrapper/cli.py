#!/usr/bin/env python
"""Command-line interface for secret-wrapper-k8s.

This module provides the `swk` entry point: it decodes a Secret manifest
into a temporary file, opens it in an editor and encodes the result back
into the original file.
"""

import sys

import click
from icecream import ic
from rich.markup import escape

from secret_wrapper import __version__, console
from secret_wrapper.editor import launch_editor, select_editor
from secret_wrapper.exceptions import SecretWrapperError
from secret_wrapper.prompts import confirm_reopen_editor
from secret_wrapper.session import EditSession


def edit_secret(file: str, editor: str) -> None:
    """Edit a Secret manifest with its 'data' values decoded.

    If the edited copy cannot be encoded, the user may re-open the editor
    on the same copy; otherwise the original file is left untouched.

    Args:
        file: Path to the Secret manifest.
        editor: The editor command line.

    Raises:
        click.ClickException: If the user gives up after a failed save.
        SecretWrapperError: If the manifest cannot be decoded or the
            editor fails.

    """
    with EditSession(file) as session:
        session.prepare()
        console.action(f"Editing {console.highlight(escape(file))} with {console.highlight(escape(editor))}")

        while True:
            launch_editor(editor, session.temp_path)
            try:
                changed = session.finalize()
            except SecretWrapperError as e:
                console.error(escape(str(e)))
                if confirm_reopen_editor():
                    continue
                raise click.ClickException(f"Edit aborted; '{file}' was not modified") from None
            break

    ic(changed)
    if changed:
        console.success(f"Saved {console.highlight(escape(file))}")
    else:
        console.info("Edit cancelled, no changes made")


@click.command(help="Edit a Kubernetes Secret with its data values base64-decoded")
@click.argument("file", required=False, type=click.Path(dir_okay=False))
@click.option("--editor", "-e", required=False, help="editor to use (overrides $EDITOR and $VISUAL)")
@click.option("--version", "-v", required=False, is_flag=True, help="print version")
@click.option("--debug", required=False, is_flag=True, help="print debug information")
def cli(
    file: str | None,
    editor: str | None,
    version: bool,
    debug: bool,
) -> None:
    """Process CLI arguments and run the edit session.

    Args:
        file: Path to the Secret manifest to edit.
        editor: Editor command overriding $EDITOR and $VISUAL.
        version: Print version and exit.
        debug: Enable debug output.

    """
    if not debug:
        ic.disable()

    if version:
        click.echo(__version__)
        return

    if file is None:
        raise click.UsageError("Missing argument 'FILE'.")

    try:
        edit_secret(file=file, editor=select_editor(editor))
    except SecretWrapperError as e:
        console.error(escape(str(e)))
        sys.exit(1)


if __name__ == "__main__":
    cli()
