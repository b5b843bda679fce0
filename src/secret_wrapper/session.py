"""Edit session for a Secret manifest.

This module provides the EditSession class which owns the temporary
plaintext copy of a Secret while it is open in an editor.
"""

import contextlib
from pathlib import Path
from tempfile import NamedTemporaryFile

import click
from icecream import ic

from secret_wrapper.secrets.pipeline import conceal, reveal

_TEMP_PREFIX = "swk-"
_TEMP_SUFFIX = ".yaml"

# Error message constants
_ERR_READ = "Cannot read '{path}': {reason}"
_ERR_WRITE = "Cannot write '{path}': {reason}"


class EditSession:
    """Temporary plaintext copy of a Secret manifest.

    The decoded manifest is written to a private temporary file that an
    editor can open; finalizing encodes the edited copy and writes it back
    over the original file. The temporary file is removed when the session
    is closed, whatever the outcome.

    Attributes:
        secret_path: Path to the Secret manifest being edited.
        temp_path: Path to the temporary plaintext copy.

    """

    def __init__(self, secret_path: str | Path) -> None:
        """Initialize the session and create its temporary file.

        Args:
            secret_path: Path to the Secret manifest to edit.

        """
        self.secret_path: Path = Path(secret_path)
        self._revealed: bytes = b""

        # Created with owner-only permissions; closed right away so the
        # editor can reopen it on every platform
        temp_file = NamedTemporaryFile(prefix=_TEMP_PREFIX, suffix=_TEMP_SUFFIX, delete=False)
        self.temp_path: Path = Path(temp_file.name)
        temp_file.close()
        ic(self.temp_path)

    def __enter__(self) -> "EditSession":
        """Enter context manager.

        Returns:
            The EditSession instance.

        """
        return self

    def __exit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        """Exit context manager and remove the temporary file."""
        self.close()

    def __del__(self) -> None:
        """Ensure temp file cleanup if context manager wasn't used."""
        self.close()

    def __repr__(self) -> str:
        """Return a detailed string representation for debugging."""
        return f"EditSession(secret_path={self.secret_path!r}, temp_path={self.temp_path!r})"

    def close(self) -> None:
        """Remove the temporary file if it exists."""
        if hasattr(self, "temp_path"):
            with contextlib.suppress(OSError):
                self.temp_path.unlink(missing_ok=True)

    def prepare(self) -> None:
        """Decode the Secret into the temporary file.

        Raises:
            click.ClickException: If the manifest or temp file cannot be accessed.
            SecretWrapperError: If the manifest cannot be revealed.

        """
        try:
            raw = self.secret_path.read_bytes()
        except OSError as err:
            raise click.ClickException(_ERR_READ.format(path=self.secret_path, reason=err.strerror)) from err

        self._revealed = reveal(raw)

        try:
            self.temp_path.write_bytes(self._revealed)
        except OSError as err:
            raise click.ClickException(_ERR_WRITE.format(path=self.temp_path, reason=err.strerror)) from err

    def finalize(self) -> bool:
        """Encode the edited copy and write it over the original manifest.

        The original file is only written when the edited copy differs from
        what was handed to the editor and encodes successfully.

        Returns:
            True if the manifest was rewritten, False if nothing changed.

        Raises:
            click.ClickException: If a file cannot be read or written.
            SecretWrapperError: If the edited copy cannot be concealed.

        """
        try:
            edited = self.temp_path.read_bytes()
        except OSError as err:
            raise click.ClickException(_ERR_READ.format(path=self.temp_path, reason=err.strerror)) from err

        if edited == self._revealed:
            return False

        encoded = conceal(edited)

        try:
            self.secret_path.write_bytes(encoded)
        except OSError as err:
            raise click.ClickException(_ERR_WRITE.format(path=self.secret_path, reason=err.strerror)) from err

        return True
