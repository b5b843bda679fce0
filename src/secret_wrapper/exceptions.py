"""Custom exceptions for secret-wrapper-k8s.

This module defines the exception hierarchy used throughout the application
to classify why a Secret could not be revealed, concealed or edited.
"""


class SecretWrapperError(Exception):
    """Base exception for all secret-wrapper-k8s errors.

    All custom exceptions in this package inherit from this class,
    allowing callers to catch every classified failure with a single
    except clause if desired.
    """

    pass


class SecretParsingError(SecretWrapperError):
    """Raised when the input is not a usable YAML document.

    This can occur when:
    - The input is not valid YAML (or not valid UTF-8)
    - The input contains more than one YAML document
    - The input contains only whitespace or comments
    """

    pass


class EmptyInputError(SecretParsingError):
    """Raised when the input is empty.

    There is no meaningful empty Secret, so zero-length input is always
    rejected before any parsing happens.
    """

    pass


class SecretValidationError(SecretWrapperError):
    """Raised when a parsed document is not a Kubernetes Secret.

    Subclasses identify which part of the check failed.
    """

    pass


class NotAMappingError(SecretValidationError):
    """Raised when the document root is not a YAML mapping."""

    pass


class MissingKindError(SecretValidationError):
    """Raised when the root mapping has no 'kind' field."""

    pass


class WrongKindError(SecretValidationError):
    """Raised when 'kind' is present but is not 'Secret'."""

    pass


class SecretStructureError(SecretWrapperError):
    """Raised when the 'data' section exists but is not a mapping.

    A sequence or scalar under 'data' is rejected instead of being
    skipped, so a malformed manifest is never written back silently.
    """

    pass


class InvalidEncodingError(SecretWrapperError):
    """Raised when a value in the 'data' section is not valid base64.

    Attributes:
        key: The 'data' key whose value failed to decode, if known.
        reason: Description of the underlying decoding failure.

    """

    def __init__(self, key: str | None, reason: str) -> None:
        """Initialize with the offending key and the decoding failure.

        Args:
            key: The 'data' key whose value failed to decode, or None when
                the codec is used outside of a section transform.
            reason: Description of the underlying decoding failure.

        """
        self.key = key
        self.reason = reason
        if key is None:
            message = f"Invalid base64 value: {reason}"
        else:
            message = f"Invalid base64 value for key '{key}': {reason}"
        super().__init__(message)


class EditorError(SecretWrapperError):
    """Raised when the external editor cannot be used.

    This can occur when:
    - The editor executable is not installed or not in PATH
    - The editor command line cannot be split into arguments
    - The editor exits with a non-zero status
    """

    pass
