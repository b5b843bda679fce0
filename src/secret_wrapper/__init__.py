"""secret-wrapper-k8s: edit Kubernetes Secrets in plaintext.

This package decodes the base64 'data' section of a Secret manifest for
editing and encodes it again afterwards, leaving the rest of the document
as it was.

Example usage:
    from secret_wrapper import conceal, reveal

    # Decode the data section of a manifest
    plaintext = reveal(manifest_bytes)

    # Encode it again for storage
    manifest_bytes = conceal(plaintext)
"""

__version__ = "0.3.0"

from secret_wrapper.exceptions import (
    EditorError,
    EmptyInputError,
    InvalidEncodingError,
    MissingKindError,
    NotAMappingError,
    SecretParsingError,
    SecretStructureError,
    SecretValidationError,
    SecretWrapperError,
    WrongKindError,
)
from secret_wrapper.secrets.pipeline import conceal, reveal
from secret_wrapper.secrets.validation import is_secret

__all__ = [
    # Version
    "__version__",
    # Pipelines
    "reveal",
    "conceal",
    "is_secret",
    # Exceptions
    "SecretWrapperError",
    "SecretParsingError",
    "EmptyInputError",
    "SecretValidationError",
    "NotAMappingError",
    "MissingKindError",
    "WrongKindError",
    "SecretStructureError",
    "InvalidEncodingError",
    "EditorError",
]
