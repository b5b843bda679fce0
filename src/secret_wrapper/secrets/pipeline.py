"""Reveal and conceal pipelines.

Both pipelines take the raw bytes of a Secret manifest and return new raw
bytes: parse, validate, transform the 'data' section, serialize. Any
stage failure is raised to the caller and nothing is returned.
"""

from secret_wrapper.models import Direction
from secret_wrapper.secrets.codec import codec_for
from secret_wrapper.secrets.parsing import parse_document, serialize_document
from secret_wrapper.secrets.transform import DATA_SECTION, transform_section
from secret_wrapper.secrets.validation import validate_secret


def run_pipeline(raw: bytes, direction: Direction) -> bytes:
    """Transform the 'data' section of a Secret manifest.

    Args:
        raw: The manifest content as UTF-8 bytes.
        direction: REVEAL to base64-decode values, CONCEAL to encode them.

    Returns:
        The rewritten manifest as UTF-8 bytes.

    Raises:
        SecretParsingError: If the input is empty or not valid YAML.
        SecretValidationError: If the document is not a Secret.
        SecretStructureError: If 'data' is not a mapping.
        InvalidEncodingError: If a value cannot be decoded (REVEAL only).

    """
    root = parse_document(raw)
    validate_secret(root)

    transform_section(root, codec_for(direction), section_key=DATA_SECTION)

    return serialize_document(root).encode("utf-8")


def reveal(raw: bytes) -> bytes:
    """Decode every base64 value in the 'data' section for editing.

    Args:
        raw: The manifest content as UTF-8 bytes.

    Returns:
        The manifest with plaintext 'data' values; multi-line values are
        rendered as literal blocks.

    """
    return run_pipeline(raw, Direction.REVEAL)


def conceal(raw: bytes) -> bytes:
    """Encode every plaintext value in the 'data' section for storage.

    Args:
        raw: The manifest content as UTF-8 bytes.

    Returns:
        The manifest with padded base64 'data' values.

    """
    return run_pipeline(raw, Direction.CONCEAL)
