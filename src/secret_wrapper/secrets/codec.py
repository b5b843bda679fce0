"""Base64 codec for Secret 'data' values."""

import base64
from collections.abc import Callable

from secret_wrapper.exceptions import InvalidEncodingError
from secret_wrapper.models import Direction

# Decoded bytes that are not valid UTF-8 survive as lone surrogates and are
# restored byte-for-byte on encode
_TEXT_ENCODING = "utf-8"
_TEXT_ERRORS = "surrogateescape"


def decode_value(encoded: str, key: str | None = None) -> str:
    """Decode a standard padded base64 value into text.

    Line breaks inside the encoded value are ignored; any other character
    outside the base64 alphabet, or missing padding, is an error.

    Args:
        encoded: The base64 text.
        key: The 'data' key the value belongs to, used in error messages.

    Returns:
        The decoded value as text.

    Raises:
        InvalidEncodingError: If the value is not valid base64.

    """
    compact = encoded.replace("\r", "").replace("\n", "")
    try:
        decoded = base64.b64decode(compact, validate=True)
    except ValueError as err:
        raise InvalidEncodingError(key, str(err)) from err
    return decoded.decode(_TEXT_ENCODING, _TEXT_ERRORS)


def encode_value(plain: str) -> str:
    """Encode text as standard padded base64.

    Args:
        plain: The plaintext value.

    Returns:
        The base64 encoding of the value's UTF-8 bytes.

    """
    return base64.b64encode(plain.encode(_TEXT_ENCODING, _TEXT_ERRORS)).decode("ascii")


def codec_for(direction: Direction) -> Callable[[str], str]:
    """Return the value transform for a pipeline direction.

    Args:
        direction: REVEAL to decode values, CONCEAL to encode them.

    Returns:
        A function mapping one 'data' value to its transformed text.

    """
    match direction:
        case Direction.REVEAL:
            return decode_value
        case Direction.CONCEAL:
            return encode_value
