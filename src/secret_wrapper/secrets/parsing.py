"""Secret document parsing and serialization.

This module turns raw manifest text into a ruamel.yaml round-trip tree and
back. The round-trip loader keeps mapping key order, comments, quoting and
flow or block layout, so a document can be rewritten in one place without
reformatting the rest of it.
"""

import io
import sys

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq
from ruamel.yaml.error import YAMLError
from ruamel.yaml.scalarstring import LiteralScalarString

from secret_wrapper.exceptions import EmptyInputError, SecretParsingError
from secret_wrapper.models import ScalarStyle

YamlScalar = str | int | float | bool | None
YamlNode = CommentedMap | CommentedSeq | YamlScalar

# Sequences nested in mappings are indented by two, as kubectl and
# yaml.v3 encoders write them
_MAPPING_INDENT = 2
_SEQUENCE_INDENT = 4
_SEQUENCE_DASH_OFFSET = 2
# No line folding for long plain scalars
_WIDTH = sys.maxsize


def _round_trip_yaml() -> YAML:
    """Build a round-trip YAML instance with the document layout settings."""
    yaml = YAML(typ="rt")
    yaml.preserve_quotes = True
    yaml.width = _WIDTH
    yaml.indent(mapping=_MAPPING_INDENT, sequence=_SEQUENCE_INDENT, offset=_SEQUENCE_DASH_OFFSET)
    return yaml


def parse_document(raw: bytes | str) -> YamlNode:
    """Parse a single YAML document into a round-trip tree.

    Args:
        raw: The manifest content, as UTF-8 bytes or text.

    Returns:
        The root of the document: a CommentedMap, a CommentedSeq or a scalar.

    Raises:
        EmptyInputError: If the input is empty.
        SecretParsingError: If the input is malformed YAML, holds more than
            one document, or holds no document at all.

    """
    if not raw:
        raise EmptyInputError("Input is empty")

    try:
        root = _round_trip_yaml().load(raw)
    except YAMLError as err:
        raise SecretParsingError(f"Failed to parse YAML: {err}") from err

    if root is None:
        raise SecretParsingError("Input does not contain a YAML document")

    return root


def serialize_document(root: YamlNode) -> str:
    """Render a round-trip tree back into YAML text.

    Uses two-space indentation and keeps the comments, quoting and
    collection styles recorded on the tree. The same tree always renders
    to the same text.

    Args:
        root: The root of the document.

    Returns:
        The YAML text, terminated by a newline.

    """
    stream = io.StringIO()
    _round_trip_yaml().dump(root, stream)
    return stream.getvalue()


def node_kind(node: YamlNode) -> str:
    """Name the YAML node kind of a tree value: mapping, sequence or scalar."""
    if isinstance(node, CommentedMap):
        return "mapping"
    if isinstance(node, CommentedSeq):
        return "sequence"
    return "scalar"


def find_field(node: YamlNode, key: str) -> YamlNode:
    """Find the value stored under a key in a mapping.

    Args:
        node: The tree value to search.
        key: The key to look up.

    Returns:
        The value for the key, or None if the node is not a mapping, the
        key is missing or its value is null.

    """
    if not isinstance(node, CommentedMap):
        return None

    return node.get(key)


def scalar_text(value: YamlScalar) -> str:
    """Return the text of a scalar as it reads in the document."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def scalar_style(value: YamlScalar) -> ScalarStyle:
    """Return the rendering style recorded on a scalar."""
    return ScalarStyle.LITERAL if isinstance(value, LiteralScalarString) else ScalarStyle.PLAIN


def set_scalar_text(mapping: CommentedMap, key: object, text: str) -> None:
    """Replace the scalar stored under a key and restyle it for the new text.

    Multi-line text is written as a literal block, anything else as a
    plain string that the emitter quotes when it would otherwise read as
    another type. Comments attached to the key are kept.

    Args:
        mapping: The mapping holding the scalar.
        key: The key of the scalar to rewrite.
        text: The new text.

    """
    if ScalarStyle.for_text(text) is ScalarStyle.LITERAL:
        mapping[key] = LiteralScalarString(text)
    else:
        mapping[key] = str(text)
