"""Section-scoped value transforms.

This module rewrites the scalar values stored under one top-level key of
a Secret document, leaving every other part of the tree alone.
"""

from collections.abc import Callable

from ruamel.yaml.comments import CommentedMap, CommentedSeq

from secret_wrapper.exceptions import InvalidEncodingError, SecretStructureError
from secret_wrapper.secrets.parsing import YamlNode, find_field, node_kind, scalar_text, set_scalar_text

DATA_SECTION = "data"


def transform_section(
    root: YamlNode,
    transform: Callable[[str], str],
    section_key: str = DATA_SECTION,
) -> int:
    """Apply a transform to every scalar value in a top-level section.

    The section is processed in document order and the first failing value
    aborts the whole run. Nested mappings or sequences inside the section
    are passed through unchanged.

    Args:
        root: The root mapping of the document.
        transform: Function mapping a value's text to its new text.
        section_key: The top-level key holding the section.

    Returns:
        The number of scalar values rewritten. Zero when the section is
        missing, null or empty.

    Raises:
        SecretStructureError: If the section exists but is not a mapping.
        InvalidEncodingError: If the transform rejects a value; the error
            names the key that failed.

    """
    section = find_field(root, section_key)
    if section is None:
        return 0

    if not isinstance(section, CommentedMap):
        raise SecretStructureError(
            f"Expected '{section_key}' to be a mapping, found a {node_kind(section)}"
        )

    rewritten = 0
    for key, value in list(section.items()):
        if isinstance(value, (CommentedMap, CommentedSeq)):
            continue

        try:
            transformed = transform(scalar_text(value))
        except InvalidEncodingError as err:
            raise InvalidEncodingError(str(key), err.reason) from err

        set_scalar_text(section, key, transformed)
        rewritten += 1

    return rewritten
