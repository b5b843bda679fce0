"""Kubernetes Secret validation.

This module checks that a parsed document is a Secret before any of its
values are touched.
"""

from ruamel.yaml.comments import CommentedMap

from secret_wrapper.exceptions import (
    MissingKindError,
    NotAMappingError,
    SecretWrapperError,
    WrongKindError,
)
from secret_wrapper.secrets.parsing import YamlNode, node_kind, parse_document

_KIND_FIELD = "kind"
_SECRET_KIND = "Secret"


def validate_secret(root: YamlNode) -> None:
    """Check that a document root describes a Kubernetes Secret.

    Args:
        root: The root of the parsed document.

    Raises:
        NotAMappingError: If the root is not a mapping.
        MissingKindError: If the root has no 'kind' field.
        WrongKindError: If 'kind' is anything other than 'Secret'.

    """
    if not isinstance(root, CommentedMap):
        raise NotAMappingError("Expected a YAML mapping at the document root")

    if _KIND_FIELD not in root:
        raise MissingKindError("Document has no 'kind' field; expected a Kubernetes Secret")

    kind = root[_KIND_FIELD]
    if not isinstance(kind, str) or kind != _SECRET_KIND:
        found = kind if node_kind(kind) == "scalar" else node_kind(kind)
        raise WrongKindError(f"Not a Secret resource (kind: {found})")


def is_secret(raw: bytes | str) -> bool:
    """Tell whether raw manifest content is a Kubernetes Secret.

    Args:
        raw: The manifest content.

    Returns:
        True if the content parses and passes validation, False otherwise.

    """
    try:
        validate_secret(parse_document(raw))
    except SecretWrapperError:
        return False
    return True
