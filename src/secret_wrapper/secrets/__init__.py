"""Secret transform subpackage.

This package contains the document model, validation, codec, section
transform and the reveal/conceal pipelines built on top of them.
"""

from secret_wrapper.secrets.codec import decode_value, encode_value
from secret_wrapper.secrets.parsing import find_field, node_kind, parse_document, serialize_document
from secret_wrapper.secrets.pipeline import conceal, reveal, run_pipeline
from secret_wrapper.secrets.transform import transform_section
from secret_wrapper.secrets.validation import is_secret, validate_secret

__all__ = [
    # parsing
    "parse_document",
    "serialize_document",
    "find_field",
    "node_kind",
    # validation
    "validate_secret",
    "is_secret",
    # codec
    "decode_value",
    "encode_value",
    # transform
    "transform_section",
    # pipeline
    "reveal",
    "conceal",
    "run_pipeline",
]
