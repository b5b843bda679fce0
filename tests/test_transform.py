"""Tests for the section transform."""

import pytest
from ruamel.yaml.comments import CommentedMap, CommentedSeq

from secret_wrapper.exceptions import InvalidEncodingError, SecretStructureError
from secret_wrapper.models import ScalarStyle
from secret_wrapper.secrets.codec import decode_value, encode_value
from secret_wrapper.secrets.parsing import YamlNode, find_field, parse_document, scalar_style, serialize_document
from secret_wrapper.secrets.transform import transform_section


def _data_values(root: YamlNode) -> dict[str, str]:
    """Collect the scalar values of the data section."""
    data = find_field(root, "data")
    return {key: value for key, value in data.items() if not isinstance(value, (CommentedMap, CommentedSeq))}


class TestTransformSection:
    """Tests for transform_section."""

    def test_transforms_every_scalar(self, sample_secret_yaml):
        """Test each data value is decoded in place."""
        root = parse_document(sample_secret_yaml)

        rewritten = transform_section(root, decode_value)

        assert rewritten == 2
        assert _data_values(root) == {"username": "admin", "password": "password123"}

    def test_preserves_key_order(self):
        """Test data keys keep their order."""
        root = parse_document(b"kind: Secret\ndata:\n  z: YQ==\n  a: Yg==\n  m: Yw==\n")

        transform_section(root, decode_value)

        assert list(_data_values(root)) == ["z", "a", "m"]

    def test_missing_section_is_noop(self):
        """Test a document without data is left alone."""
        root = parse_document(b"kind: Secret\nstringData:\n  plain: text\n")

        assert transform_section(root, decode_value) == 0
        assert find_field(find_field(root, "stringData"), "plain") == "text"

    def test_null_section_is_noop(self):
        """Test a data key without a value is left alone."""
        root = parse_document(b"kind: Secret\ndata:\n")

        assert transform_section(root, decode_value) == 0
        assert serialize_document(root) == "kind: Secret\ndata:\n"

    def test_empty_section(self):
        """Test an empty data mapping stays an empty mapping."""
        root = parse_document(b"kind: Secret\ndata: {}\n")

        assert transform_section(root, decode_value) == 0
        assert isinstance(find_field(root, "data"), CommentedMap)

    def test_sequence_section_is_rejected(self):
        """Test a data sequence raises a structure error."""
        root = parse_document(b"kind: Secret\ndata:\n  - YWRtaW4=\n")

        with pytest.raises(SecretStructureError, match="sequence"):
            transform_section(root, decode_value)

    def test_scalar_section_is_rejected(self):
        """Test a scalar data value raises a structure error."""
        root = parse_document(b"kind: Secret\ndata: YWRtaW4=\n")

        with pytest.raises(SecretStructureError, match="scalar"):
            transform_section(root, decode_value)

    def test_nested_values_pass_through(self):
        """Test nested collections under data are not touched."""
        root = parse_document(b"kind: Secret\ndata:\n  flat: YWRtaW4=\n  nested:\n    inner: YWRtaW4=\n")

        assert transform_section(root, decode_value) == 1

        nested = find_field(find_field(root, "data"), "nested")
        assert find_field(nested, "inner") == "YWRtaW4="

    def test_sibling_section_is_not_visited(self, mixed_secret_yaml):
        """Test stringData values are never transformed."""
        root = parse_document(mixed_secret_yaml)

        transform_section(root, decode_value)

        string_data = find_field(root, "stringData")
        assert find_field(string_data, "looks_encoded") == "c2VjcmV0"

    def test_custom_section_key(self):
        """Test another top-level section can be targeted."""
        root = parse_document(b"kind: Secret\nbinaryData:\n  key: admin\n")

        transform_section(root, encode_value, section_key="binaryData")

        assert find_field(find_field(root, "binaryData"), "key") == "YWRtaW4="

    def test_invalid_value_names_key(self):
        """Test a decoding failure reports the offending key."""
        root = parse_document(b"kind: Secret\ndata:\n  good: YWRtaW4=\n  bad: not-valid-base64!!!\n")

        with pytest.raises(InvalidEncodingError) as exc_info:
            transform_section(root, decode_value)

        assert exc_info.value.key == "bad"

    def test_stops_at_first_invalid_value(self):
        """Test values after the failing key are not transformed."""
        root = parse_document(b"kind: Secret\ndata:\n  bad: '!!!'\n  later: YWRtaW4=\n")

        with pytest.raises(InvalidEncodingError):
            transform_section(root, decode_value)

        assert _data_values(root)["later"] == "YWRtaW4="

    def test_multiline_result_uses_literal_style(self, multiline_secret_yaml):
        """Test multi-line results are marked as literal blocks."""
        root = parse_document(multiline_secret_yaml)

        transform_section(root, decode_value)

        assert scalar_style(find_field(find_field(root, "data"), "multiline")) is ScalarStyle.LITERAL

    def test_single_line_result_uses_plain_style(self):
        """Test encoded values drop a literal block style."""
        root = parse_document(b"kind: Secret\ndata:\n  config: |\n    line1\n    line2\n")

        transform_section(root, encode_value)

        value = find_field(find_field(root, "data"), "config")
        assert scalar_style(value) is ScalarStyle.PLAIN
        assert value == "bGluZTEKbGluZTIK"
