"""Data models for secret-wrapper-k8s.

This module provides the small enums shared by the document model,
the codec and the pipelines.
"""

from enum import Enum


class ScalarStyle(str, Enum):
    """Rendering style for a scalar in the 'data' section.

    The values are the YAML block indicators, so LITERAL reads as '|'.
    """

    PLAIN = ""
    LITERAL = "|"

    @classmethod
    def for_text(cls, text: str) -> "ScalarStyle":
        """Pick the style for a scalar's new text.

        Args:
            text: The scalar text about to be written.

        Returns:
            LITERAL if the text spans several lines, PLAIN otherwise.

        """
        return cls.LITERAL if "\n" in text else cls.PLAIN


class Direction(str, Enum):
    """Direction of a pipeline run over the 'data' section."""

    REVEAL = "reveal"
    CONCEAL = "conceal"
