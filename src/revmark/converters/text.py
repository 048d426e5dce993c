#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/revmark/converters/text.py
"""Converters for text and comment nodes."""

from __future__ import annotations

from typing import Any

from revmark.constants import LIST_ELEMENTS
from revmark.converters.base import ConverterBase
from revmark.utils.dom import has_ancestor
from revmark.utils.escape import encode_angle_brackets, escape_link_text, escape_text


class TextConverter(ConverterBase):
    """Emit escaped text content.

    Whitespace-only text is significant only as a single separating space; it
    is dropped entirely directly under a list. Square brackets are escaped
    inside links so the text cannot close the link early.
    """

    def convert(self, node: Any) -> str:
        text = str(node)
        if not text.strip():
            return self._treat_empty(node, text)

        text = escape_text(encode_angle_brackets(text), self.options.escape_rules)
        if has_ancestor(node, "a"):
            text = escape_link_text(text)
        return text

    @staticmethod
    def _treat_empty(node: Any, text: str) -> str:
        parent = node.parent
        if parent is not None and parent.name in LIST_ELEMENTS:
            return ""
        if text == " ":
            return " "
        return ""


class CommentConverter(ConverterBase):
    """Emit HTML comments verbatim unless ``remove_comments`` is set."""

    def convert(self, node: Any) -> str:
        if self.options.remove_comments:
            return ""
        return f"<!--{node}-->"
