#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/revmark/converters/lists.py
"""Converters for ordered and unordered lists."""

from __future__ import annotations

import logging
from typing import Any

from revmark.constants import LIST_ELEMENTS
from revmark.converters.base import BlockConverterBase
from revmark.formatters.text import TextFormatter
from revmark.utils.dom import has_ancestor

logger = logging.getLogger(__name__)


class ListConverter(BlockConverterBase):
    """Convert ``<ol>``/``<ul>``.

    Pipe tables cannot hold block lists, so a list inside a table is emitted
    as HTML.
    """

    tags = ("ol", "ul")

    def convert(self, node: Any) -> str:
        if has_ancestor(node, "table"):
            logger.debug("Passing <%s> inside a table through as HTML", node.name)
            return str(node)
        return super().convert(node)

    def get_prefix(self, node: Any) -> str:
        return "" if self._is_nested_list(node) else "\n"

    def get_suffix(self, node: Any) -> str:
        return "" if self._is_nested_list(node) else "\n"

    @staticmethod
    def _is_nested_list(node: Any) -> bool:
        parent = node.parent
        return parent is not None and parent.name in LIST_ELEMENTS


class ListItemConverter(BlockConverterBase):
    """Convert ``<li>`` to a marker followed by its indented content.

    Every line after the first is indented by the width of the marker, so
    nested blocks line up under the item text at any depth.
    """

    tags = ("li",)

    def convert(self, node: Any) -> str:
        marker = self.formatter_for(node).get_list_item_prefix(node)
        content = self.get_content(node)
        if not content.strip():
            return marker.rstrip() + "\n"

        first_line, _, rest = content.partition("\n")
        if rest:
            indented = TextFormatter.indent_lines(rest, " " * len(marker), indent_blank_lines=False)
            return f"{marker}{first_line}\n{indented}\n"
        return f"{marker}{first_line}\n"

    def get_content(self, node: Any) -> str:
        content = self.format_block(node, self.treat_children(node))
        return content.strip("\r\n")
