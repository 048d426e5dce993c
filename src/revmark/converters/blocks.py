#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/revmark/converters/blocks.py
"""Converters for paragraph-level block elements.

Paragraphs, divs and blockquotes run their composed content through the
formatting rules (see :mod:`revmark.formatters.markdown`), which decide whether
the content may be trimmed and at which width it is wrapped.
"""

from __future__ import annotations

import logging
from typing import Any

from bs4.element import NavigableString, Tag

from revmark.constants import DIV_TRANSPARENT_CHILDREN, HEADING_ELEMENTS, LIST_ELEMENTS, TABLE_CELL_ELEMENTS
from revmark.converters.base import BlockConverterBase
from revmark.exceptions import MalformedListError
from revmark.utils.dom import content_children, has_ancestor, is_block_element, is_first_within_cell

logger = logging.getLogger(__name__)


class ParagraphConverter(BlockConverterBase):
    """Convert ``<p>`` to a trimmed, wrapped paragraph."""

    tags = ("p",)

    def get_prefix(self, node: Any) -> str:
        """Return the paragraph's leading newline(s).

        Raises
        ------
        MalformedListError
            If the paragraph is a direct child of ``<ol>``/``<ul>``

        """
        parent = node.parent
        if parent is not None and parent.name in LIST_ELEMENTS:
            raise MalformedListError()
        if is_first_within_cell(node):
            return ""

        # a paragraph following other content of a list item starts a new block
        if parent is not None and parent.name == "li":
            siblings = content_children(parent)
            if siblings and siblings[0] is not node:
                return "\n\n"
        return "\n"

    def get_content(self, node: Any) -> str:
        return self.format_block(node, self.treat_children(node))


class DivConverter(BlockConverterBase):
    """Convert ``<div>``, collapsing wrappers that only hold one block."""

    tags = ("div",)

    def convert(self, node: Any) -> str:
        children = content_children(node)
        if len(children) == 1 and isinstance(children[0], Tag) and children[0].name in DIV_TRANSPARENT_CHILDREN:
            return self.get_content(node)
        return super().convert(node)

    def get_content(self, node: Any) -> str:
        target = node
        while True:
            children = content_children(target)
            if len(children) == 1 and isinstance(children[0], Tag) and children[0].name == "div":
                target = children[0]
            else:
                break
        return self.format_block(target, self.treat_children(target))


class AsideConverter(BlockConverterBase):
    """Convert ``<aside>`` to its trimmed content."""

    tags = ("aside",)

    def get_content(self, node: Any) -> str:
        return self.treat_children(node).strip()


class BlockquoteConverter(BlockConverterBase):
    """Convert ``<blockquote>`` by prefixing every line with ``"> "``.

    Blank lines inside the quote become a bare ``">"`` so no line ends with
    trailing whitespace.
    """

    tags = ("blockquote",)

    def convert(self, node: Any) -> str:
        content = self.format_block(node, self.treat_children(node)).strip("\r\n")
        if not content.strip():
            return ""

        lines = content.split("\n")
        quoted = "".join(f"> {line}\n" if line.strip() else ">\n" for line in lines)
        return f"\n\n{quoted}\n"


class HeadingConverter(BlockConverterBase):
    """Convert ``<h1>``-``<h6>`` to single-line ATX headings."""

    tags = tuple(sorted(HEADING_ELEMENTS))

    def convert(self, node: Any) -> str:
        level = int(node.name[1])
        content = " ".join(self.treat_children(node).split())
        if not content:
            return ""
        return f"{self.get_prefix(node)}{'#' * level} {content}{self.get_suffix(node)}"


class HorizontalRuleConverter(BlockConverterBase):
    """Convert ``<hr>`` to the configured thematic break."""

    tags = ("hr",)

    def get_content(self, node: Any) -> str:
        return self.options.horizontal_rule


class LineBreakConverter(BlockConverterBase):
    """Convert ``<br>`` to a Markdown hard line break.

    Basic Markdown uses two trailing spaces. GitHub-flavored output uses a
    trailing backslash, which renders literally at the end of a paragraph, so
    it is only emitted when more inline content follows on the same line.
    Inside table cells the newline is turned into ``<br>`` by the cell.
    """

    tags = ("br",)

    def get_prefix(self, node: Any) -> str:
        return ""

    def get_content(self, node: Any) -> str:
        if has_ancestor(node, *TABLE_CELL_ELEMENTS):
            return ""
        if not self.options.github_flavored:
            return "  "
        return "\\" if self.has_trailing_content(node) else ""

    def get_suffix(self, node: Any) -> str:
        return "\n"

    @staticmethod
    def has_trailing_content(node: Any) -> bool:
        """Return True if visible inline content follows ``node`` on the same logical line.

        A ``<br>`` directly followed by another ``<br>`` takes that break's
        answer. The search continues past the end of inline parents and stops
        at the first block boundary.
        """
        current = node
        while current is not None:
            sibling = current.next_sibling
            while sibling is not None:
                if isinstance(sibling, Tag):
                    if sibling.name == "br":
                        # resolve through the following break
                        current = sibling
                        break
                    if is_block_element(sibling):
                        return False
                    if sibling.name == "img" or sibling.get_text().strip() or sibling.find("img") is not None:
                        return True
                elif type(sibling) is NavigableString and str(sibling).strip():
                    return True
                sibling = sibling.next_sibling
            else:
                parent = current.parent
                if parent is None or parent.name in ("[document]", "html", "body") or is_block_element(parent):
                    return False
                current = parent
        return False
