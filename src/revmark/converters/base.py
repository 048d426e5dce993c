#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/revmark/converters/base.py
"""Base classes shared by all element converters.

A converter turns one node into Markdown by composing a prefix, the content
and a suffix. Content defaults to the concatenation of the converted children,
obtained by calling back into the owning :class:`~revmark.converter.Converter`.

Converters are instantiated once per ``Converter`` and keep no state besides
that back reference, so a converter is a pure function of the node and the
options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from revmark.formatters.markdown import MarkdownFormatter, create_markdown_formatter
from revmark.options import ConverterOptions
from revmark.utils.dom import is_first_within_cell, is_last_within_cell

if TYPE_CHECKING:
    from revmark.converter import Converter


class ConverterBase:
    """Convert one family of elements to Markdown.

    Parameters
    ----------
    converter : Converter
        The dispatcher used to convert child nodes

    Attributes
    ----------
    tags : tuple of str
        Element names handled by this converter

    """

    tags: ClassVar[tuple[str, ...]] = ()

    def __init__(self, converter: Converter):
        """Bind the converter to its dispatcher."""
        self.converter = converter

    @property
    def options(self) -> ConverterOptions:
        """Options of the owning dispatcher."""
        return self.converter.options

    def convert(self, node: Any) -> str:
        """Return ``prefix + content + suffix`` for ``node``."""
        return self.get_prefix(node) + self.get_content(node) + self.get_suffix(node)

    def get_prefix(self, node: Any) -> str:
        """Return the text emitted before the node's content."""
        return ""

    def get_content(self, node: Any) -> str:
        """Return the node's content; by default its converted children."""
        return self.treat_children(node)

    def get_suffix(self, node: Any) -> str:
        """Return the text emitted after the node's content."""
        return ""

    def treat_children(self, node: Any) -> str:
        """Convert and concatenate the children of ``node`` in document order."""
        return "".join([self.converter.convert_node(child) for child in node.children])

    def formatter_for(self, node: Any) -> MarkdownFormatter:
        """Create the Markdown formatter for ``node`` under the current options."""
        return create_markdown_formatter(node, self.options)


class BlockConverterBase(ConverterBase):
    """Converter for block elements separated from their surroundings by newlines.

    The newline is omitted when the element is the first or last content of a
    table cell, where an extra line would turn into a stray ``<br>``.
    """

    def get_prefix(self, node: Any) -> str:
        """Return a newline unless ``node`` opens a table cell."""
        return "" if is_first_within_cell(node) else "\n"

    def get_suffix(self, node: Any) -> str:
        """Return a newline unless ``node`` closes a table cell."""
        return "" if is_last_within_cell(node) else "\n"

    def format_block(self, node: Any, content: str) -> str:
        """Trim and wrap ``content`` according to the formatting rules of ``node``."""
        return self.formatter_for(node).format_content(content)
