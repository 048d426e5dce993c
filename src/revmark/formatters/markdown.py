#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/revmark/formatters/markdown.py
"""Context-sensitive formatting rules for Markdown output.

Whether a node's Markdown may be trimmed and re-wrapped depends on where the
node sits. Wrapping a line that belongs to a code block or a pipe table would
corrupt it, and wrapping a shortcode twice can split a quoted parameter. The
rules below are evaluated in priority order (first match wins):

1. ``pre``, or a node with a ``pre`` ancestor or descendant: no trim, no wrap.
2. A node containing a table (or a heading, which must stay on one line):
   no trim, no wrap.
3. A node whose text contains a shortcode and which contains a blockquote:
   no trim, no wrap. The blockquote wraps the shortcode as one chunk.
4. A ``p``/``div`` whose text contains a shortcode, inside a blockquote or a
   div: no trim, no wrap. Only the outermost container wraps.
5. ``blockquote``, ``div``, ``li`` and ``p``: wrap to the configured width
   minus the columns consumed by enclosing blockquote markers and list
   markers (unbounded inside tables); trim unless the node is a ``div``.
6. Anything else: no trim, no wrap.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

from bs4.element import Tag

from revmark.constants import (
    BLOCKQUOTE_MARKER_WIDTH,
    HEADING_ELEMENTS,
    SHORTCODE_OPEN,
    WRAPPABLE_ELEMENTS,
)
from revmark.exceptions import ValidationError
from revmark.formatters.shortcodes import ShortcodeTextFormatter
from revmark.formatters.text import TextFormatter
from revmark.options import ConverterOptions
from revmark.utils.dom import (
    count_ancestors_and_self,
    has_ancestor,
    has_descendant,
    iter_ancestors_and_self,
)

logger = logging.getLogger(__name__)

_EXCESS_NEWLINES = re.compile(r"(\r?\n){3,}")


@dataclass(frozen=True)
class FormattingRules:
    """Trim and wrap decisions for one node.

    Parameters
    ----------
    can_trim : bool
        Whether leading and trailing whitespace of the node's content may be removed
    wrap_line_length : int or None
        Target width for the node's content; None means unbounded

    """

    can_trim: bool = False
    wrap_line_length: int | None = None


NO_FORMATTING = FormattingRules(can_trim=False, wrap_line_length=None)


def get_list_item_prefix(node: Any, bullet: str = "-") -> str:
    """Return the marker written before a list item's content.

    Ordered items are numbered by their 1-based position among the sibling
    ``<li>`` elements; the ``start`` attribute is ignored.

    Parameters
    ----------
    node : Tag
        An ``<li>`` element
    bullet : str, default "-"
        Marker character for unordered lists

    Returns
    -------
    str
        ``"1. "``, ``"2. "``... or ``"{bullet} "``

    Raises
    ------
    ValidationError
        If ``node`` is None or not an ``<li>`` element

    """
    if node is None:
        raise ValidationError("List item node is required.", parameter_name="node")
    if not isinstance(node, Tag) or node.name != "li":
        raise ValidationError(
            "The specified node must be a list item.",
            parameter_name="node",
            parameter_value=getattr(node, "name", node),
        )

    parent = node.parent
    if parent is not None and parent.name == "ol":
        index = len(node.find_previous_siblings("li")) + 1
        return f"{index}. "
    return f"{bullet} "


def remove_multiple_consecutive_blank_lines(text: str | None) -> str:
    """Collapse blank-line runs to a single blank line.

    At most one leading and one trailing newline remain. Applying the function
    twice gives the same result as applying it once.

    Raises
    ------
    ValidationError
        If ``text`` is None

    """
    if text is None:
        raise ValidationError("Markdown text is required.", parameter_name="text")

    while text.startswith("\n\n"):
        text = text[1:]
    while text.endswith("\n\n"):
        text = text[:-1]
    return _EXCESS_NEWLINES.sub("\n\n", text)


class MarkdownFormatter:
    """Resolve formatting rules and wrap Markdown for one reference node.

    Parameters
    ----------
    node : Tag
        The element whose content is being formatted
    options : ConverterOptions
        Conversion options supplying the base width and list bullet

    """

    def __init__(self, node: Any, options: ConverterOptions):
        """Bind the formatter to a node."""
        self.node = node
        self.options = options
        self.text_formatter = self._create_text_formatter()

    def _create_text_formatter(self) -> TextFormatter:
        return TextFormatter()

    def get_formatting_rules(self) -> FormattingRules:
        """Return the trim/wrap rules for :attr:`node`."""
        node = self.node
        name = getattr(node, "name", None)

        if name == "pre" or has_ancestor(node, "pre") or has_descendant(node, "pre"):
            return NO_FORMATTING

        if has_descendant(node, "table", *HEADING_ELEMENTS):
            return NO_FORMATTING

        contains_shortcode = isinstance(node, Tag) and SHORTCODE_OPEN in node.get_text()
        if contains_shortcode and has_descendant(node, "blockquote"):
            return NO_FORMATTING

        if contains_shortcode and name in ("div", "p") and has_ancestor(node, "blockquote", "div"):
            return NO_FORMATTING

        if name in WRAPPABLE_ELEMENTS:
            return FormattingRules(can_trim=name != "div", wrap_line_length=self.get_wrap_line_length())

        return NO_FORMATTING

    def get_wrap_line_length(self) -> int | None:
        """Return the available width after blockquote and list marker columns.

        None when wrapping is disabled, inside a table, or when the markers
        leave no positive width.
        """
        base = self.options.wrap_line_length
        if base is None or has_ancestor(self.node, "table"):
            return None

        quote_columns = BLOCKQUOTE_MARKER_WIDTH * count_ancestors_and_self(self.node, "blockquote")
        list_columns = sum(
            len(self.get_list_item_prefix(element))
            for element in iter_ancestors_and_self(self.node)
            if element.name == "li"
        )
        width = base - quote_columns - list_columns
        # deeply nested content has no room left to wrap into
        return width if width > 0 else None

    def get_list_item_prefix(self, node: Any) -> str:
        """Return the list marker for ``node`` using the configured bullet."""
        return get_list_item_prefix(node, self.options.list_bullet_char)

    def format_content(self, content: str) -> str:
        """Apply the node's rules to already converted Markdown ``content``."""
        rules = self.get_formatting_rules()
        if rules.can_trim:
            content = content.strip()
        if rules.wrap_line_length is not None:
            content = self.text_formatter.wrap_text(content, rules.wrap_line_length) or ""
        return content

    def wrap_text(self, text: str, width: int | None) -> str | None:
        """Wrap ``text`` to ``width`` with this formatter's chunker."""
        return self.text_formatter.wrap_text(text, width)

    @staticmethod
    def remove_multiple_consecutive_blank_lines(text: str | None) -> str:
        """Collapse blank-line runs; see :func:`remove_multiple_consecutive_blank_lines`."""
        return remove_multiple_consecutive_blank_lines(text)


class ShortcodeMarkdownFormatter(MarkdownFormatter):
    """Markdown formatter that keeps ``{{< ... >}}`` shortcodes intact while wrapping.

    Shortcodes are split into wrap-safe pieces except inside a blockquote, where
    each shortcode is kept whole.
    """

    def _create_text_formatter(self) -> TextFormatter:
        in_blockquote = getattr(self.node, "name", None) == "blockquote"
        return ShortcodeTextFormatter(split_shortcodes=not in_blockquote)


def create_markdown_formatter(node: Any, options: ConverterOptions) -> MarkdownFormatter:
    """Return the formatter matching ``options`` for ``node``."""
    if options.shortcodes:
        return ShortcodeMarkdownFormatter(node, options)
    return MarkdownFormatter(node, options)
