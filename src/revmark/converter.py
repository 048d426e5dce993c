#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/revmark/converter.py
"""HTML to Markdown conversion entry point.

:class:`Converter` owns the converter registry and drives the pipeline:

1. Parse the HTML with BeautifulSoup after normalizing non-breaking spaces.
2. Tidy the tree: optionally drop comments and repair malformed lists.
3. Start from ``<body>`` when the document has one.
4. Refuse trees nested deeper than ``max_nesting_depth``.
5. Normalize whitespace and strip whitespace that touches block boundaries.
6. Dispatch every node to its converter, recursively.
7. Collapse consecutive blank lines and strip the result.

The registry is a lookup table from tag name to converter instance, built once
from an explicit ordered list of converter classes. Elements without an entry
go to the fallback converter implementing the unknown-tag policy.

Examples
--------
>>> from revmark import Converter
>>> Converter().convert("<p>Hello <strong>world</strong></p>")
'Hello **world**'

"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from bs4.element import Comment, NavigableString, PreformattedString

from revmark.cleaner import parse_html, pre_tidy, remove_comments, repair_lists
from revmark.converters import DEFAULT_CONVERTERS
from revmark.converters.base import ConverterBase
from revmark.converters.fallback import PassThroughConverter, UnknownTagConverter
from revmark.converters.text import CommentConverter, TextConverter
from revmark.exceptions import ValidationError
from revmark.formatters.html import normalize_whitespace, remove_insignificant_whitespace
from revmark.formatters.markdown import remove_multiple_consecutive_blank_lines
from revmark.options import ConverterOptions
from revmark.utils.dom import max_element_depth

logger = logging.getLogger(__name__)


class Converter:
    """Convert HTML documents to Markdown.

    Parameters
    ----------
    options : ConverterOptions, optional
        Conversion options; defaults to ``ConverterOptions()``
    converters : iterable of ConverterBase subclasses, optional
        Ordered registration list; defaults to ``DEFAULT_CONVERTERS``. When two
        classes declare the same tag, the later one wins.

    Notes
    -----
    A ``Converter`` holds no per-conversion state and may be shared between
    threads converting independent documents.

    """

    def __init__(
        self,
        options: ConverterOptions | None = None,
        converters: Iterable[type[ConverterBase]] | None = None,
    ):
        """Initialize the converter and build its registry."""
        self.options = options or ConverterOptions()

        registry: dict[str, ConverterBase] = {}
        for converter_class in converters if converters is not None else DEFAULT_CONVERTERS:
            instance = converter_class(self)
            for tag in converter_class.tags:
                registry[tag] = instance
        self._registry = registry

        self._text_converter = TextConverter(self)
        self._comment_converter = CommentConverter(self)
        self._pass_through_converter = PassThroughConverter(self)
        self._unknown_tag_converter = UnknownTagConverter(self)

    @property
    def registered_tags(self) -> frozenset[str]:
        """Element names with a dedicated converter."""
        return frozenset(self._registry)

    def lookup(self, tag_name: str) -> ConverterBase:
        """Return the converter responsible for ``tag_name``.

        Tags listed in ``pass_through_tags`` always resolve to the pass-through
        converter; unregistered tags resolve to the unknown-tag fallback.
        """
        name = tag_name.lower()
        if name in self.options.pass_through_tags:
            return self._pass_through_converter
        return self._registry.get(name, self._unknown_tag_converter)

    def convert(self, html: str) -> str:
        """Convert an HTML string to Markdown.

        Parameters
        ----------
        html : str
            HTML document or fragment

        Returns
        -------
        str
            Markdown text

        Raises
        ------
        ValidationError
            If ``html`` is None or the document is nested too deeply
        ConversionError
            If the document contains structure that cannot be converted
        DependencyError
            If the configured HTML parser is not installed

        """
        if html is None:
            raise ValidationError("HTML input is required.", parameter_name="html")

        logger.debug("Converting %d characters of HTML", len(html))
        soup = parse_html(pre_tidy(html), self.options.html_parser)

        if self.options.remove_comments:
            remove_comments(soup)
        if self.options.repair_lists:
            repair_lists(soup)

        root = soup.body if soup.body is not None else soup
        return self.convert_tree(root)

    def convert_tree(self, root: Any) -> str:
        """Convert a parsed tree (or subtree) to finished Markdown.

        The text nodes of ``root`` are whitespace-normalized in place before
        conversion.

        Raises
        ------
        ValidationError
            If the tree is nested deeper than ``options.max_nesting_depth``
            or too deeply for the interpreter's call stack

        """
        depth = max_element_depth(root)
        if depth > self.options.max_nesting_depth:
            raise ValidationError(
                f"Document nesting depth {depth} exceeds the maximum of {self.options.max_nesting_depth}.",
                parameter_name="max_nesting_depth",
                parameter_value=depth,
            )

        try:
            normalize_whitespace(root)
            remove_insignificant_whitespace(root)
            result = self.convert_node(root)
        except RecursionError as e:
            # max_nesting_depth may allow more nesting than the interpreter stack holds
            raise ValidationError(
                "Document is nested too deeply to convert.",
                parameter_name="max_nesting_depth",
                parameter_value=depth,
                original_error=e,
            ) from e

        if self.options.remove_multiple_consecutive_blank_lines:
            result = remove_multiple_consecutive_blank_lines(result)
        if self.options.strip_output:
            result = result.strip("\r\n")
        return result

    def convert_node(self, node: Any) -> str:
        """Convert a single node, recursing into its children as needed.

        This is the dispatch entry used by every converter.
        """
        if isinstance(node, Comment):
            return self._comment_converter.convert(node)
        if isinstance(node, PreformattedString):
            # doctype, declarations and processing instructions
            return ""
        if isinstance(node, NavigableString):
            return self._text_converter.convert(node)
        return self.lookup(node.name).convert(node)


def convert(html: str, options: ConverterOptions | None = None, **kwargs: Any) -> str:
    """Convert ``html`` to Markdown.

    Parameters
    ----------
    html : str
        HTML document or fragment
    options : ConverterOptions, optional
        Base options
    **kwargs
        Option overrides applied on top of ``options``

    Returns
    -------
    str
        Markdown text

    Examples
    --------
    >>> convert("<ul><li>One</li><li>Two</li></ul>", list_bullet_char="*")
    '* One\\n* Two'

    """
    options = options or ConverterOptions()
    if kwargs:
        options = options.create_updated(**kwargs)
    return Converter(options).convert(html)
