#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/revmark/formatters/html.py
"""Whitespace normalization over a parsed HTML tree.

Browsers collapse whitespace runs inside text to a single space and discard
whitespace that touches a block box. These functions apply the same model to
the BeautifulSoup tree before conversion so that converters only ever see
significant whitespace. Text under ``<pre>`` is never modified.

Both functions rewrite text nodes of the tree they are given in place.
"""

from __future__ import annotations

import re
from typing import Any

from bs4.element import NavigableString, Tag

from revmark.constants import RAW_TEXT_ELEMENTS
from revmark.utils.dom import has_ancestor, is_block_element, is_text

_WHITESPACE_RUN = re.compile(r"[ \t\r\n]+")


def normalize_whitespace(root: Any) -> None:
    """Collapse runs of spaces, tabs and newlines to one space.

    Leading and trailing whitespace is reduced to a single space but not
    removed; see :func:`remove_insignificant_whitespace`.

    Parameters
    ----------
    root : Tag
        Subtree whose text nodes are normalized

    """
    if is_text(root):
        _normalize_text_node(root)
        return
    if not isinstance(root, Tag):
        return

    # list() because replace_with() mutates the descendant chain
    for node in list(root.descendants):
        if is_text(node):
            _normalize_text_node(node)


def _normalize_text_node(node: NavigableString) -> None:
    if has_ancestor(node, *RAW_TEXT_ELEMENTS):
        return

    text = str(node)
    collapsed = _WHITESPACE_RUN.sub(" ", text)
    if collapsed != text:
        node.replace_with(NavigableString(collapsed))


def is_leading_whitespace_significant(node: Any) -> bool:
    """Return False when whitespace at the start of ``node`` would be collapsed away."""
    if has_ancestor(node, "pre"):
        return True

    previous = node.previous_sibling
    if previous is not None:
        return not is_block_element(previous)
    return not is_block_element(node.parent)


def is_trailing_whitespace_significant(node: Any) -> bool:
    """Return False when whitespace at the end of ``node`` would be collapsed away."""
    if has_ancestor(node, "pre"):
        return True

    following = node.next_sibling
    if following is not None:
        return not is_block_element(following)
    return not is_block_element(node.parent)


def remove_insignificant_whitespace(node: Any) -> None:
    """Strip whitespace adjacent to block boundaries, children first.

    Parameters
    ----------
    node : Tag or NavigableString
        Root of the subtree to process

    Examples
    --------
    >>> from bs4 import BeautifulSoup
    >>> soup = BeautifulSoup("<p>  \\t \\n This is a paragraph.</p>", "html.parser")
    >>> remove_insignificant_whitespace(soup)
    >>> str(soup)
    '<p>This is a paragraph.</p>'

    """
    if isinstance(node, Tag):
        for child in list(node.children):
            remove_insignificant_whitespace(child)
        return
    if not is_text(node):
        return

    text = str(node)
    if not is_leading_whitespace_significant(node):
        text = text.lstrip(" \t\r\n")
    if not is_trailing_whitespace_significant(node):
        text = text.rstrip(" \t\r\n")
    if text != str(node):
        node.replace_with(NavigableString(text))
