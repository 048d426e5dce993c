#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/revmark/cleaner.py
"""Parsing and tidy passes run before conversion.

The converters rely on a few structural guarantees that real-world HTML does
not always provide. The functions here parse the input with BeautifulSoup and
repair it: non-breaking spaces are normalized, comments are optionally removed
and stray content directly inside ``<ol>``/``<ul>`` is moved into list items.
"""

from __future__ import annotations

import logging
from typing import Any

from revmark.exceptions import DependencyError
from revmark.utils.dom import is_blank

logger = logging.getLogger(__name__)


def pre_tidy(html: str) -> str:
    """Replace literal non-breaking spaces with ordinary spaces."""
    return html.replace("\u00a0", " ")


def parse_html(html: str, parser: str = "html.parser") -> Any:
    """Parse ``html`` into a BeautifulSoup document.

    Parameters
    ----------
    html : str
        Markup to parse
    parser : str, default "html.parser"
        BeautifulSoup tree builder

    Returns
    -------
    BeautifulSoup
        Parsed document

    Raises
    ------
    DependencyError
        If the requested tree builder is not installed

    """
    from bs4 import BeautifulSoup, FeatureNotFound

    try:
        return BeautifulSoup(html, parser)
    except FeatureNotFound as e:
        raise DependencyError(
            f"HTML parser '{parser}' is not available. Install it or use 'html.parser'.",
            missing_packages=[parser],
            original_error=e,
        ) from e


def remove_comments(soup: Any) -> None:
    """Remove every HTML comment from ``soup``."""
    from bs4.element import Comment

    for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()


def repair_lists(soup: Any) -> int:
    """Move non-list-item children of ``<ol>``/``<ul>`` into list items.

    A stray child joins the preceding ``<li>``; when there is none a new
    ``<li>`` is created in its place. Whitespace-only text and comments are
    left where they are.

    Parameters
    ----------
    soup : BeautifulSoup
        Parsed document, modified in place

    Returns
    -------
    int
        Number of nodes moved

    """
    from bs4.element import Comment, Tag

    moved = 0
    for list_node in soup.find_all(["ol", "ul"]):
        for child in list(list_node.children):
            if isinstance(child, Tag) and child.name == "li":
                continue
            if is_blank(child) or isinstance(child, Comment):
                continue

            target = child.find_previous_sibling("li")
            if target is None:
                target = soup.new_tag("li")
                child.insert_before(target)
            target.append(child.extract())
            moved += 1

    if moved:
        logger.debug("Moved %d stray node(s) into list items", moved)
    return moved
