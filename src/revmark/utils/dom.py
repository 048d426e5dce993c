#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/revmark/utils/dom.py
"""Read-only structural queries over BeautifulSoup trees.

Every conversion decision that depends on context (blockquote depth, list
nesting, table membership, preformatted ancestors) is derived on demand by
walking the tree with the helpers below. Nothing is cached on the nodes.
"""

from __future__ import annotations

from typing import Any, Iterator

from bs4.element import Comment, NavigableString, PreformattedString, Tag

from revmark.constants import BLOCK_ELEMENTS, TABLE_CELL_ELEMENTS


def is_text(node: Any) -> bool:
    """Return True if ``node`` is a plain text node."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def is_block_element(node: Any) -> bool:
    """Return True if ``node`` is an element rendered as a block box."""
    return isinstance(node, Tag) and node.name in BLOCK_ELEMENTS


def iter_ancestors(node: Any) -> Iterator[Tag]:
    """Yield the element ancestors of ``node``, nearest first."""
    parent = node.parent
    while parent is not None and parent.name != "[document]":
        yield parent
        parent = parent.parent


def iter_ancestors_and_self(node: Any) -> Iterator[Tag]:
    """Yield ``node`` followed by its element ancestors."""
    if isinstance(node, Tag):
        yield node
    yield from iter_ancestors(node)


def has_ancestor(node: Any, *names: str) -> bool:
    """Return True if any ancestor of ``node`` has one of ``names``."""
    return any(ancestor.name in names for ancestor in iter_ancestors(node))


def count_ancestors_and_self(node: Any, name: str) -> int:
    """Count ``node`` and its ancestors whose tag name is ``name``."""
    return sum(1 for element in iter_ancestors_and_self(node) if element.name == name)


def has_descendant(node: Any, *names: str) -> bool:
    """Return True if a descendant element of ``node`` has one of ``names``."""
    if not isinstance(node, Tag):
        return False
    return node.find(list(names)) is not None


def is_blank(node: Any) -> bool:
    """Return True for text and comment nodes that carry no visible content."""
    if isinstance(node, Comment):
        return False
    return isinstance(node, NavigableString) and not str(node).strip()


def content_children(node: Tag) -> list[Any]:
    """Return the children of ``node`` minus whitespace-only text nodes."""
    return [child for child in node.children if not is_blank(child)]


def is_first_within_cell(node: Any) -> bool:
    """Return True if ``node`` is the first content inside a ``<td>``/``<th>``."""
    parent = node.parent
    if parent is None or parent.name not in TABLE_CELL_ELEMENTS:
        return False
    children = content_children(parent)
    return bool(children) and children[0] is node


def is_last_within_cell(node: Any) -> bool:
    """Return True if ``node`` is the last content inside a ``<td>``/``<th>``."""
    parent = node.parent
    if parent is None or parent.name not in TABLE_CELL_ELEMENTS:
        return False
    children = content_children(parent)
    return bool(children) and children[-1] is node


def get_class_string(node: Any) -> str:
    """Return the ``class`` attribute of ``node`` as a space separated string."""
    if not isinstance(node, Tag):
        return ""
    classes = node.get("class")
    if not classes:
        return ""
    if isinstance(classes, str):
        return classes
    return " ".join(classes)


def max_element_depth(root: Any) -> int:
    """Return the deepest element nesting level under ``root``.

    The tree is walked with an explicit stack so arbitrarily deep input cannot
    exhaust the interpreter's call stack while it is being measured.

    Parameters
    ----------
    root : Tag
        Root of the subtree to measure

    Returns
    -------
    int
        Number of nested elements on the longest path (0 for a text node)

    """
    if not isinstance(root, Tag):
        return 0

    deepest = 0
    stack: list[tuple[Tag, int]] = [(root, 1)]
    while stack:
        element, depth = stack.pop()
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in element.children if isinstance(child, Tag))
    return deepest
