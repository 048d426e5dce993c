#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/revmark/utils/escape.py
"""Ordered regular-expression rewrites applied to literal text content.

Text coming out of the document must not be mistaken for Markdown syntax once
it is emitted. Each :class:`EscapeRule` is applied in sequence, so the order of
``DEFAULT_ESCAPE_RULES`` matters: backslash doubling runs before the rules that
insert backslashes in front of punctuation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

_ENCODED_LT = "&lt;"
_ENCODED_GT = "&gt;"

# "<" and ">" are re-encoded unless they belong to a shortcode marker
_RAW_LT_PATTERN = re.compile(r"(?<!\{\{)<")
_RAW_GT_PATTERN = re.compile(r">(?!\}\})")


@dataclass(frozen=True)
class EscapeRule:
    """A single ``(pattern, replacement)`` rewrite.

    Parameters
    ----------
    pattern : str
        Regular expression searched for in the text
    replacement : str
        Replacement template in :func:`re.sub` syntax

    """

    pattern: str
    replacement: str

    def apply(self, text: str) -> str:
        """Return ``text`` with every match of the rule rewritten."""
        return re.sub(self.pattern, self.replacement, text)


DEFAULT_ESCAPE_RULES: tuple[EscapeRule, ...] = (
    # list marker collisions
    EscapeRule(r"^(\+ )", r"\\\1"),
    EscapeRule(r"^(- )", r"\\\1"),
    # underscores
    EscapeRule(r"(_[^\w])", r"\\\1"),
    EscapeRule(r" _", r" \\_"),
    EscapeRule(r"(^_)", r"\\\1"),
    EscapeRule(r"__", r"\\_\\_"),
    # must run before the punctuation rules below
    EscapeRule(r"(\\\\)", r"\\\\\1"),
    EscapeRule(r"(\\\$)", r"\\\1"),
    EscapeRule(r"(\\%)", r"\\\1"),
    EscapeRule(r"(\\&)", r"\\\1"),
    EscapeRule(r"(\\\.)", r"\\\1"),
    EscapeRule(r"(\\\[)", r"\\\1"),
    EscapeRule(r"(\\\{)", r"\\\1"),
    EscapeRule(r"(\*)", r"\\\1"),
)


def escape_text(text: str, rules: Iterable[EscapeRule] = DEFAULT_ESCAPE_RULES) -> str:
    """Apply ``rules`` to ``text`` in order.

    Parameters
    ----------
    text : str
        Decoded text content
    rules : iterable of EscapeRule, default DEFAULT_ESCAPE_RULES
        Ordered rewrites

    Returns
    -------
    str
        Escaped text

    Examples
    --------
    >>> escape_text("- not a list")
    '\\\\- not a list'
    >>> escape_text("2 * 3")
    '2 \\\\* 3'

    """
    if not text:
        return text

    for rule in rules:
        text = rule.apply(text)
    return text


def encode_angle_brackets(text: str) -> str:
    """Re-encode ``<`` and ``>`` so they are never rendered as raw HTML.

    The parser has already decoded entities, so a literal ``&lt;b&gt;`` in the
    source arrives here as ``<b>``. Shortcode markers (``{{<`` and ``>}}``) are
    left untouched.

    Parameters
    ----------
    text : str
        Decoded text content

    Returns
    -------
    str
        Text with angle brackets entity-encoded

    """
    text = _RAW_LT_PATTERN.sub(_ENCODED_LT, text)
    return _RAW_GT_PATTERN.sub(_ENCODED_GT, text)


def escape_link_text(text: str) -> str:
    """Escape square brackets inside link text."""
    return text.replace("[", r"\[").replace("]", r"\]")


def escape_table_cell(text: str) -> str:
    """Escape pipe characters that would otherwise split a table cell."""
    return re.sub(r"(?<!\\)\|", r"\\|", text)
