#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/revmark/formatters/shortcodes.py
"""Shortcode-aware chunking for static site generator content.

Hugo style shortcodes (``{{< figure src="a.png" >}}``) may contain spaces, and
wrapping them naively either splits a quoted parameter across lines or leaves a
lone ``>}}`` at the start of a line, which Markdown reads as a blockquote.
:class:`ShortcodeTextFormatter` treats each shortcode as one chunk and, outside
blockquotes, re-splits it at parameter boundaries so that long shortcodes can
still wrap safely.
"""

from __future__ import annotations

import logging
import re

from revmark.constants import SHORTCODE_CLOSE, SHORTCODE_OPEN
from revmark.exceptions import MalformedShortcodeError
from revmark.formatters.text import (
    CODE_CHUNK_PATTERN,
    LINK_CHUNK_PATTERN,
    WORD_CHUNK_PATTERN,
    TextFormatter,
)

logger = logging.getLogger(__name__)

SHORTCODE_CHUNK_PATTERN = r"[\S]*\{\{< .*? >\}\}[\S]*"

# Bare words, or single/double quoted strings honouring backslash-escaped quotes
_SHORTCODE_TOKEN_REGEX = re.compile(r"""[^\s"']+|((?<![\\])['"])((?:.(?!(?<![\\])\1))*.?)\1""")


def split_shortcode(shortcode: str) -> list[str]:
    """Split one shortcode into its open marker, name and parameters.

    A ``name=`` token is joined with the quoted value that follows it, and the
    closing marker is joined to the last token so it can never start a line.

    Parameters
    ----------
    shortcode : str
        Text starting with ``{{<`` and ending with ``>}}``

    Returns
    -------
    list of str
        At least two tokens, the last ending with ``>}}``

    Raises
    ------
    MalformedShortcodeError
        If fewer than three tokens are found

    Examples
    --------
    >>> split_shortcode("{{< figure src='http://example.com/img.png' >}}")
    ['{{<', 'figure', "src='http://example.com/img.png' >}}"]

    """
    tokens = [match.group(0) for match in _SHORTCODE_TOKEN_REGEX.finditer(shortcode)]

    i = 0
    while i < len(tokens) - 2:
        if tokens[i].endswith("="):
            tokens[i] += tokens.pop(i + 1)
        i += 1

    if len(tokens) < 3:
        raise MalformedShortcodeError(shortcode)

    closing = tokens.pop()
    tokens[-1] = f"{tokens[-1]} {closing}"
    return tokens


class ShortcodeTextFormatter(TextFormatter):
    """Text formatter that keeps shortcodes intact.

    Parameters
    ----------
    split_shortcodes : bool, default True
        Re-split shortcode chunks at parameter boundaries. Disabled inside
        blockquotes, where every shortcode remains a single chunk.

    """

    chunk_patterns = (LINK_CHUNK_PATTERN, CODE_CHUNK_PATTERN, SHORTCODE_CHUNK_PATTERN, WORD_CHUNK_PATTERN)

    def __init__(self, split_shortcodes: bool = True) -> None:
        """Initialize the formatter."""
        super().__init__()
        self.split_shortcodes = split_shortcodes

    def parse_chunks(self, text: str | None) -> list[str]:
        """Split a line into chunks, expanding shortcode chunks when enabled."""
        chunks = super().parse_chunks(text)
        if not self.split_shortcodes:
            return chunks

        result: list[str] = []
        for chunk in chunks:
            if f"{SHORTCODE_OPEN} " in chunk:
                result.extend(self._split_shortcode_chunk(chunk))
            else:
                result.append(chunk)
        return result

    @staticmethod
    def _split_shortcode_chunk(chunk: str) -> list[str]:
        start = chunk.index(SHORTCODE_OPEN)
        end = chunk.rfind(SHORTCODE_CLOSE)
        if end < start:
            return [chunk]
        end += len(SHORTCODE_CLOSE)

        prefix = chunk[:start]
        suffix = chunk[end:]
        tokens = split_shortcode(chunk[start:end])
        logger.debug("Split shortcode %r into %d chunks", chunk, len(tokens))

        tokens[0] = prefix + tokens[0]
        tokens[-1] = tokens[-1] + suffix
        return tokens
