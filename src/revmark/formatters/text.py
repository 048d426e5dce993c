#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/revmark/formatters/text.py
"""Chunk-aware line wrapping and indentation for Markdown text.

Wrapping works on *chunks* rather than on characters or plain words. A chunk is
an atomic run of text that must never be split across two lines: an ordinary
word, a whole inline link or image (``[text](url)``, whose text may contain
spaces) or an inline code span. Lines are filled greedily with chunks joined by
single spaces.

Examples
--------
>>> formatter = TextFormatter()
>>> formatter.parse_chunks("foo bar [Example link](http://example.com) foobar")
['foo', 'bar', '[Example link](http://example.com)', 'foobar']
>>> print(formatter.wrap_text("foo bar", 2))
foo
bar

"""

from __future__ import annotations

import re

from revmark.exceptions import ValidationError

# Link or image, greedily including any touching non-space characters
LINK_CHUNK_PATTERN = r"[\S]*!?\[(?:.*?)\]\((?:.*?)\)[\S]*"

# Inline code span, including touching non-space characters
CODE_CHUNK_PATTERN = r"[\S]*?`.*?`[\S]*"

# Anything else: a maximal run of non-space characters
WORD_CHUNK_PATTERN = r"[^ ]+"

# Markdown line prefix kept in front of the first wrapped line: blockquote
# markers, indentation and a list marker
_LINE_PREFIX = re.compile(r"^(?P<quote>(?: *>(?!\}\}) ?)*)(?P<indent> *)(?P<marker>(?:[-*+]|\d+\.) )?")


class TextFormatter:
    """Split, wrap and indent Markdown text.

    Instances hold no per-call state and can be shared between conversions.
    """

    chunk_patterns: tuple[str, ...] = (LINK_CHUNK_PATTERN, CODE_CHUNK_PATTERN, WORD_CHUNK_PATTERN)

    def __init__(self) -> None:
        """Compile the chunk expression from :attr:`chunk_patterns`."""
        self._chunk_regex = re.compile("|".join(self.chunk_patterns))

    def parse_chunks(self, text: str | None) -> list[str]:
        """Split a single line into atomic wrap units.

        Parameters
        ----------
        text : str or None
            One physical line of text

        Returns
        -------
        list of str
            Chunks in order; ``[]`` for None and ``[""]`` for an empty string

        Raises
        ------
        ValidationError
            If ``text`` contains a line feed

        """
        if text is None:
            return []
        if "\n" in text:
            raise ValidationError(
                "Cannot parse chunks from text because the text contains a line feed.",
                parameter_name="text",
                parameter_value=text,
            )
        if text == "":
            return [""]

        return [match.group(0) for match in self._chunk_regex.finditer(text)]

    def wrap_text_line(self, text: str | None, width: int | None) -> str | None:
        """Greedily fill chunks of one line into lines of at most ``width``.

        A chunk longer than ``width`` is placed on its own line unmodified.
        The Markdown line prefix of ``text`` (blockquote markers, indentation
        and a list marker) stays attached to the first chunk; continuation
        lines repeat the blockquote markers and hang under the list item text.
        Trailing spaces (Markdown hard breaks) stay on the last line.

        Parameters
        ----------
        text : str or None
            One physical line of text
        width : int or None
            Target width; None or a non-positive width leaves the text unchanged

        Returns
        -------
        str or None
            The wrapped text, lines separated by ``"\\n"``

        Raises
        ------
        ValidationError
            If ``text`` contains a line feed

        """
        if not text:
            return text
        if "\n" in text:
            raise ValidationError(
                "Cannot wrap text line because the text already contains a line feed.",
                parameter_name="text",
                parameter_value=text,
            )
        if width is None or width <= 0 or len(text) <= width:
            return text

        prefix_match = _LINE_PREFIX.match(text)
        prefix = prefix_match.group(0)
        quote = prefix_match.group("quote")
        hanging = quote + " " * (len(prefix) - len(quote))
        body = text[len(prefix) :]
        stripped_body = body.rstrip(" ")
        if not stripped_body:
            return text
        trailing = body[len(stripped_body) :]
        available = max(width - len(prefix), 1)

        lines: list[str] = []
        line = ""
        for chunk in self.parse_chunks(stripped_body):
            # "line" carries a trailing separator space
            if line and len(line) + len(chunk) > available:
                lines.append(line[:-1])
                line = ""
            line += chunk + " "

        line = line[:-1]
        if line:
            lines.append(line)
        if not lines:
            return text

        lines[-1] += trailing
        return "\n".join([prefix + lines[0]] + [hanging + wrapped for wrapped in lines[1:]])

    def wrap_text(self, text: str | None, width: int | None) -> str | None:
        """Wrap every physical line of ``text`` independently.

        Existing line breaks are preserved; a trailing ``"\\r"`` on each line is
        dropped.
        """
        if not text or width is None or width <= 0 or len(text) <= width:
            return text

        wrapped = [self.wrap_text_line(line.rstrip("\r"), width) or "" for line in text.split("\n")]
        return "\n".join(wrapped)

    @staticmethod
    def indent_lines(text: str | None, indentation: str = "\t", indent_blank_lines: bool = True) -> str | None:
        """Prefix every line of ``text`` with ``indentation``.

        Parameters
        ----------
        text : str or None
            Text to indent
        indentation : str, default "\\t"
            Literal prefix for each line
        indent_blank_lines : bool, default True
            When False, empty lines are left unprefixed

        Returns
        -------
        str or None
            Indented text; empty input is returned as is

        """
        if not text:
            return text

        lines = text.split("\n")
        return "\n".join(
            line if (not line and not indent_blank_lines) else indentation + line for line in lines
        )
