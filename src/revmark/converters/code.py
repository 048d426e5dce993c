#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/revmark/converters/code.py
"""Converters for preformatted blocks and inline code."""

from __future__ import annotations

import logging
import re
import textwrap
from typing import Any

from revmark.constants import CODE_BLOCK_INDENT
from revmark.converters.base import BlockConverterBase, ConverterBase
from revmark.formatters.text import TextFormatter
from revmark.utils.dom import get_class_string

logger = logging.getLogger(__name__)

# Class naming conventions of common syntax highlighters
_LANGUAGE_CLASS_PATTERN = re.compile(r"(highlight-source-|language-|highlight-|brush:\s|lang-)([a-zA-Z0-9]+)")


def _longest_run(text: str, char: str) -> int:
    longest = current = 0
    for c in text:
        if c == char:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


class PreConverter(BlockConverterBase):
    """Convert ``<pre>`` to a fenced or indented code block.

    The content is taken verbatim from the element's text; it is never
    escaped, trimmed or wrapped as prose.
    """

    tags = ("pre",)

    def get_prefix(self, node: Any) -> str:
        return "\n\n"

    def get_suffix(self, node: Any) -> str:
        return "\n"

    def convert(self, node: Any) -> str:
        content = self._get_code(node)
        if self.options.github_flavored:
            language = self.get_language(node)
            fence = "`" * max(3, _longest_run(content, "`") + 1)
            body = f"{fence}{language}\n{content.rstrip()}\n{fence}"
        else:
            body = TextFormatter.indent_lines(content.rstrip(), CODE_BLOCK_INDENT, indent_blank_lines=False) or ""
            if not body:
                return ""
        return self.get_prefix(node) + body + self.get_suffix(node)

    def _get_code(self, node: Any) -> str:
        content = node.get_text()
        # a newline directly after <pre> is not part of the content
        if content.startswith("\r\n"):
            content = content[2:]
        elif content.startswith("\n"):
            content = content[1:]

        if self.options.remove_excess_indentation_from_code:
            content = textwrap.dedent(content)
        if self.options.remove_trailing_whitespace_from_code:
            content = "\n".join(line.rstrip() for line in content.split("\n"))
        return content

    def get_language(self, node: Any) -> str:
        """Return the fence language for ``node``.

        Class attributes are searched on the ``<pre>`` itself, then its parent,
        then a nested ``<code>`` element. Detected names go through the
        configured language mapper; otherwise the default language is used.
        """
        for candidate in (node, node.parent, node.find("code")):
            match = _LANGUAGE_CLASS_PATTERN.search(get_class_string(candidate))
            if match is not None:
                language = match.group(2)
                mapper = self.options.code_block_language_mapper
                if mapper is not None:
                    language = mapper.get_markdown_language(language)
                logger.debug("Detected code block language %r", language)
                return language
        return self.options.default_code_block_language


class CodeConverter(ConverterBase):
    """Convert inline ``<code>`` to a back-tick span."""

    tags = ("code",)

    def convert(self, node: Any) -> str:
        content = node.get_text()
        if not content:
            return ""

        fence = "`" * (_longest_run(content, "`") + 1)
        padding = " " if content.startswith("`") or content.endswith("`") else ""
        return f"{fence}{padding}{content}{padding}{fence}"
