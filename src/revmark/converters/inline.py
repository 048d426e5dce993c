#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/revmark/converters/inline.py
"""Converters for inline elements: emphasis, strikethrough, links and images."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from bs4.element import Tag

from revmark.converters.base import ConverterBase
from revmark.utils.dom import has_ancestor
from revmark.utils.escape import escape_link_text
from revmark.utils.urls import encode_url, get_scheme, is_absolute_url, is_scheme_allowed

logger = logging.getLogger(__name__)


def _format_title(node: Any) -> str:
    title = (node.get("title") or "").strip()
    if not title:
        return ""
    escaped = title.replace('"', '\\"')
    return f' "{escaped}"'


class DelimitedConverterBase(ConverterBase):
    """Wrap content in a delimiter pair, e.g. ``*text*``.

    The delimiters are omitted when the content is blank or when an ancestor
    already applies the same formatting. Whitespace at the edges of the
    content is moved outside the delimiters, and a space separates the closing
    delimiter from an immediately following element of the same kind.
    """

    def get_delimiter(self) -> str:
        raise NotImplementedError

    def convert(self, node: Any) -> str:
        content = self.treat_children(node)
        if not content.strip() or has_ancestor(node, *self.tags):
            return content

        core = content.strip()
        leading = content[: len(content) - len(content.lstrip())]
        trailing = content[len(content.rstrip()) :]

        # a lone trailing backslash would escape the closing delimiter
        if core.endswith("\\") and not core.endswith("\\\\"):
            core += "\\"

        delimiter = self.get_delimiter()
        separator = ""
        if not trailing:
            following = node.next_sibling
            if isinstance(following, Tag) and following.name in self.tags:
                separator = " "
        return f"{leading}{delimiter}{core}{delimiter}{separator}{trailing}"


class EmphasisConverter(DelimitedConverterBase):
    """Convert ``<em>``/``<i>``."""

    tags = ("em", "i")

    def get_delimiter(self) -> str:
        return self.options.emphasis_char


class StrongConverter(DelimitedConverterBase):
    """Convert ``<strong>``/``<b>``."""

    tags = ("strong", "b")

    def get_delimiter(self) -> str:
        return self.options.emphasis_char * 2


class StrikethroughConverter(DelimitedConverterBase):
    """Convert ``<del>``/``<s>``/``<strike>``."""

    tags = ("del", "s", "strike")

    def get_delimiter(self) -> str:
        return "~~"


class LinkConverter(ConverterBase):
    """Convert ``<a>`` to an inline link.

    Links whose scheme is not allowed, or that have no target or no text,
    degrade to their text.
    """

    tags = ("a",)

    _SMART_PREFIXES: ClassVar[tuple[str, ...]] = ("", "tel:", "mailto:")

    def convert(self, node: Any) -> str:
        text = self.treat_children(node).strip()
        href = (node.get("href") or "").strip()
        if not href or not text:
            return text

        scheme = get_scheme(href)
        if not is_scheme_allowed(scheme, self.options.whitelist_uri_schemes):
            logger.debug("Dropping link target with disallowed scheme: %s", href[:100])
            return text

        if self.options.smart_href_handling:
            bare = self._get_bare_url(node, href, scheme)
            if bare:
                return bare

        return f"[{text}]({encode_url(href)}{_format_title(node)})"

    def _get_bare_url(self, node: Any, href: str, scheme: str) -> str:
        """Return ``href`` when the link text already spells out the target."""
        raw_text = node.get_text().strip()
        if scheme and is_absolute_url(href):
            if any(href == f"{prefix}{raw_text}" for prefix in self._SMART_PREFIXES):
                return href
        if scheme in ("http", "https") and href.lower() == f"{scheme}://{raw_text}".lower():
            return href
        return ""


class ImageConverter(ConverterBase):
    """Convert ``<img>`` to ``![alt](src "title")``."""

    tags = ("img",)

    def convert(self, node: Any) -> str:
        alt = (node.get("alt") or "").strip()
        src = (node.get("src") or "").strip()

        if not is_scheme_allowed(get_scheme(src), self.options.whitelist_uri_schemes):
            logger.debug("Dropping image with disallowed scheme: %s", src[:100])
            return ""

        return f"![{escape_link_text(alt)}]({encode_url(src)}{_format_title(node)})"
