#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/revmark/converters/fallback.py
"""Structural converters and the unknown-tag fallback.

``bypass``, ``drop`` and ``pass_through`` exist both as registered converters
for specific tags and as policies for elements without a converter.
:class:`UnknownTagConverter` implements the policy selected by
``ConverterOptions.unknown_tags``.
"""

from __future__ import annotations

import logging
from typing import Any

from revmark.converters.base import ConverterBase
from revmark.exceptions import UnknownTagError

logger = logging.getLogger(__name__)


class BypassConverter(ConverterBase):
    """Ignore the element itself and convert its children."""

    tags = ("[document]", "html", "body", "span", "thead", "tbody", "tfoot")


class DropConverter(ConverterBase):
    """Emit nothing; children are not visited."""

    tags = ("colgroup", "col")

    def convert(self, node: Any) -> str:
        return ""


class PassThroughConverter(ConverterBase):
    """Emit the element's markup unchanged."""

    def convert(self, node: Any) -> str:
        return str(node)


class UnknownTagConverter(ConverterBase):
    """Apply the configured unknown-tag policy to an unregistered element."""

    def convert(self, node: Any) -> str:
        """Convert ``node`` per ``options.unknown_tags``.

        Raises
        ------
        UnknownTagError
            If the policy is ``"raise"``

        """
        policy = self.options.unknown_tags
        name = getattr(node, "name", None) or ""

        if policy == "raise":
            raise UnknownTagError(name)

        logger.debug("No converter for <%s>; applying unknown tag policy %r", name, policy)
        if policy == "drop":
            return ""
        if policy == "bypass":
            return self.treat_children(node)
        return str(node)
