"""Formatting primitives: whitespace, chunking, wrapping and formatting rules."""

from revmark.formatters.html import normalize_whitespace, remove_insignificant_whitespace
from revmark.formatters.markdown import (
    FormattingRules,
    MarkdownFormatter,
    ShortcodeMarkdownFormatter,
    create_markdown_formatter,
    get_list_item_prefix,
    remove_multiple_consecutive_blank_lines,
)
from revmark.formatters.shortcodes import ShortcodeTextFormatter, split_shortcode
from revmark.formatters.text import TextFormatter

__all__ = [
    "FormattingRules",
    "MarkdownFormatter",
    "ShortcodeMarkdownFormatter",
    "ShortcodeTextFormatter",
    "TextFormatter",
    "create_markdown_formatter",
    "get_list_item_prefix",
    "normalize_whitespace",
    "remove_insignificant_whitespace",
    "remove_multiple_consecutive_blank_lines",
    "split_shortcode",
]
