#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML to Markdown conversion.

This module defines :class:`ConverterOptions`, the immutable configuration
consumed by :class:`revmark.converter.Converter`, its converters and its
formatters.
"""
# src/revmark/options/converter.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import get_args

from revmark.constants import (
    DEFAULT_EMPHASIS_CHAR,
    DEFAULT_GITHUB_FLAVORED,
    DEFAULT_HORIZONTAL_RULE,
    DEFAULT_HTML_PARSER,
    DEFAULT_LIST_BULLET_CHAR,
    DEFAULT_MAX_NESTING_DEPTH,
    DEFAULT_REMOVE_BLANK_LINES,
    DEFAULT_REMOVE_COMMENTS,
    DEFAULT_REPAIR_LISTS,
    DEFAULT_SHORTCODES,
    DEFAULT_SMART_HREF_HANDLING,
    DEFAULT_STRIP_OUTPUT,
    DEFAULT_TABLE_HEADER_HANDLING,
    DEFAULT_UNKNOWN_TAGS,
    DEFAULT_WRAP_LINE_LENGTH,
    BulletSymbol,
    EmphasisSymbol,
    HtmlParser,
    TableHeaderHandling,
    UnknownTagsOption,
)
from revmark.language_mapper import CodeBlockLanguageMapper
from revmark.options.base import CloneFrozenMixin
from revmark.utils.escape import DEFAULT_ESCAPE_RULES, EscapeRule


@dataclass(frozen=True)
class ConverterOptions(CloneFrozenMixin):
    r"""Options controlling HTML to Markdown conversion.

    Parameters
    ----------
    unknown_tags : {"pass_through", "drop", "bypass", "raise"}, default "pass_through"
        What to do with elements that have no converter. ``pass_through`` emits
        the element's markup, ``drop`` removes it with its children, ``bypass``
        converts only its children and ``raise`` fails with UnknownTagError.
    pass_through_tags : tuple of str, default ()
        Elements always emitted as markup, regardless of ``unknown_tags``.
    github_flavored : bool, default False
        Use fenced code blocks and backslash hard line breaks.
    list_bullet_char : {"-", "\*", "+"}, default "-"
        Marker for unordered list items.
    emphasis_char : {"\*", "\_"}, default "\*"
        Emphasis delimiter; strong emphasis uses it twice.
    horizontal_rule : str, default "\* \* \*"
        Text emitted for ``<hr>``.
    wrap_line_length : int or None, default 80
        Target width for wrapped prose. None disables wrapping.
    shortcodes : bool, default False
        Treat ``{{< ... >}}`` spans as atomic during wrapping.
    default_code_block_language : str, default ""
        Fence language used when a code block carries no language hint.
    code_block_language_mapper : CodeBlockLanguageMapper or None, default None
        Maps class-attribute languages to fence languages.
    whitelist_uri_schemes : tuple of str, default ()
        Allowed link and image schemes. Empty allows all; include ``""`` to
        allow relative URLs when the list is non-empty.
    table_without_header_row_handling : {"first_row", "empty_row"}, default "first_row"
        Use the first row as the header of a table without ``<th>``, or
        synthesize an empty header row.
    escape_rules : tuple of EscapeRule
        Ordered rewrites applied to text content.
    remove_multiple_consecutive_blank_lines : bool, default True
        Collapse runs of blank lines in the final output.
    remove_comments : bool, default False
        Drop HTML comments instead of passing them through.
    repair_lists : bool, default True
        Move stray list children into list items before conversion.
    smart_href_handling : bool, default False
        Emit bare URLs for links whose text equals their target.
    remove_excess_indentation_from_code : bool, default False
        Dedent code block content.
    remove_trailing_whitespace_from_code : bool, default False
        Strip trailing spaces from code block lines.
    max_nesting_depth : int, default 100
        Maximum element nesting accepted before conversion is refused.
    html_parser : {"html.parser", "lxml", "html5lib"}, default "html.parser"
        BeautifulSoup tree builder.
    strip_output : bool, default True
        Strip leading and trailing newlines from the result.

    """

    unknown_tags: UnknownTagsOption = field(
        default=DEFAULT_UNKNOWN_TAGS,
        metadata={
            "help": "Policy for elements without a converter",
            "choices": list(get_args(UnknownTagsOption)),
            "importance": "core",
        },
    )
    pass_through_tags: tuple[str, ...] = field(
        default=(),
        metadata={"help": "Tags always emitted as raw markup", "importance": "advanced"},
    )
    github_flavored: bool = field(
        default=DEFAULT_GITHUB_FLAVORED,
        metadata={"help": "Emit GitHub-flavored code fences and line breaks", "importance": "core"},
    )
    list_bullet_char: BulletSymbol = field(
        default=DEFAULT_LIST_BULLET_CHAR,
        metadata={
            "help": "Bullet character for unordered lists",
            "choices": list(get_args(BulletSymbol)),
            "importance": "core",
        },
    )
    emphasis_char: EmphasisSymbol = field(
        default=DEFAULT_EMPHASIS_CHAR,
        metadata={
            "help": "Emphasis delimiter (doubled for strong)",
            "choices": list(get_args(EmphasisSymbol)),
            "importance": "core",
        },
    )
    horizontal_rule: str = field(
        default=DEFAULT_HORIZONTAL_RULE,
        metadata={"help": "Text emitted for horizontal rules", "importance": "advanced"},
    )
    wrap_line_length: int | None = field(
        default=DEFAULT_WRAP_LINE_LENGTH,
        metadata={"help": "Target line width for wrapped prose (None disables wrapping)", "importance": "core"},
    )
    shortcodes: bool = field(
        default=DEFAULT_SHORTCODES,
        metadata={"help": "Keep {{< ... >}} shortcodes intact while wrapping", "importance": "advanced"},
    )
    default_code_block_language: str = field(
        default="",
        metadata={"help": "Fence language used when no hint is present", "importance": "advanced"},
    )
    code_block_language_mapper: CodeBlockLanguageMapper | None = field(
        default=None,
        metadata={"help": "Maps class-attribute languages to fence languages", "importance": "advanced"},
    )
    whitelist_uri_schemes: tuple[str, ...] = field(
        default=(),
        metadata={"help": "Allowed URI schemes for links and images (empty allows all)", "importance": "security"},
    )
    table_without_header_row_handling: TableHeaderHandling = field(
        default=DEFAULT_TABLE_HEADER_HANDLING,
        metadata={
            "help": "Header strategy for tables without <th> cells",
            "choices": list(get_args(TableHeaderHandling)),
            "importance": "advanced",
        },
    )
    escape_rules: tuple[EscapeRule, ...] = field(
        default=DEFAULT_ESCAPE_RULES,
        metadata={"help": "Ordered escape rewrites applied to text", "importance": "advanced"},
    )
    remove_multiple_consecutive_blank_lines: bool = field(
        default=DEFAULT_REMOVE_BLANK_LINES,
        metadata={"help": "Collapse consecutive blank lines in the output", "importance": "core"},
    )
    remove_comments: bool = field(
        default=DEFAULT_REMOVE_COMMENTS,
        metadata={"help": "Drop HTML comments", "importance": "core"},
    )
    repair_lists: bool = field(
        default=DEFAULT_REPAIR_LISTS,
        metadata={"help": "Move stray list content into list items", "importance": "advanced"},
    )
    smart_href_handling: bool = field(
        default=DEFAULT_SMART_HREF_HANDLING,
        metadata={"help": "Emit bare URLs for links whose text equals the target", "importance": "advanced"},
    )
    remove_excess_indentation_from_code: bool = field(
        default=False,
        metadata={"help": "Dedent code block content", "importance": "advanced"},
    )
    remove_trailing_whitespace_from_code: bool = field(
        default=False,
        metadata={"help": "Strip trailing whitespace from code block lines", "importance": "advanced"},
    )
    max_nesting_depth: int = field(
        default=DEFAULT_MAX_NESTING_DEPTH,
        metadata={"help": "Maximum element nesting depth accepted", "type": int, "importance": "security"},
    )
    html_parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": "BeautifulSoup parser backend",
            "choices": list(get_args(HtmlParser)),
            "importance": "advanced",
        },
    )
    strip_output: bool = field(
        default=DEFAULT_STRIP_OUTPUT,
        metadata={"help": "Strip leading and trailing newlines from the result", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Normalize sequence fields and validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        # Accept lists from config files while keeping the instance hashable
        for name in ("pass_through_tags", "whitelist_uri_schemes", "escape_rules"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

        object.__setattr__(self, "pass_through_tags", tuple(tag.lower() for tag in self.pass_through_tags))

        if self.unknown_tags not in get_args(UnknownTagsOption):
            raise ValueError(
                f"unknown_tags must be one of {get_args(UnknownTagsOption)}, got {self.unknown_tags!r}"
            )
        if self.table_without_header_row_handling not in get_args(TableHeaderHandling):
            raise ValueError(
                "table_without_header_row_handling must be one of "
                f"{get_args(TableHeaderHandling)}, got {self.table_without_header_row_handling!r}"
            )
        if len(self.emphasis_char) != 1:
            raise ValueError(f"emphasis_char must be a single character, got {self.emphasis_char!r}")
        if len(self.list_bullet_char) != 1:
            raise ValueError(f"list_bullet_char must be a single character, got {self.list_bullet_char!r}")
        if self.wrap_line_length is not None and self.wrap_line_length <= 0:
            raise ValueError(f"wrap_line_length must be positive or None, got {self.wrap_line_length}")
        if self.max_nesting_depth <= 0:
            raise ValueError(f"max_nesting_depth must be positive, got {self.max_nesting_depth}")
        for rule in self.escape_rules:
            if not isinstance(rule, EscapeRule):
                raise ValueError(f"escape_rules must contain EscapeRule instances, got {type(rule).__name__}")
