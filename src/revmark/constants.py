#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/revmark/constants.py
"""Constants, type aliases and defaults shared across revmark.

Option defaults live here so that the options dataclasses, the CLI and the
converters agree on a single value. Tag classifications used by the whitespace
model and the formatting rules are also defined here.
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type aliases
# =============================================================================

UnknownTagsOption = Literal["pass_through", "drop", "bypass", "raise"]
"""Policy applied to elements without a registered converter."""

TableHeaderHandling = Literal["first_row", "empty_row"]
"""How tables without ``<th>`` cells produce the Markdown header row."""

EmphasisSymbol = Literal["*", "_"]
"""Delimiter used for emphasis (doubled for strong emphasis)."""

BulletSymbol = Literal["-", "*", "+"]
"""Marker used for unordered list items."""

HtmlParser = Literal["html.parser", "lxml", "html5lib"]
"""BeautifulSoup tree builder name."""

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_UNKNOWN_TAGS: UnknownTagsOption = "pass_through"
DEFAULT_TABLE_HEADER_HANDLING: TableHeaderHandling = "first_row"
DEFAULT_EMPHASIS_CHAR: EmphasisSymbol = "*"
DEFAULT_LIST_BULLET_CHAR: BulletSymbol = "-"
DEFAULT_HORIZONTAL_RULE = "* * *"
DEFAULT_WRAP_LINE_LENGTH = 80
DEFAULT_GITHUB_FLAVORED = False
DEFAULT_SHORTCODES = False
DEFAULT_REMOVE_COMMENTS = False
DEFAULT_REPAIR_LISTS = True
DEFAULT_SMART_HREF_HANDLING = False
DEFAULT_REMOVE_BLANK_LINES = True
DEFAULT_STRIP_OUTPUT = True
DEFAULT_MAX_NESTING_DEPTH = 100
DEFAULT_HTML_PARSER: HtmlParser = "html.parser"

# Width of the literal indentation used for non-fenced code blocks
CODE_BLOCK_INDENT = "    "

# Width consumed by each enclosing blockquote marker ("> ")
BLOCKQUOTE_MARKER_WIDTH = 2

# Placeholder cell emitted when a header row has to be synthesized
EMPTY_HEADER_CELL = "<!---->"

# =============================================================================
# Tag classification
# =============================================================================

BLOCK_ELEMENTS = frozenset(
    {
        "address",
        "article",
        "aside",
        "blockquote",
        "canvas",
        "caption",
        "dd",
        "div",
        "dl",
        "dt",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "header",
        "hr",
        "li",
        "main",
        "nav",
        "noscript",
        "ol",
        "p",
        "pre",
        "section",
        "table",
        "tbody",
        "td",
        "tfoot",
        "th",
        "thead",
        "tr",
        "ul",
        "video",
    }
)

HEADING_ELEMENTS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
LIST_ELEMENTS = frozenset({"ol", "ul"})
TABLE_CELL_ELEMENTS = frozenset({"td", "th"})

# Elements that participate in width computation and trimming
WRAPPABLE_ELEMENTS = frozenset({"blockquote", "div", "li", "p"})

# A div wrapping exactly one of these only contributes the child's content
DIV_TRANSPARENT_CHILDREN = frozenset({"p", "pre", "ol", "ul", "table"})

SHORTCODE_OPEN = "{{<"
SHORTCODE_CLOSE = ">}}"

# Elements whose text is never whitespace-normalized
RAW_TEXT_ELEMENTS = frozenset({"pre", "script", "style", "textarea"})
