#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/revmark/__init__.py
"""revmark - convert HTML to clean, stably wrapped Markdown.

Basic usage::

    from revmark import convert

    markdown = convert("<h1>Title</h1><p>Some <em>text</em>.</p>")

For repeated conversions with the same configuration, construct a
:class:`Converter` once and reuse it::

    from revmark import Converter, ConverterOptions

    converter = Converter(ConverterOptions(github_flavored=True))
    markdown = converter.convert(html)

"""

from revmark.converter import Converter, convert
from revmark.exceptions import (
    ConversionError,
    DependencyError,
    MalformedListError,
    MalformedShortcodeError,
    RevmarkError,
    UnknownTagError,
    ValidationError,
)
from revmark.language_mapper import CodeBlockLanguageMapper
from revmark.options import ConverterOptions
from revmark.utils.escape import DEFAULT_ESCAPE_RULES, EscapeRule

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_ESCAPE_RULES",
    "CodeBlockLanguageMapper",
    "ConversionError",
    "Converter",
    "ConverterOptions",
    "DependencyError",
    "EscapeRule",
    "MalformedListError",
    "MalformedShortcodeError",
    "RevmarkError",
    "UnknownTagError",
    "ValidationError",
    "__version__",
    "convert",
]
