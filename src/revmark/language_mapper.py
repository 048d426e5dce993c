#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/revmark/language_mapper.py
"""Mapping between HTML class-attribute languages and Markdown fence languages.

Code blocks exported from syntax highlighters carry language hints such as
``class="brush: csharp"`` or ``class="language-js"``. The mapper translates the
hint into the name written after the opening fence.
"""

from __future__ import annotations

import logging

from revmark.exceptions import ValidationError

logger = logging.getLogger(__name__)

# Common abbreviations found in highlighter class names
COMMON_LANGUAGE_ALIASES = {
    "js": "javascript",
    "ts": "typescript",
    "py": "python",
    "rb": "ruby",
    "sh": "bash",
    "yml": "yaml",
    "md": "markdown",
    "cs": "csharp",
    "fs": "fsharp",
    "kt": "kotlin",
    "rs": "rust",
}


class CodeBlockLanguageMapper:
    """Bidirectional, case-insensitive language name mapping.

    Parameters
    ----------
    allow_unmapped_languages : bool, default True
        Pass languages without a mapping through unchanged. When False, looking
        up an unmapped language raises :class:`ValidationError`.

    Examples
    --------
    >>> mapper = CodeBlockLanguageMapper()
    >>> mapper.add_mapping("vbnet", "Visual Basic .NET")
    >>> mapper.get_markdown_language("VBNET")
    'Visual Basic .NET'
    >>> mapper.get_markdown_language("python")
    'python'

    """

    def __init__(self, allow_unmapped_languages: bool = True):
        """Initialize an empty mapper."""
        self.allow_unmapped_languages = allow_unmapped_languages
        self._markdown_by_html: dict[str, str] = {}
        self._html_by_markdown: dict[str, str] = {}

    @classmethod
    def with_common_aliases(cls, allow_unmapped_languages: bool = True) -> CodeBlockLanguageMapper:
        """Create a mapper preloaded with :data:`COMMON_LANGUAGE_ALIASES`."""
        mapper = cls(allow_unmapped_languages=allow_unmapped_languages)
        for html_language, markdown_language in COMMON_LANGUAGE_ALIASES.items():
            mapper.add_mapping(html_language, markdown_language)
        return mapper

    def add_mapping(self, html_language: str, markdown_language: str) -> None:
        """Register a mapping in both directions.

        Parameters
        ----------
        html_language : str
            Language name as it appears in the class attribute (e.g. ``"csharp"``)
        markdown_language : str
            Language name written after the code fence (e.g. ``"C#"``)

        Raises
        ------
        ValidationError
            If either name is already mapped

        """
        html_key = html_language.lower()
        markdown_key = markdown_language.lower()
        if html_key in self._markdown_by_html:
            raise ValidationError(
                f"A mapping already exists for language ({html_language}).",
                parameter_name="html_language",
                parameter_value=html_language,
            )
        if markdown_key in self._html_by_markdown:
            raise ValidationError(
                f"A mapping already exists for language ({markdown_language}).",
                parameter_name="markdown_language",
                parameter_value=markdown_language,
            )
        self._markdown_by_html[html_key] = markdown_language
        self._html_by_markdown[markdown_key] = html_language

    def get_markdown_language(self, html_language: str) -> str:
        """Return the fence language for a class-attribute language."""
        return self._lookup(self._markdown_by_html, html_language)

    def get_class_attribute_language(self, markdown_language: str) -> str:
        """Return the class-attribute language for a fence language."""
        return self._lookup(self._html_by_markdown, markdown_language)

    def _lookup(self, table: dict[str, str], language: str) -> str:
        mapped = table.get(language.lower())
        if mapped is not None:
            return mapped

        if not self.allow_unmapped_languages:
            raise ValidationError(
                f"No mapping found for language ({language}).",
                parameter_name="language",
                parameter_value=language,
            )

        logger.debug("No mapping for code block language %r; passing it through", language)
        return language
