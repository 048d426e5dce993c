#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_code_converters.py
"""Unit tests for code block and inline code conversion.

Tests cover:
- Indented code blocks in basic Markdown
- Fenced code blocks with language detection in GitHub-flavored Markdown
- Language mapping and default languages
- Inline code spans containing backticks

"""

import pytest

from revmark import CodeBlockLanguageMapper, Converter, ConverterOptions, ValidationError, convert


def gfm(**overrides):
    return Converter(ConverterOptions(github_flavored=True, **overrides))


@pytest.mark.unit
class TestIndentedCodeBlocks:
    """Tests for <pre> in basic Markdown."""

    def test_lines_are_indented(self, converter):
        assert converter.convert("<pre>line1\n  line2</pre>") == "    line1\n      line2"

    def test_leading_newline_is_dropped(self, converter):
        assert converter.convert("<pre>\nfoo</pre>") == "    foo"

    def test_blank_lines_are_not_indented(self, converter):
        assert converter.convert("<pre>a\n\nb</pre>") == "    a\n\n    b"

    def test_content_is_not_escaped(self, converter):
        assert converter.convert("<pre>a * b_c &lt;x&gt;</pre>") == "    a * b_c <x>"

    def test_code_block_is_not_wrapped(self):
        assert convert("<pre>aaaa bbbb cccc dddd</pre>", wrap_line_length=10) == "    aaaa bbbb cccc dddd"

    def test_empty_block(self, converter):
        assert converter.convert("<pre></pre>") == ""

    def test_separated_from_paragraphs(self, converter):
        assert converter.convert("<p>a</p><pre>x</pre><p>b</p>") == "a\n\n    x\n\nb"


@pytest.mark.unit
class TestFencedCodeBlocks:
    """Tests for <pre> in GitHub-flavored Markdown."""

    def test_fence_without_language(self, gfm_converter):
        assert gfm_converter.convert("<pre>x = 1</pre>") == "```\nx = 1\n```"

    @pytest.mark.parametrize(
        "class_name,language",
        [
            ("language-python", "python"),
            ("lang-ruby", "ruby"),
            ("highlight-go", "go"),
            ("highlight-source-rust", "rust"),
            ("brush: csharp", "csharp"),
        ],
    )
    def test_language_from_class(self, gfm_converter, class_name, language):
        html = f'<pre class="{class_name}">code</pre>'

        assert gfm_converter.convert(html) == f"```{language}\ncode\n```"

    def test_language_from_nested_code(self, gfm_converter):
        html = '<pre><code class="language-js">let x;</code></pre>'

        assert gfm_converter.convert(html) == "```js\nlet x;\n```"

    def test_language_from_parent(self, gfm_converter):
        html = '<div class="highlight-source-python"><pre>x = 1</pre></div>'

        assert gfm_converter.convert(html) == "```python\nx = 1\n```"

    def test_default_language(self):
        assert gfm(default_code_block_language="text").convert("<pre>x</pre>") == "```text\nx\n```"

    def test_language_mapper(self):
        converter = gfm(code_block_language_mapper=CodeBlockLanguageMapper.with_common_aliases())

        assert converter.convert('<pre class="language-js">x</pre>') == "```javascript\nx\n```"

    def test_strict_language_mapper_raises(self):
        mapper = CodeBlockLanguageMapper(allow_unmapped_languages=False)
        converter = gfm(code_block_language_mapper=mapper)

        with pytest.raises(ValidationError):
            converter.convert('<pre class="language-cobol">x</pre>')

    def test_fence_grows_past_backtick_runs(self, gfm_converter):
        assert gfm_converter.convert("<pre>a ``` b</pre>") == "````\na ``` b\n````"

    def test_trailing_whitespace_is_removed_from_fenced_content(self, gfm_converter):
        assert gfm_converter.convert("<pre>x\n\n</pre>") == "```\nx\n```"

    def test_dedent_option(self):
        converter = gfm(remove_excess_indentation_from_code=True)

        assert converter.convert("<pre>    a\n      b</pre>") == "```\na\n  b\n```"

    def test_trailing_whitespace_option(self):
        converter = gfm(remove_trailing_whitespace_from_code=True)

        assert converter.convert("<pre>a   \nb  </pre>") == "```\na\nb\n```"


@pytest.mark.unit
class TestInlineCode:
    """Tests for inline <code>."""

    def test_inline_code(self, converter):
        assert converter.convert("<p>Use <code>x = 1</code> now</p>") == "Use `x = 1` now"

    def test_content_is_not_escaped(self, converter):
        assert converter.convert("<p><code>a*b</code></p>") == "`a*b`"

    def test_backtick_inside(self, converter):
        assert converter.convert("<p><code>a`b</code></p>") == "``a`b``"

    def test_backtick_at_edge_is_padded(self, converter):
        assert converter.convert("<p><code>`a</code></p>") == "`` `a ``"

    def test_empty_code(self, converter):
        assert converter.convert("<p>a<code></code>b</p>") == "ab"
