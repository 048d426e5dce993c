#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_converter.py
"""Unit tests for the Converter dispatcher and conversion pipeline.

Tests cover:
- Converter registry and lookup
- Unknown tag policies and pass-through tags
- Nesting depth guard
- Output post-processing options
- Shortcode-aware conversion

"""

import pytest
from bs4 import BeautifulSoup
from hypothesis import given
from hypothesis import strategies as st

from revmark import (
    Converter,
    ConverterOptions,
    UnknownTagError,
    ValidationError,
    convert,
)
from revmark.converters import DEFAULT_CONVERTERS, ParagraphConverter
from revmark.converters.fallback import PassThroughConverter, UnknownTagConverter

words = st.lists(st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=10), min_size=1, max_size=40)


class ShoutingParagraphConverter(ParagraphConverter):
    def get_content(self, node):
        return super().get_content(node).upper()


@pytest.mark.unit
class TestRegistry:
    """Tests for converter registration and lookup."""

    def test_default_tags_are_registered(self, converter):
        for tag in ("p", "div", "blockquote", "h1", "ul", "li", "pre", "code", "a", "img", "table", "td"):
            assert tag in converter.registered_tags

    def test_lookup_ignores_case(self, converter):
        assert isinstance(converter.lookup("P"), ParagraphConverter)

    def test_unregistered_tag_uses_fallback(self, converter):
        assert isinstance(converter.lookup("custom-element"), UnknownTagConverter)

    def test_pass_through_tags_take_priority(self):
        converter = Converter(ConverterOptions(pass_through_tags=("p",)))

        assert isinstance(converter.lookup("p"), PassThroughConverter)

    def test_later_converter_overrides_earlier(self):
        converter = Converter(converters=DEFAULT_CONVERTERS + (ShoutingParagraphConverter,))

        assert converter.convert("<p>hi</p>") == "HI"

    def test_custom_registration_list(self):
        converter = Converter(converters=[ParagraphConverter])

        assert converter.registered_tags == frozenset({"p"})


@pytest.mark.unit
class TestUnknownTags:
    """Tests for the unknown tag policies."""

    HTML = "<p><foo>bar</foo></p>"

    def test_pass_through_by_default(self, converter):
        assert converter.convert(self.HTML) == "<foo>bar</foo>"

    def test_drop(self):
        assert convert(self.HTML + "<p>x</p>", unknown_tags="drop") == "x"

    def test_bypass(self):
        assert convert(self.HTML, unknown_tags="bypass") == "bar"

    def test_raise(self):
        with pytest.raises(UnknownTagError) as exc_info:
            convert(self.HTML, unknown_tags="raise")

        assert str(exc_info.value) == "Unknown tag: foo"
        assert exc_info.value.tag_name == "foo"

    def test_pass_through_tags_ignore_policy(self):
        result = convert("<p>a<sup>2</sup></p>", unknown_tags="drop", pass_through_tags=("sup",))

        assert result == "a<sup>2</sup>"

    def test_known_structural_tags_are_bypassed(self, converter):
        assert converter.convert("<p><span>a</span> <span>b</span></p>") == "a b"

    def test_colgroup_is_dropped(self, converter):
        html = '<table><colgroup><col width="10"></colgroup><tr><th>A</th></tr></table>'

        assert converter.convert(html) == "| A |\n| --- |"


@pytest.mark.unit
class TestPipeline:
    """Tests for the conversion pipeline."""

    def test_none_input_raises(self, converter):
        with pytest.raises(ValidationError):
            converter.convert(None)

    def test_empty_input(self, converter):
        assert converter.convert("") == ""

    def test_module_level_convert_applies_overrides(self):
        base = ConverterOptions(list_bullet_char="+")

        assert convert("<ul><li>One</li><li>Two</li></ul>", base) == "+ One\n+ Two"
        assert convert("<ul><li>One</li><li>Two</li></ul>", base, list_bullet_char="*") == "* One\n* Two"

    def test_blank_lines_kept_when_collapse_disabled(self):
        result = convert("<p>a</p><p>b</p>", remove_multiple_consecutive_blank_lines=False)

        assert result == "a\n\nb"

    def test_strip_output_disabled(self):
        assert convert("<p>a</p>", strip_output=False) == "\na\n"

    def test_convert_tree_on_parsed_subtree(self, converter):
        soup = BeautifulSoup("<div><p>a</p></div><p>b</p>", "html.parser")

        assert converter.convert_tree(soup.div) == "a"

    def test_convert_node_on_text(self, converter):
        soup = BeautifulSoup("<p>2 * 3</p>", "html.parser")

        assert converter.convert_node(soup.p.string) == "2 \\* 3"

    def test_converter_is_reusable(self, converter):
        first = converter.convert("<p><em>a</em></p>")
        converter.convert("<ul><li>x</li></ul>")

        assert converter.convert("<p><em>a</em></p>") == first


@pytest.mark.unit
class TestNestingDepth:
    """Tests for the nesting depth guard."""

    def test_deep_document_raises(self, converter):
        html = "<div>" * 150 + "x" + "</div>" * 150

        with pytest.raises(ValidationError) as exc_info:
            converter.convert(html)

        assert exc_info.value.parameter_name == "max_nesting_depth"

    def test_limit_is_configurable(self):
        html = "<div>" * 150 + "x" + "</div>" * 150

        assert convert(html, max_nesting_depth=200) == "x"

    def test_shallow_limit(self):
        with pytest.raises(ValidationError):
            convert("<div><p><em>x</em></p></div>", max_nesting_depth=2)

    def test_emphasis_chain_within_limit(self, converter):
        html = "<p>" + "<em>" * 90 + "x" + "</em>" * 90 + "</p>"

        assert converter.convert(html) == "*x*"

    def test_blockquote_chain_within_limit(self, converter):
        html = "<blockquote>" * 98 + "x" + "</blockquote>" * 98

        assert converter.convert(html) == "> " * 98 + "x"

    def test_raised_limit_beyond_call_stack_raises_validation_error(self):
        html = "<p>" + "<em>" * 2000 + "x" + "</em>" * 2000 + "</p>"

        with pytest.raises(ValidationError) as exc_info:
            convert(html, max_nesting_depth=5000)

        assert exc_info.value.parameter_name == "max_nesting_depth"
        assert isinstance(exc_info.value.__cause__, RecursionError)


@pytest.mark.unit
class TestShortcodes:
    """Tests for shortcode-aware conversion."""

    def test_shortcode_markers_are_not_encoded(self):
        result = convert("<p>{{< gist spf13 7896402 >}}</p>", shortcodes=True)

        assert result == "{{< gist spf13 7896402 >}}"

    def test_shortcode_wraps_at_parameter_boundaries(self):
        result = convert("<p>See {{< figure src='a.png' >}} here</p>", shortcodes=True, wrap_line_length=20)

        assert result == "See {{< figure\nsrc='a.png' >}} here"

    def test_no_line_starts_with_closing_marker(self):
        html = "<p>word word word {{< youtube w7Ft2ymGmfc >}} word word</p>"

        result = convert(html, shortcodes=True, wrap_line_length=12)

        for line in result.split("\n"):
            assert not line.startswith(">}}")


@pytest.mark.unit
class TestWrapProperties:
    """Property-based tests for end-to-end wrapping."""

    @given(words)
    def test_paragraph_lines_fit(self, paragraph_words):
        result = convert(f"<p>{' '.join(paragraph_words)}</p>", wrap_line_length=30)

        assert all(len(line) <= 30 for line in result.split("\n"))
        assert result.split() == paragraph_words

    @given(words)
    def test_quoted_list_lines_fit(self, item_words):
        html = f"<blockquote><ul><li>{' '.join(item_words)}</li></ul></blockquote>"

        result = convert(html, wrap_line_length=30)

        assert all(len(line) <= 30 for line in result.split("\n"))
