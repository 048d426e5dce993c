#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_list_converters.py
"""Unit tests for ordered and unordered list conversion."""

import pytest

from revmark import Converter, ConverterOptions, MalformedListError, convert


@pytest.mark.unit
class TestUnorderedLists:
    """Tests for <ul> conversion."""

    def test_simple_list(self, converter):
        assert converter.convert("<ul><li>One</li><li>Two</li></ul>") == "- One\n- Two"

    @pytest.mark.parametrize("bullet", ["-", "*", "+"])
    def test_bullet_character(self, bullet):
        assert convert("<ul><li>One</li></ul>", list_bullet_char=bullet) == f"{bullet} One"

    def test_whitespace_between_items_is_ignored(self, converter):
        html = "<ul>\n  <li>One</li>\n  <li>Two</li>\n</ul>"

        assert converter.convert(html) == "- One\n- Two"

    def test_empty_item(self, converter):
        assert converter.convert("<ul><li></li><li>x</li></ul>") == "-\n- x"

    def test_list_between_paragraphs(self, converter):
        html = "<p>before</p><ul><li>item</li></ul><p>after</p>"

        assert converter.convert(html) == "before\n\n- item\n\nafter"


@pytest.mark.unit
class TestOrderedLists:
    """Tests for <ol> conversion."""

    def test_items_are_numbered(self, converter):
        assert converter.convert("<ol><li>a</li><li>b</li><li>c</li></ol>") == "1. a\n2. b\n3. c"

    def test_start_attribute_is_ignored(self, converter):
        assert converter.convert('<ol start="7"><li>a</li><li>b</li></ol>') == "1. a\n2. b"


@pytest.mark.unit
class TestNestedLists:
    """Tests for nested list structures."""

    def test_nested_unordered(self, converter):
        html = "<ul><li>One<ul><li>Two</li></ul></li></ul>"

        assert converter.convert(html) == "- One\n  - Two"

    def test_ordered_inside_unordered(self, converter):
        html = "<ul><li>One<ol><li>a</li><li>b</li></ol></li><li>Two</li></ul>"

        assert converter.convert(html) == "- One\n  1. a\n  2. b\n- Two"

    def test_unordered_inside_ordered_uses_marker_width(self, converter):
        html = "<ol><li>One<ul><li>x</li></ul></li></ol>"

        assert converter.convert(html) == "1. One\n   - x"

    def test_three_levels(self, converter):
        html = "<ul><li>a<ul><li>b<ul><li>c</li></ul></li></ul></li></ul>"

        assert converter.convert(html) == "- a\n  - b\n    - c"

    def test_long_link_in_nested_item_keeps_marker(self, converter):
        url = "http://example.com/" + "a" * 90
        html = f'<ul><li>x<ul><li><a href="{url}">docs</a></li></ul></li></ul>'

        assert converter.convert(html) == f"- x\n  - [docs]({url})"


@pytest.mark.unit
class TestListItemContent:
    """Tests for block content inside list items."""

    def test_paragraphs_in_item(self, converter):
        html = "<ul><li><p>First</p><p>Second</p></li></ul>"

        assert converter.convert(html) == "- First\n\n  Second"

    def test_paragraph_after_text(self, converter):
        html = "<ol><li>a<p>b</p></li></ol>"

        assert converter.convert(html) == "1. a\n\n   b"

    def test_long_item_is_wrapped_and_indented(self):
        html = "<ul><li>aaaa bbbb cccc dddd eeee</li></ul>"

        assert convert(html, wrap_line_length=20) == "- aaaa bbbb cccc\n  dddd eeee"

    def test_code_block_in_item(self, gfm_converter):
        html = "<ul><li>Run:<pre>make\nmake install</pre></li></ul>"

        assert gfm_converter.convert(html) == "- Run:\n\n  ```\n  make\n  make install\n  ```"


@pytest.mark.unit
class TestMalformedLists:
    """Tests for content placed directly inside <ol>/<ul>."""

    def test_stray_paragraph_is_repaired(self, converter):
        assert converter.convert("<ul><p>x</p></ul>") == "- x"

    def test_stray_paragraph_joins_previous_item(self, converter):
        assert converter.convert("<ol><li>a</li><p>b</p></ol>") == "1. a\n\n   b"

    def test_stray_paragraph_raises_without_repair(self):
        converter = Converter(ConverterOptions(repair_lists=False))

        with pytest.raises(MalformedListError) as exc_info:
            converter.convert("<ul><p>x</p></ul>")

        assert str(exc_info.value) == "Malformed list."
        assert exc_info.value.tag_name == "p"
