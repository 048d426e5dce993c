"""Unit tests for HTML whitespace normalization."""

import pytest
from bs4 import BeautifulSoup

from revmark.formatters.html import (
    is_leading_whitespace_significant,
    is_trailing_whitespace_significant,
    normalize_whitespace,
    remove_insignificant_whitespace,
)


def _soup(html):
    return BeautifulSoup(html, "html.parser")


@pytest.mark.unit
class TestRemoveInsignificantWhitespace:
    """Tests for remove_insignificant_whitespace."""

    def test_leading_whitespace_in_paragraph(self):
        soup = _soup("<p>  \t \n This is a paragraph.</p>")

        remove_insignificant_whitespace(soup)

        assert str(soup) == "<p>This is a paragraph.</p>"

    def test_trailing_whitespace_in_paragraph(self):
        soup = _soup("<p>This is a paragraph. \n </p>")

        remove_insignificant_whitespace(soup)

        assert str(soup) == "<p>This is a paragraph.</p>"

    def test_whitespace_between_inline_elements_is_kept(self):
        html = "<b>bold</b> <i>italic</i>"
        soup = _soup(html)

        remove_insignificant_whitespace(soup)

        assert str(soup) == html

    def test_whitespace_before_inline_element_is_kept(self):
        html = "<p>Hello <em>world</em></p>"
        soup = _soup(html)

        remove_insignificant_whitespace(soup)

        assert str(soup) == html

    def test_whitespace_between_blocks_is_removed(self):
        soup = _soup("<div>\n  <p>a</p>\n  <p>b</p>\n</div>")

        remove_insignificant_whitespace(soup)

        assert str(soup) == "<div><p>a</p><p>b</p></div>"

    def test_preformatted_text_is_untouched(self):
        html = "<pre>\n  indented\n</pre>"
        soup = _soup(html)

        remove_insignificant_whitespace(soup)

        assert str(soup) == html


@pytest.mark.unit
class TestNormalizeWhitespace:
    """Tests for normalize_whitespace."""

    def test_runs_collapse_to_one_space(self):
        soup = _soup("<p>a \n\t b</p>")

        normalize_whitespace(soup)

        assert str(soup) == "<p>a b</p>"

    def test_edges_are_reduced_not_removed(self):
        soup = _soup("<p>\n\n a \n\n</p>")

        normalize_whitespace(soup)

        assert str(soup) == "<p> a </p>"

    @pytest.mark.parametrize("tag", ["pre", "textarea"])
    def test_raw_text_elements_are_untouched(self, tag):
        html = f"<{tag}>a  \n  b</{tag}>"
        soup = _soup(html)

        normalize_whitespace(soup)

        assert str(soup) == html


@pytest.mark.unit
class TestSignificance:
    """Tests for the whitespace significance predicates."""

    def test_text_next_to_block_parent_is_insignificant(self):
        text = _soup("<p> a </p>").p.string

        assert is_leading_whitespace_significant(text) is False
        assert is_trailing_whitespace_significant(text) is False

    def test_text_next_to_inline_sibling_is_significant(self):
        text = _soup("<p><b>x</b> a <i>y</i></p>").b.next_sibling

        assert is_leading_whitespace_significant(text) is True
        assert is_trailing_whitespace_significant(text) is True

    def test_text_under_pre_is_always_significant(self):
        text = _soup("<pre><code> a </code></pre>").code.string

        assert is_leading_whitespace_significant(text) is True
        assert is_trailing_whitespace_significant(text) is True
