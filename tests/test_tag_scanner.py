"""Tests for the shared HTML tag scanner."""

from accessibility_toolkit.analyzer.tag_scanner import (
    count_elements,
    get_attribute,
    has_attribute,
    inner_text,
)


class TestCountElements:
    def test_counts_opening_tags_only(self):
        counts = count_elements("<div><p>Hi</p></div><div class='x'></div>")
        assert counts == {"div": 2, "p": 1}

    def test_tag_names_are_lowercased(self):
        assert count_elements("<DIV></DIV><Div>")["div"] == 2

    def test_self_closing_and_attributed_tags(self):
        counts = count_elements('<img src="a.png"/><br/><input type="text">')
        assert counts == {"img": 1, "br": 1, "input": 1}

    def test_doctype_and_comments_are_ignored(self):
        assert count_elements("<!DOCTYPE html><!-- note -->") == {}

    def test_tags_inside_comments_are_counted(self):
        assert count_elements("<!-- <p> -->") == {"p": 1}

    def test_malformed_markup_does_not_raise(self):
        assert count_elements("< div <> <<") == {}
        assert count_elements("") == {}


class TestAttributes:
    def test_get_attribute(self):
        assert get_attribute(' id="main" class="x"', "id") == "main"
        assert get_attribute(" id='main'", "id") == "main"
        assert get_attribute(' class="x"', "id") is None

    def test_empty_values(self):
        assert get_attribute(' alt=""', "alt") is None
        assert get_attribute(' alt=""', "alt", allow_empty=True) == ""

    def test_has_attribute(self):
        assert has_attribute(' aria-label="Close"', "aria-label")
        assert not has_attribute(' aria-labelledby="t"', "aria-label")


class TestInnerText:
    def test_plain_text_is_stripped(self):
        assert inner_text("  Hello  ") == "Hello"

    def test_markup_is_removed(self):
        assert inner_text('<span class="icon"></span> Save <b>now</b>') == "Save now"

    def test_entities_are_decoded(self):
        assert inner_text("Terms &amp; Conditions") == "Terms & Conditions"

    def test_markup_only_is_empty(self):
        assert inner_text('<svg><path d="M0"/></svg>') == ""

    def test_unparseable_markup_falls_back_to_stripping(self):
        assert inner_text("<![foo]>Save &amp; exit") == "Save & exit"
        assert isinstance(inner_text("<![ bogus"), str)
