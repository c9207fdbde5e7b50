"""Parser adapter tests against the real justhtml parser."""

from __future__ import annotations

import pytest

from htmlfig.errors import DocumentParseError
from htmlfig.nodes import Comment, Element, Text
from htmlfig.parser import parse_document


class TestParseDocument:
    def test_body_element(self) -> None:
        doc = parse_document("<p>hi</p>")
        assert doc.head == ()
        assert doc.body == (Element("p", (), (Text("hi"),)),)

    def test_head_element(self) -> None:
        doc = parse_document("<title>T</title><p>x</p>")
        assert doc.head == (Element("title", (), (Text("T"),)),)
        assert doc.body == (Element("p", (), (Text("x"),)),)

    def test_attribute_order(self) -> None:
        doc = parse_document('<a href="/x" class="link">z</a>')
        [a] = doc.body
        assert isinstance(a, Element)
        assert a.attrs == (("href", "/x"), ("class", "link"))

    def test_comment_kept(self) -> None:
        doc = parse_document("<p>a<!-- c --></p>")
        [p] = doc.body
        assert isinstance(p, Element)
        assert p.children == (Text("a"), Comment(" c "))

    def test_namespaced_tag(self) -> None:
        doc = parse_document("<ui:button>go</ui:button>")
        assert doc.body == (Element("ui:button", (), (Text("go"),)),)

    def test_placeholders_pass_through(self) -> None:
        doc = parse_document('<p title="$fig-3">$fig-4</p>')
        assert doc.body == (Element("p", (("title", "$fig-3"),), (Text("$fig-4"),)),)

    def test_explicit_doctype_accepted(self) -> None:
        doc = parse_document("<!DOCTYPE html><p>x</p>")
        assert doc.body == (Element("p", (), (Text("x"),)),)

    def test_markup_is_not_sanitized(self) -> None:
        doc = parse_document('<ui:button onclick="$fig-1" data:testid="b">go<!-- c --></ui:button>')
        assert doc.body == (
            Element(
                "ui:button",
                (("onclick", "$fig-1"), ("data:testid", "b")),
                (Text("go"), Comment(" c ")),
            ),
        )


class TestStrictMode:
    def test_stray_end_tag_raises(self) -> None:
        with pytest.raises(DocumentParseError) as exc_info:
            parse_document("<p>x</p></span>")
        err = exc_info.value
        assert err.line == 1
        assert err.source == "<p>x</p></span>"

    def test_null_character_raises(self) -> None:
        with pytest.raises(DocumentParseError):
            parse_document("<p>\x00</p>")

    def test_lenient_mode_recovers(self) -> None:
        doc = parse_document("<p>x</p></span>", strict=False)
        assert doc.body == (Element("p", (), (Text("x"),)),)
