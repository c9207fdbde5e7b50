"""HTML parsing adapter — runs justhtml and converts its tree to htmlfig nodes."""

from __future__ import annotations

import re
from typing import Any

from justhtml import JustHTML, StrictModeError

from htmlfig.errors import DocumentParseError
from htmlfig.nodes import Comment, Document, Element, Node, Text

DOCTYPE = "<!DOCTYPE html>"
_HAS_DOCTYPE = re.compile(r"^\s*<!doctype\b", re.IGNORECASE)

# justhtml node names that are not elements
_TEXT = "#text"
_COMMENT = "#comment"
_SKIPPED = frozenset({"!doctype", "#document", "#document-fragment"})


def parse_document(markup: str, *, strict: bool = True) -> Document:
    """Parse markup as a full HTML document and return its head and body nodes.

    In strict mode the first parse error raises DocumentParseError. A doctype is
    supplied when the markup has none, so its absence is never reported.
    Sanitizing is off: component tags, event attributes and comments must all
    reach the renderer.
    """
    prefix = "" if _HAS_DOCTYPE.match(markup) else DOCTYPE
    try:
        doc = JustHTML(prefix + markup, strict=strict, sanitize=False)
    except StrictModeError as exc:
        raise _translate(exc, markup, prefix) from exc

    html = _find_child(doc.root, "html")
    if html is None:
        raise DocumentParseError("document has no html element", markup)
    head = _find_child(html, "head")
    body = _find_child(html, "body")
    if head is None or body is None:
        raise DocumentParseError("document is missing its head or body", markup)

    return Document(head=_convert_children(head), body=_convert_children(body))


def _translate(exc: StrictModeError, markup: str, prefix: str) -> DocumentParseError:
    error = exc.error
    code = getattr(error, "code", None)
    message = getattr(error, "message", None) or code or str(exc)
    line = getattr(error, "line", None)
    column = getattr(error, "column", None)
    # Report positions relative to the caller's markup, not the doctype prefix
    if prefix and line == 1 and column is not None:
        column = max(1, column - len(prefix))
    return DocumentParseError(message, markup, line=line, column=column, code=code)


def _find_child(node: Any, name: str) -> Any | None:
    for child in node.children or ():
        if child.name == name:
            return child
    return None


def _convert_children(node: Any) -> tuple[Node, ...]:
    converted: list[Node] = []
    for child in node.children or ():
        result = _convert(child)
        if result is not None:
            converted.append(result)
    return tuple(converted)


def _convert(node: Any) -> Node | None:
    name = node.name
    if name == _TEXT:
        return Text(node.data)
    if name == _COMMENT:
        return Comment(node.data)
    if name in _SKIPPED:
        return None
    attrs = tuple((key, value) for key, value in (node.attrs or {}).items())
    return Element(name, attrs, _convert_children(node))
