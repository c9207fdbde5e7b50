"""Human-readable dump of a parsed document tree."""

from __future__ import annotations

import sys
from typing import TextIO

from htmlfig.nodes import Comment, Document, Element, Node, Text


def dump_tree(doc: Document, *, file: TextIO = sys.stderr) -> None:
    """Print the parsed tree to *file*."""
    file.write(format_tree(doc))


def format_tree(doc: Document) -> str:
    lines: list[str] = ["Document"]
    lines.append(f"{_indent(1)}Head")
    for node in doc.head:
        _dump_node(node, 2, lines)
    lines.append(f"{_indent(1)}Body")
    for node in doc.body:
        _dump_node(node, 2, lines)
    return "\n".join(lines) + "\n"


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_node(node: Node, depth: int, lines: list[str]) -> None:
    if isinstance(node, Text):
        lines.append(f"{_indent(depth)}Text({node.data!r})")
    elif isinstance(node, Comment):
        lines.append(f"{_indent(depth)}Comment({node.data!r})")
    elif isinstance(node, Element):
        lines.append(f"{_indent(depth)}Element <{node.tag}>")
        for name, value in node.attrs:
            lines.append(f"{_indent(depth + 1)}Attr {name}={value!r}")
        for child in node.children:
            _dump_node(child, depth + 1, lines)
