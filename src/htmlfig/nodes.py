"""Parsed node types handed from the HTML parser to the renderer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Text:
    """Character data, possibly holding placeholders."""

    data: str | None


@dataclass(frozen=True, slots=True)
class Comment:
    """Markup comment (dropped by the renderer)."""

    data: str | None


@dataclass(frozen=True, slots=True)
class Element:
    """An element with its attributes and children in document order."""

    tag: str
    attrs: tuple[tuple[str, str | None], ...] = ()
    children: tuple[Node, ...] = ()


Node = Element | Text | Comment


@dataclass(frozen=True, slots=True)
class Document:
    """Top-level head and body nodes of a parsed document."""

    head: tuple[Node, ...] = ()
    body: tuple[Node, ...] = ()
