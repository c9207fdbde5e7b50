"""Tree renderer — converts parsed nodes into host element values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from htmlfig.attrs import normalize_attribute
from htmlfig.feed import feed
from htmlfig.nodes import Comment, Document, Element, Node, Text
from htmlfig.refs import Refs
from htmlfig.resolve import resolve_component

CreateFunction = Callable[..., Any]


def render_document(
    doc: Document,
    refs: Refs,
    names: Mapping[str, Any],
    create: CreateFunction,
) -> list[Any]:
    """Render the head nodes, then the body nodes, into one flat list."""
    return _render_all((*doc.head, *doc.body), refs, names, create)


def render(
    node: Node,
    refs: Refs,
    names: Mapping[str, Any],
    create: CreateFunction,
) -> list[Any]:
    """Render one node into zero or more host values.

    Text nodes expand to their fed segments, comments vanish, and elements
    become a single ``create(identity, props, *children)`` result.
    """
    match node:
        case Text(data=None):
            return []
        case Text(data=data):
            return feed(data, refs)
        case Comment():
            return []
        case Element():
            return [_render_element(node, refs, names, create)]
        case _:
            raise TypeError(f"cannot render {type(node).__name__}")


def _render_all(
    nodes: Iterable[Node],
    refs: Refs,
    names: Mapping[str, Any],
    create: CreateFunction,
) -> list[Any]:
    produced: list[Any] = []
    for node in nodes:
        produced.extend(render(node, refs, names, create))
    return produced


def _render_element(
    element: Element,
    refs: Refs,
    names: Mapping[str, Any],
    create: CreateFunction,
) -> Any:
    tag = element.tag.lower()

    props: dict[str, Any] = {}
    for name, raw in element.attrs:
        attr = normalize_attribute(name, raw, refs)
        if attr is None:
            continue
        key, value = attr
        props[key] = value

    children = _render_all(element.children, refs, names, create)

    component = resolve_component(tag, names)
    identity = component if component is not None else tag
    return create(identity, props, *children)
