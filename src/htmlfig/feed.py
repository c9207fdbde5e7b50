"""Reference feeding — splits text at placeholders and restores the values."""

from __future__ import annotations

from typing import Any

from htmlfig.refs import PLACEHOLDER_RE, Refs, is_placeholder


def feed(text: str, refs: Refs) -> list[Any]:
    """Return literal segments and original values of text in order.

    Empty literal segments are never emitted. A placeholder with no entry in
    refs, or whose value is falsy, contributes nothing.
    """
    if is_placeholder(text):
        value = refs.get(text)
        return [value] if value else []

    segments: list[Any] = []
    last = 0
    for match in PLACEHOLDER_RE.finditer(text):
        before = text[last : match.start()]
        if before:
            segments.append(before)
        value = refs.get(match.group())
        if value:
            segments.append(value)
        last = match.end()

    after = text[last:]
    if after:
        segments.append(after)
    return segments
