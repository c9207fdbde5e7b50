"""Attribute normalization — namespaced names and restored values."""

from __future__ import annotations

import re
from typing import Any

from htmlfig.feed import feed
from htmlfig.refs import Refs

_NAMESPACED = re.compile(r"^(\w+):(\w+)$")


def normalize_name(name: str) -> str:
    """Camel-case a ``namespace:name`` attribute (``data:testId`` -> ``dataTestId``)."""
    match = _NAMESPACED.match(name)
    if match is None:
        return name
    prefix, local = match.groups()
    return f"{prefix}{local[:1].upper()}{local[1:]}"


def normalize_attribute(name: str, raw: str | None, refs: Refs) -> tuple[str, Any] | None:
    """Return the property key and value for one attribute, or None to skip it.

    A value made of exactly one segment keeps that segment's identity; anything
    else is flattened to a string.
    """
    if raw is None:
        return None
    segments = feed(raw, refs)
    if len(segments) == 1:
        value = segments[0]
    else:
        value = "".join(str(s) for s in segments)
    return normalize_name(name), value
