"""Component resolution — walks a nested name table by tag segments."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

NAMESPACE_SEP = ":"


def resolve_component(tag: str, names: Mapping[str, Any] | None) -> Any | None:
    """Look up a ``ns:...:name`` tag in the name table.

    Returns the constructor found at the end of a complete walk, or None when
    any segment is missing or the walk ends on a nested table.
    """
    if not names:
        return None
    return _walk(names, tag.split(NAMESPACE_SEP))


def _walk(level: Any, segments: Sequence[str]) -> Any | None:
    match level:
        case None:
            return None
        case Mapping():
            if not segments:
                return None
            head, *rest = segments
            return _walk(level.get(head), rest)
        case _:
            return None if segments else level
