"""Template composition — joins fragments and swaps values for placeholders."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from htmlfig.refs import RefCounter, Refs


@runtime_checkable
class TemplateLike(Protocol):
    """Structural shape of a PEP 750 ``string.templatelib.Template``."""

    strings: tuple[str, ...]
    interpolations: tuple[Any, ...]


def compose(
    fragments: Sequence[str] | None,
    values: Sequence[Any],
    counter: RefCounter,
) -> tuple[str, Refs]:
    """Join fragments into one markup string, replacing values with placeholders.

    A ``None`` value counts as absent and mints no placeholder. The returned
    markup is stripped of surrounding whitespace.
    """
    if not fragments:
        return "", {}

    refs: Refs = {}
    parts: list[str] = []
    for i, fragment in enumerate(fragments):
        parts.append(fragment)
        if i < len(values) and values[i] is not None:
            uid = counter.next_placeholder()
            refs[uid] = values[i]
            parts.append(uid)

    return "".join(parts).strip(), refs


def template_parts(template: object) -> tuple[tuple[str, ...], tuple[Any, ...]]:
    """Split a t-string template into its literal fragments and values."""
    if not isinstance(template, TemplateLike):
        raise TypeError(
            f"expected a string.templatelib.Template or compatible object, "
            f"got {type(template).__name__}"
        )
    strings = tuple(template.strings)
    values = tuple(interp.value for interp in template.interpolations)
    return strings, values
