"""Tagged-template HTML to element tree compiler."""

from __future__ import annotations

from typing import TYPE_CHECKING

from htmlfig.errors import FigureError, InvalidDocumentError

if TYPE_CHECKING:
    from htmlfig.binding import Figure, ParseFunction
    from htmlfig.config import Options
    from htmlfig.refs import RefCounter
    from htmlfig.render import CreateFunction

__version__ = "0.1.0"

__all__ = [
    "FigureError",
    "InvalidDocumentError",
    "figure",
]


def figure(
    create: CreateFunction,
    *,
    options: Options | None = None,
    parser: ParseFunction | None = None,
    counter: RefCounter | None = None,
) -> Figure:
    """Initialize templating around an element constructor.

    ``create(identity, props, *children)`` receives either a tag name or a
    component resolved from the name table given to ``dict()``.
    """
    from htmlfig.binding import Figure

    return Figure(create, options=options, parser=parser, counter=counter)
