"""Templating entry point — compose, parse, and render in one call."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from htmlfig.compose import compose, template_parts
from htmlfig.config import Options
from htmlfig.errors import DocumentParseError, InvalidDocumentError
from htmlfig.nodes import Document
from htmlfig.refs import RefCounter
from htmlfig.render import CreateFunction, render_document

logger = logging.getLogger(__name__)

ParseFunction = Callable[[str], Document]


class HtmlFunction:
    """Templating function bound to one name table.

    Called as ``html(fragments, *values)``, the shape of a template literal:
    ``len(fragments) == len(values) + 1``.
    """

    def __init__(self, figure: Figure, names: Mapping[str, Any]) -> None:
        self._figure = figure
        self.names = names

    def __call__(self, fragments: Sequence[str] | None, *values: Any) -> list[Any]:
        fig = self._figure
        markup, refs = compose(fragments, values, fig.counter)
        if not markup:
            return []

        try:
            doc = fig.parse(markup)
        except DocumentParseError as exc:
            logger.error("failed to parse template markup\n%s", exc.format())
            raise InvalidDocumentError() from None
        except Exception:
            # injected parsers may raise anything
            logger.exception("parser failed on template markup")
            raise InvalidDocumentError() from None

        logger.debug("parsed %d chars of markup with %d refs", len(markup), len(refs))
        if fig.options.debug:
            from htmlfig.debug import format_tree

            logger.debug("parsed tree:\n%s", format_tree(doc))

        return render_document(doc, refs, self.names, fig.dyn)

    def template(self, template: object) -> list[Any]:
        """Render a PEP 750 t-string template (``t"<p>{value}</p>"``)."""
        fragments, values = template_parts(template)
        return self(fragments, *values)


class Figure:
    """Bundle returned by :func:`htmlfig.figure`.

    ``dict(names)`` binds a component name table and returns the templating
    function; ``dyn`` is the element constructor itself, for building elements
    without markup.
    """

    def __init__(
        self,
        create: CreateFunction,
        *,
        options: Options | None = None,
        parser: ParseFunction | None = None,
        counter: RefCounter | None = None,
    ) -> None:
        self.dyn = create
        self.options = options if options is not None else Options()
        self.counter = counter if counter is not None else RefCounter()
        self._parser = parser

    def parse(self, markup: str) -> Document:
        if self._parser is not None:
            return self._parser(markup)
        from htmlfig.parser import parse_document

        return parse_document(markup, strict=self.options.strict)

    def dict(self, names: Mapping[str, Any] | None = None) -> HtmlFunction:
        return HtmlFunction(self, names if names is not None else {})
