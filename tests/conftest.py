"""Shared test fixtures and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from htmlfig import figure
from htmlfig.binding import HtmlFunction
from htmlfig.refs import RefCounter


@dataclass
class El:
    """Host element value produced by the recording ``create``."""

    identity: Any
    props: dict[str, Any] = field(default_factory=dict)
    children: tuple[Any, ...] = ()


def create(identity: Any, props: dict[str, Any], *children: Any) -> El:
    """Stand-in for the host's element constructor."""
    return El(identity, props, children)


@pytest.fixture
def counter() -> RefCounter:
    return RefCounter()


@pytest.fixture
def html() -> HtmlFunction:
    """Templating function over the real parser with an empty name table."""
    return figure(create).dict()


def assert_element(
    value: Any,
    identity: Any,
    props: dict[str, Any] | None = None,
    children: tuple[Any, ...] | None = None,
) -> None:
    """Assert basic properties of a rendered El."""
    assert isinstance(value, El), f"Expected El, got {type(value).__name__}"
    assert value.identity == identity, f"Expected identity {identity!r}, got {value.identity!r}"
    if props is not None:
        assert value.props == props, f"Expected props {props!r}, got {value.props!r}"
    if children is not None:
        assert value.children == children, f"Expected children {children!r}, got {value.children!r}"
