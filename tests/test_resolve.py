"""Component resolution tests."""

from __future__ import annotations

from htmlfig.resolve import resolve_component


def Button() -> None:
    pass


def Icon() -> None:
    pass


NAMES = {
    "ui": {
        "button": Button,
        "forms": {"icon": Icon},
    },
    "plain": Button,
}


class TestResolveComponent:
    def test_namespaced(self) -> None:
        assert resolve_component("ui:button", NAMES) is Button

    def test_nested_namespace(self) -> None:
        assert resolve_component("ui:forms:icon", NAMES) is Icon

    def test_single_segment(self) -> None:
        assert resolve_component("plain", NAMES) is Button

    def test_missing_leaf(self) -> None:
        assert resolve_component("ui:card", NAMES) is None

    def test_missing_namespace(self) -> None:
        assert resolve_component("nav:button", NAMES) is None

    def test_builtin_tag(self) -> None:
        assert resolve_component("div", NAMES) is None

    def test_walk_ends_on_table(self) -> None:
        assert resolve_component("ui", NAMES) is None

    def test_constructor_before_last_segment(self) -> None:
        assert resolve_component("plain:extra", NAMES) is None

    def test_none_entry(self) -> None:
        assert resolve_component("ui:gone", {"ui": {"gone": None}}) is None

    def test_empty_table(self) -> None:
        assert resolve_component("ui:button", {}) is None

    def test_no_table(self) -> None:
        assert resolve_component("ui:button", None) is None
