"""Tests for wayfinder.nav.state: overrides and the menu toggle."""

import pytest

from wayfinder.nav.state import NavTreeState
from wayfinder.nav.types import NavLeaf, NavSection, NavTree


def _tree() -> NavTree:
    return NavTree(
        sections=(
            NavSection("Guides", (NavLeaf("Tutorial", "/tutorial"),)),
            NavSection("Reference", (NavLeaf("API", "/api-reference"),)),
        )
    )


class TestNavigate:
    def test_initial_defaults(self) -> None:
        state = NavTreeState(_tree(), "/tutorial")
        assert state.expanded == frozenset({"Guides"})
        assert state.current_path == "/tutorial"

    def test_navigate_recomputes(self) -> None:
        state = NavTreeState(_tree(), "/tutorial")
        assert state.navigate("/api-reference/x") == frozenset({"Reference"})

    def test_navigate_resets_overrides(self) -> None:
        state = NavTreeState(_tree(), "/tutorial")
        state.toggle("Reference")
        assert state.expanded == frozenset({"Guides", "Reference"})
        state.navigate("/tutorial/step-2")
        assert state.expanded == frozenset({"Guides"})

    def test_navigate_closes_menu(self) -> None:
        state = NavTreeState(_tree(), "/tutorial")
        state.set_menu_open(True)
        state.navigate("/api-reference")
        assert state.menu_open is False

    def test_query_only_change_keeps_state(self) -> None:
        state = NavTreeState(_tree(), "/tutorial")
        state.set_menu_open(True)
        state.toggle("Reference")
        state.navigate("/tutorial?page=2")
        assert state.menu_open is True
        assert state.is_expanded("Reference")


class TestToggle:
    def test_toggle_open_and_closed(self) -> None:
        state = NavTreeState(_tree(), "/tutorial")
        assert state.toggle("Reference") is True
        assert state.toggle("Reference") is False
        assert state.expanded == frozenset({"Guides"})

    def test_collapse_default_section(self) -> None:
        state = NavTreeState(_tree(), "/tutorial")
        state.set_expanded("Guides", False)
        assert state.expanded == frozenset()
        assert state.defaults == frozenset({"Guides"})

    def test_unknown_section(self) -> None:
        state = NavTreeState(_tree(), "/")
        with pytest.raises(KeyError):
            state.toggle("Nope")


class TestMenu:
    def test_toggle_menu(self) -> None:
        state = NavTreeState(_tree())
        assert state.menu_open is False
        assert state.toggle_menu() is True
        assert state.toggle_menu() is False

    def test_closing_menu_clears_overrides(self) -> None:
        state = NavTreeState(_tree(), "/tutorial")
        state.set_menu_open(True)
        state.toggle("Reference")
        state.set_menu_open(False)
        assert state.expanded == frozenset({"Guides"})
