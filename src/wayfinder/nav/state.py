"""Caller-held navigation tree state.

Combines the computed defaults with manual section toggles and the
mobile menu toggle.  On every path change the defaults are recomputed,
manual toggles are dropped and the menu is forced closed.  Collapsing
the menu also drops manual toggles.
"""

import logging

from wayfinder.nav.expand import compute_expanded
from wayfinder.nav.types import NavTree
from wayfinder.routing.resolver import split_path

logger = logging.getLogger("wayfinder.nav")


class NavTreeState:
    """Expanded-section state for one display tree.

    Usage::

        state = NavTreeState(tree, "/api-reference/signals")
        state.expanded            # frozenset({"Reference"})
        state.toggle("Guides")    # open for this path's tenure
        state.navigate("/tutorial")
    """

    __slots__ = ("_defaults", "_menu_open", "_overrides", "_path", "_tree")

    def __init__(self, tree: NavTree, current_path: str = "/") -> None:
        self._tree = tree
        self._path = split_path(current_path)[0]
        self._defaults = compute_expanded(tree, self._path)
        self._overrides: dict[str, bool] = {}
        self._menu_open = False

    @property
    def tree(self) -> NavTree:
        return self._tree

    @property
    def current_path(self) -> str:
        return self._path

    @property
    def defaults(self) -> frozenset[str]:
        """Sections expanded by the current path alone."""
        return self._defaults

    @property
    def menu_open(self) -> bool:
        return self._menu_open

    @property
    def expanded(self) -> frozenset[str]:
        """Defaults with this path's manual toggles applied."""
        opened = {sid for sid, is_open in self._overrides.items() if is_open}
        closed = {sid for sid, is_open in self._overrides.items() if not is_open}
        return frozenset((self._defaults | opened) - closed)

    def is_expanded(self, section_id: str) -> bool:
        return section_id in self.expanded

    def navigate(self, path: str) -> frozenset[str]:
        """Move to *path* and return the new expanded set.

        A change to the query string alone is not a path change.
        """
        new_path = split_path(path)[0]
        if new_path != self._path:
            self._path = new_path
            self._defaults = compute_expanded(self._tree, new_path)
            self._overrides.clear()
            self._menu_open = False
            logger.debug("nav path %s expands %s", new_path, sorted(self._defaults))
        return self.expanded

    def toggle(self, section_id: str) -> bool:
        """Flip one section and return whether it is now expanded.

        Raises ``KeyError`` for an unknown section id.
        """
        expanded = not self.is_expanded(section_id)
        self.set_expanded(section_id, expanded)
        return expanded

    def set_expanded(self, section_id: str, expanded: bool) -> None:
        if section_id not in self._tree.section_ids():
            raise KeyError(section_id)
        if expanded == (section_id in self._defaults):
            self._overrides.pop(section_id, None)
        else:
            self._overrides[section_id] = expanded

    def set_menu_open(self, menu_open: bool) -> None:
        self._menu_open = menu_open
        if not menu_open:
            self._overrides.clear()

    def toggle_menu(self) -> bool:
        self.set_menu_open(not self._menu_open)
        return self._menu_open
