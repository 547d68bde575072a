"""Navigation tree state for a sidebar of collapsible sections.

Given a display tree and the current path, computes which sections are
expanded, tracks manual toggles for the current path's tenure, and
selects which menu applies to a path.
"""

from wayfinder.nav.expand import compute_expanded, contains_active, link_matches
from wayfinder.nav.loader import load_nav_tree, parse_nav_tree
from wayfinder.nav.menus import MenuBinding, MenuSelector, select_tree
from wayfinder.nav.outline import OutlineEntry, PageOutline
from wayfinder.nav.sequence import PageLink, next_page, page_sequence, previous_page
from wayfinder.nav.state import NavTreeState
from wayfinder.nav.types import NavLeaf, NavSection, NavTree

__all__ = [
    "MenuBinding",
    "MenuSelector",
    "NavLeaf",
    "NavSection",
    "NavTree",
    "NavTreeState",
    "OutlineEntry",
    "PageLink",
    "PageOutline",
    "compute_expanded",
    "contains_active",
    "link_matches",
    "load_nav_tree",
    "next_page",
    "page_sequence",
    "parse_nav_tree",
    "previous_page",
    "select_tree",
]
