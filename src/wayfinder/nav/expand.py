"""Default expand state: which sections contain the current page.

A pure function of the display tree and the current path; the path is
passed in explicitly rather than read from ambient location state.
"""

from wayfinder.nav.types import NavSection, NavTree
from wayfinder.routing.resolver import normalize_path, split_path


def link_matches(link: str, current_path: str) -> bool:
    """Return True if *link* is a segment-boundary prefix of *current_path*.

    ``/api-reference`` matches ``/api-reference`` and
    ``/api-reference/signals`` but not ``/api-reference-old``.  The root
    link ``/`` only matches the root path.  Query strings and fragments
    on either side are ignored.
    """
    link_segments = normalize_path(split_path(link)[0])
    path_segments = normalize_path(split_path(current_path)[0])
    if not link_segments:
        return not path_segments
    return path_segments[: len(link_segments)] == link_segments


def contains_active(section: NavSection, current_path: str) -> bool:
    """True if any leaf in *section*'s subtree matches *current_path*."""
    return any(link_matches(leaf.link, current_path) for leaf in section.leaves())


def compute_expanded(tree: NavTree, current_path: str) -> frozenset[str]:
    """Return the ids of every section that should start expanded.

    Nested sections are handled at any depth: a parent is expanded
    whenever one of its descendants holds the active page.
    """
    return frozenset(
        section.section_id
        for section in tree.iter_sections()
        if contains_active(section, current_path)
    )
