"""Linear reading order through a display tree ("next page" links)."""

from dataclasses import dataclass

from wayfinder.nav.expand import link_matches
from wayfinder.nav.types import NavSection, NavTree
from wayfinder.routing.resolver import normalize_path, split_path


@dataclass(frozen=True, slots=True)
class PageLink:
    title: str
    link: str


def page_sequence(tree: NavTree) -> list[PageLink]:
    """Flatten *tree* into reading order.

    Titles are prefixed with the enclosing section name, e.g.
    ``"Core concepts / Data Loading"``.
    """
    sequence: list[PageLink] = []
    for section in tree.sections:
        if section.link is not None:
            sequence.append(PageLink(title=section.name, link=section.link))
        _flatten(section, sequence)
    return sequence


def _flatten(section: NavSection, out: list[PageLink]) -> None:
    for page in section.pages:
        if isinstance(page, NavSection):
            if page.link is not None:
                out.append(PageLink(title=f"{section.name} / {page.name}", link=page.link))
            _flatten(page, out)
        else:
            out.append(PageLink(title=f"{section.name} / {page.name}", link=page.link))


def _position(sequence: list[PageLink], path: str) -> int | None:
    """Index of the page *path* is on: the longest matching link, first wins ties."""
    best: int | None = None
    best_depth = -1
    for i, page in enumerate(sequence):
        if not link_matches(page.link, path):
            continue
        depth = len(normalize_path(split_path(page.link)[0]))
        if depth > best_depth:
            best, best_depth = i, depth
    return best


def next_page(tree: NavTree, path: str) -> PageLink | None:
    """The page after the one *path* is on, or ``None`` at the end or off-tree."""
    sequence = page_sequence(tree)
    i = _position(sequence, path)
    if i is None or i == len(sequence) - 1:
        return None
    return sequence[i + 1]


def previous_page(tree: NavTree, path: str) -> PageLink | None:
    """The page before the one *path* is on, or ``None`` at the start or off-tree."""
    sequence = page_sequence(tree)
    i = _position(sequence, path)
    if i is None or i == 0:
        return None
    return sequence[i - 1]
