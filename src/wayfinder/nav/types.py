"""Data models for the navigation display tree.

The display tree is configuration, independent of the route table: it
only mirrors part of the URL space for the sidebar.
"""

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NavLeaf:
    """A linkable page in the sidebar."""

    name: str
    link: str


@dataclass(frozen=True, slots=True)
class NavSection:
    """A collapsible group of pages and nested sections.

    Attributes:
        name: Display name.
        pages: Leaves and subsections in display order.
        id: Stable identifier for expand state; defaults to ``name``.
        link: Optional page of the section itself, listed before its pages.
    """

    name: str
    pages: tuple["NavLeaf | NavSection", ...] = ()
    id: str | None = None
    link: str | None = None

    @property
    def section_id(self) -> str:
        return self.id if self.id is not None else self.name

    def leaves(self) -> Iterator[NavLeaf]:
        """Yield every leaf in the subtree, in display order.

        A linked section contributes its own link first.
        """
        if self.link is not None:
            yield NavLeaf(self.name, self.link)
        for page in self.pages:
            if isinstance(page, NavSection):
                yield from page.leaves()
            else:
                yield page


@dataclass(frozen=True, slots=True)
class NavTree:
    """Top-level sections of one sidebar menu."""

    sections: tuple[NavSection, ...] = ()
    name: str = ""

    def iter_sections(self) -> Iterator[NavSection]:
        """Yield every section at every depth, parents before children."""
        stack = list(reversed(self.sections))
        while stack:
            section = stack.pop()
            yield section
            stack.extend(p for p in reversed(section.pages) if isinstance(p, NavSection))

    def section(self, section_id: str) -> NavSection:
        """Look up a section by id. Raises ``KeyError`` if absent."""
        for section in self.iter_sections():
            if section.section_id == section_id:
                return section
        raise KeyError(section_id)

    def section_ids(self) -> frozenset[str]:
        return frozenset(s.section_id for s in self.iter_sections())

    def leaves(self) -> Iterator[NavLeaf]:
        for section in self.sections:
            yield from section.leaves()
