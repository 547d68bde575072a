"""Per-page outline: the in-page headings registered while a page renders.

The outline belongs to one path.  Moving to another path empties it
before the new page registers its own headings.
"""

from dataclasses import dataclass

from wayfinder.routing.resolver import split_path


@dataclass(frozen=True, slots=True)
class OutlineEntry:
    title: str
    href: str


class PageOutline:
    """Headings for the page at ``path``, in registration order."""

    __slots__ = ("_entries", "_path")

    def __init__(self, path: str = "") -> None:
        self._path = split_path(path)[0]
        self._entries: list[OutlineEntry] = []

    @property
    def path(self) -> str:
        return self._path

    @property
    def entries(self) -> tuple[OutlineEntry, ...]:
        return tuple(self._entries)

    def add(self, title: str, href: str) -> None:
        self._entries.append(OutlineEntry(title, href))

    def reset(self, path: str) -> None:
        """Switch to *path*, discarding every registered heading."""
        self._path = split_path(path)[0]
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
