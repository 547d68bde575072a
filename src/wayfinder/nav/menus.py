"""Menu selection: which display tree applies to the current path.

Menus are bound to glob-like path patterns::

    MenuBinding(reference_tree, ("/concepts/**", "/api-reference/**"))
    MenuBinding(guides_tree, ("/tutorial/**", "/how-to-guides/**"))
    MenuBinding(guides_tree, ("/**",))

A trailing ``**`` matches any depth below its prefix and a trailing ``*``
matches exactly one more segment.

Patterns compile to routes in a private route table, so the same
specificity rules pick the winner: static prefixes beat catch-alls,
and earlier bindings win ties.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from wayfinder.errors import ConfigurationError
from wayfinder.nav.types import NavTree
from wayfinder.routing.resolver import resolve
from wayfinder.routing.result import MatchResult
from wayfinder.routing.table import RouteDeclaration, RouteTable, build_route_table

_REST = "[...menu_rest]"
_ONE = "[menu_segment]"


@dataclass(frozen=True, slots=True)
class MenuBinding:
    tree: NavTree
    patterns: tuple[str, ...]


def pattern_to_declaration(pattern: str) -> str:
    """Translate a menu pattern to a route declaration.

    ``/concepts/**`` and ``/concepts/**/*`` become ``/concepts/[...menu_rest]``
    and match at any depth, ``/concepts`` included.  A lone trailing ``*``
    becomes ``/concepts/[menu_segment]`` and matches exactly one more
    segment.  Patterns without wildcards match exactly.
    """
    parts = [p for p in pattern.strip("/").split("/") if p]
    tail = ""
    if parts[-2:] == ["**", "*"]:
        del parts[-2:]
        tail = _REST
    elif parts[-1:] == ["**"]:
        parts.pop()
        tail = _REST
    elif parts[-1:] == ["*"]:
        parts.pop()
        tail = _ONE
    for part in parts:
        if "*" in part:
            msg = f"Menu pattern {pattern!r}: wildcards are only allowed as trailing segments"
            raise ConfigurationError(msg)
    if tail:
        parts.append(tail)
    return "/" + "/".join(parts)


class MenuSelector:
    """Compiled menu bindings. Immutable after construction."""

    __slots__ = ("_bindings", "_table")

    def __init__(self, bindings: Iterable[MenuBinding]) -> None:
        self._bindings = tuple(bindings)
        declarations = [
            RouteDeclaration(pattern_to_declaration(pattern), payload=i)
            for i, binding in enumerate(self._bindings)
            for pattern in binding.patterns
        ]
        self._table: RouteTable = build_route_table(declarations)

    def select(self, path: str) -> NavTree | None:
        """Return the tree bound to *path*, or ``None`` if no pattern matches."""
        result = resolve(self._table, path)
        if not isinstance(result, MatchResult):
            return None
        return self._bindings[result.leaf.payload].tree


def select_tree(bindings: Iterable[MenuBinding], path: str) -> NavTree | None:
    """One-shot form of :meth:`MenuSelector.select`."""
    return MenuSelector(bindings).select(path)
