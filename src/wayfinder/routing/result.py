"""MatchResult and NotFound frozen dataclasses."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from wayfinder.routing.table import RouteNode


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Result of a successful resolution.

    Attributes:
        nodes: Ancestor chain from the root to the matched leaf, including
            pathless layouts.  Renderers compose layouts outlet by outlet
            in this order.
        params: Every parameter bound along the chain (read-only).
        remainder: Unconsumed segments; always empty on success.
        path: The normalized path that was resolved (no query, no fragment).
        query: Raw query string, without the leading ``?``.
    """

    nodes: tuple[RouteNode, ...]
    params: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    remainder: tuple[str, ...] = ()
    path: str = "/"
    query: str = ""

    @property
    def leaf(self) -> RouteNode:
        """The deepest matched node, the one that handles the request."""
        return self.nodes[-1]

    @property
    def payloads(self) -> tuple[Any, ...]:
        """Payloads of declared nodes along the chain, root first."""
        return tuple(node.payload for node in self.nodes if node.declared)

    @property
    def layouts(self) -> tuple[RouteNode, ...]:
        """Declared layout nodes wrapping the leaf, outermost first."""
        return tuple(node for node in self.nodes[:-1] if node.declared)


@dataclass(frozen=True, slots=True)
class NotFound:
    """No chain consumes the path. Returned, never raised.

    Callers map this to their own "not found" handler.
    """

    path: str
    query: str = ""
    segments: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return False
