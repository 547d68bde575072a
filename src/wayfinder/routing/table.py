"""Route table builder: declarations compiled into an immutable node arena.

Declarations are registered during setup and compiled into an immutable
lookup structure by ``build()``.  Nodes live in a flat tuple and refer
to each other by index, so the finished table is plain data that can be
shared between threads.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from wayfinder.config import WayfinderConfig
from wayfinder.errors import DuplicateRoute, InvalidRoute
from wayfinder.routing.segments import (
    ROOT_SEGMENT,
    RouteSegment,
    SegmentKind,
    canonical_path,
    parse_declaration,
    url_pattern,
)

logger = logging.getLogger("wayfinder.routing")


@dataclass(frozen=True, slots=True)
class RouteDeclaration:
    """One route as supplied by a collaborator (directory scan, manifest, code).

    Attributes:
        path: Slash-separated segments in source order, e.g. ``/users/[id]``.
        leaf: ``True`` if the route handles requests itself, ``False`` for a
            pure layout that only wraps its descendants.
        payload: Opaque handler or layout reference, returned untouched in
            match results.
    """

    path: str
    leaf: bool = True
    payload: Any = None


@dataclass(frozen=True, slots=True)
class RouteNode:
    """A frozen node of the compiled route tree.

    Children are bucketed by segment kind for the matcher; ``children``
    keeps all of them in declaration order.
    """

    index: int
    segment: RouteSegment
    path: str
    parent: int | None
    leaf: bool = False
    declared: bool = False
    children: tuple[int, ...] = ()
    payload: Any = field(default=None, compare=False)
    static: Mapping[str, int] = field(
        default_factory=lambda: MappingProxyType({}), compare=False, repr=False
    )
    dynamic: tuple[int, ...] = field(default=(), compare=False, repr=False)
    splat: int | None = field(default=None, compare=False, repr=False)
    index_child: int | None = field(default=None, compare=False, repr=False)
    pathless: tuple[int, ...] = field(default=(), compare=False, repr=False)

    @property
    def kind(self) -> SegmentKind:
        return self.segment.kind

    @property
    def param_name(self) -> str | None:
        """Name of the parameter this node binds, if any."""
        return self.segment.name if self.segment.binds else None

    @property
    def is_root(self) -> bool:
        return self.parent is None


class _NodeDraft:
    """A node under construction. Mutable during build only."""

    __slots__ = (
        "children",
        "declared",
        "dynamic",
        "index",
        "index_child",
        "leaf",
        "parent",
        "path",
        "pathless",
        "payload",
        "segment",
        "splat",
        "static",
    )

    def __init__(self, index: int, segment: RouteSegment, path: str, parent: int | None) -> None:
        self.index = index
        self.segment = segment
        self.path = path
        self.parent = parent
        self.leaf = False
        self.declared = False
        self.payload: Any = None
        self.children: list[int] = []
        # Static children: "users" -> node index
        self.static: dict[str, int] = {}
        # Dynamic and pathless children, in declaration order
        self.dynamic: list[int] = []
        self.pathless: list[int] = []
        self.splat: int | None = None
        self.index_child: int | None = None

    def freeze(self) -> RouteNode:
        return RouteNode(
            index=self.index,
            segment=self.segment,
            path=self.path,
            parent=self.parent,
            leaf=self.leaf,
            declared=self.declared,
            children=tuple(self.children),
            payload=self.payload,
            static=MappingProxyType(dict(self.static)),
            dynamic=tuple(self.dynamic),
            splat=self.splat,
            index_child=self.index_child,
            pathless=tuple(self.pathless),
        )


@dataclass(frozen=True, slots=True)
class RouteTable:
    """Immutable, compiled route tree. ``nodes[0]`` is the root."""

    nodes: tuple[RouteNode, ...]
    config: WayfinderConfig = field(default_factory=WayfinderConfig, compare=False)

    @property
    def root(self) -> RouteNode:
        return self.nodes[0]

    def node(self, index: int) -> RouteNode:
        return self.nodes[index]

    def children(self, node: RouteNode) -> tuple[RouteNode, ...]:
        return tuple(self.nodes[i] for i in node.children)

    def ancestors(self, node: RouteNode) -> tuple[RouteNode, ...]:
        """Root-to-node chain, inclusive."""
        chain: list[RouteNode] = [node]
        while chain[-1].parent is not None:
            chain.append(self.nodes[chain[-1].parent])
        return tuple(reversed(chain))

    @property
    def routes(self) -> list[RouteNode]:
        """Return every leaf route, depth-first in declaration order.

        Useful for introspection (``wayfinder routes``).
        """
        return [node for node in self.walk() if node.leaf]

    def walk(self) -> Iterator[RouteNode]:
        """Yield every node depth-first, children in declaration order."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(self.nodes[i] for i in reversed(node.children))

    def __len__(self) -> int:
        return len(self.nodes)


class RouteTableBuilder:
    """Collects declarations and compiles them into a :class:`RouteTable`.

    Usage::

        builder = RouteTableBuilder()
        builder.add(RouteDeclaration("/", leaf=False, payload=root_layout))
        builder.add(RouteDeclaration("/users/[id]", payload=user_page))
        table = builder.build()
    """

    __slots__ = ("_built", "_config", "_drafts", "_patterns")

    def __init__(self, config: WayfinderConfig | None = None) -> None:
        self._config = config or WayfinderConfig()
        self._drafts: list[_NodeDraft] = [_NodeDraft(0, ROOT_SEGMENT, "/", None)]
        # URL pattern -> declared path, for leaf collision checks
        self._patterns: dict[str, str] = {}
        self._built = False

    def add(self, declaration: RouteDeclaration) -> None:
        """Add a declaration. Must be called before ``build()``.

        Raises ``DuplicateRoute`` if the declaration collides with an
        earlier one, ``InvalidRoute`` if it is malformed.
        """
        if self._built:
            raise InvalidRoute(declaration.path, "cannot add routes after build()")

        segments = parse_declaration(
            declaration.path, index_segment=self._config.index_segment
        )
        path = canonical_path(segments)

        # Validate everything first: a rejected declaration leaves no nodes behind
        self._check_params(path, segments)
        pattern = url_pattern(segments)
        if declaration.leaf and pattern in self._patterns:
            detail = (
                f"Route {path!r} resolves to {pattern!r}, "
                f"already served by {self._patterns[pattern]!r}"
            )
            raise DuplicateRoute(path, self._patterns[pattern], detail)

        draft = self._drafts[0]
        for i, seg in enumerate(segments):
            existing = self._existing(draft, seg, canonical_path(segments[: i + 1]))
            if existing is None:
                break
            draft = self._drafts[existing]
        else:
            if draft.declared:
                raise DuplicateRoute(path, draft.path)

        draft = self._drafts[0]
        for i, seg in enumerate(segments):
            draft = self._child(draft, seg, canonical_path(segments[: i + 1]))

        if declaration.leaf:
            self._patterns[pattern] = path
        draft.declared = True
        draft.leaf = declaration.leaf
        draft.payload = declaration.payload
        logger.debug("route %s (%s)", path, "leaf" if declaration.leaf else "layout")

    def extend(self, declarations: Iterable[RouteDeclaration]) -> None:
        for declaration in declarations:
            self.add(declaration)

    def _check_params(self, path: str, segments: list[RouteSegment]) -> None:
        """Reject a chain that binds the same parameter name twice."""
        # Parameter name -> path of the node that binds it along this chain
        bound: dict[str, str] = {}
        for i, seg in enumerate(segments):
            if not seg.binds or seg.name is None:
                continue
            if seg.name in bound:
                detail = (
                    f"Route {path!r} binds parameter {seg.name!r} twice "
                    f"(first at {bound[seg.name]!r})"
                )
                raise DuplicateRoute(path, bound[seg.name], detail)
            bound[seg.name] = canonical_path(segments[: i + 1])

    def _existing(self, parent: _NodeDraft, seg: RouteSegment, path: str) -> int | None:
        """Index of the child of *parent* that *seg* addresses, if it exists.

        Read-only.  Raises ``DuplicateRoute`` for a second, differently
        named splat.
        """
        if seg.kind is SegmentKind.STATIC:
            return parent.static.get(seg.value)
        if seg.kind is SegmentKind.DYNAMIC:
            return self._find_named(parent.dynamic, seg)
        if seg.kind is SegmentKind.PATHLESS:
            return self._find_named(parent.pathless, seg)
        if seg.kind is SegmentKind.SPLAT:
            if parent.splat is not None:
                current = self._drafts[parent.splat]
                if current.segment.name != seg.name:
                    detail = f"Route {path!r} adds a second splat under {parent.path!r}"
                    raise DuplicateRoute(path, current.path, detail)
            return parent.splat
        return parent.index_child

    def _child(self, parent: _NodeDraft, seg: RouteSegment, path: str) -> _NodeDraft:
        """Find or create the child of *parent* that *seg* addresses."""
        existing = self._existing(parent, seg, path)
        if existing is not None:
            return self._drafts[existing]

        draft = _NodeDraft(len(self._drafts), seg, path, parent.index)
        self._drafts.append(draft)
        parent.children.append(draft.index)
        if seg.kind is SegmentKind.STATIC:
            parent.static[seg.value] = draft.index
        elif seg.kind is SegmentKind.DYNAMIC:
            parent.dynamic.append(draft.index)
        elif seg.kind is SegmentKind.PATHLESS:
            parent.pathless.append(draft.index)
        elif seg.kind is SegmentKind.SPLAT:
            parent.splat = draft.index
        else:
            parent.index_child = draft.index
        return draft

    def _find_named(self, indices: list[int], seg: RouteSegment) -> int | None:
        for i in indices:
            if self._drafts[i].segment.name == seg.name:
                return i
        return None

    def build(self) -> RouteTable:
        """Freeze the builder and return the compiled table."""
        self._built = True
        table = RouteTable(
            nodes=tuple(d.freeze() for d in self._drafts),
            config=self._config,
        )
        logger.info("Built route table: %d nodes, %d routes", len(table), len(table.routes))
        return table


def build_route_table(
    declarations: Iterable[RouteDeclaration],
    config: WayfinderConfig | None = None,
) -> RouteTable:
    """Compile *declarations* in one shot.

    Raises ``DuplicateRoute`` or ``InvalidRoute`` before any table exists.
    """
    builder = RouteTableBuilder(config)
    builder.extend(declarations)
    return builder.build()
