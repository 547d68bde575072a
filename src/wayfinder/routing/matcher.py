"""Segment matching: rank the children of one node against the cursor.

Precedence at each level, highest first: Static > Dynamic > Splat > Index.
Within a kind, declaration order wins.  Pathless children consume no
input, so their own children are ranked as if they were siblings, and the
pathless nodes travel along in ``Candidate.via`` to stay in the chain.
"""

from dataclasses import dataclass, field

from wayfinder.routing.segments import SegmentKind
from wayfinder.routing.table import RouteNode, RouteTable

_RANK = {
    SegmentKind.STATIC: 0,
    SegmentKind.DYNAMIC: 1,
    SegmentKind.SPLAT: 2,
    SegmentKind.INDEX: 3,
    # A leaf pathless node reached at end-of-path terminates like an index
    SegmentKind.PATHLESS: 3,
}


@dataclass(frozen=True, slots=True)
class Candidate:
    """One way to continue the descent from a node.

    Attributes:
        node: The child that matched.
        bound: Parameters bound by matching ``node``.
        consumed: Number of path segments ``node`` consumes.
        via: Pathless nodes between the parent and ``node``, outermost first.
        terminal: ``True`` for splat, index and pathless-leaf candidates;
            descent stops here.
    """

    node: RouteNode
    bound: dict[str, str] = field(default_factory=dict)
    consumed: int = 0
    via: tuple[RouteNode, ...] = ()
    terminal: bool = False


def match(
    table: RouteTable,
    node: RouteNode,
    segments: tuple[str, ...],
    cursor: int,
) -> list[Candidate]:
    """Return ranked candidates for continuing below *node* at *cursor*.

    An empty list means the descent dead-ends here.
    """
    candidates = list(_collect(table, node, segments, cursor, ()))
    at_end = cursor == len(segments)
    index_first = table.config.index_before_empty_splat

    def rank(candidate: Candidate) -> int:
        kind = candidate.node.kind
        if at_end and index_first and kind is SegmentKind.SPLAT:
            return _RANK[SegmentKind.INDEX] + 1
        return _RANK[kind]

    # sorted() is stable: declaration order survives within a rank
    return sorted(candidates, key=rank)


def _collect(
    table: RouteTable,
    node: RouteNode,
    segments: tuple[str, ...],
    cursor: int,
    via: tuple[RouteNode, ...],
) -> list[Candidate]:
    at_end = cursor == len(segments)
    found: list[Candidate] = []

    if not at_end:
        part = segments[cursor]

        # 1. Static child (exact, case-sensitive)
        static = node.static.get(part)
        if static is not None:
            found.append(Candidate(table.node(static), consumed=1, via=via))

        # 2. Dynamic children, any non-empty segment
        if part:
            for i in node.dynamic:
                child = table.node(i)
                found.append(
                    Candidate(child, bound={child.segment.name or "": part}, consumed=1, via=via)
                )
    else:
        # Index child only at end-of-path
        if node.index_child is not None:
            found.append(Candidate(table.node(node.index_child), via=via, terminal=True))

    # 3. Splat: remainder of the path, possibly empty
    if node.splat is not None:
        child = table.node(node.splat)
        remaining = segments[cursor:]
        found.append(
            Candidate(
                child,
                bound={child.segment.name or "": "/".join(remaining)},
                consumed=len(remaining),
                via=via,
                terminal=True,
            )
        )

    # Pathless children are transparent to the cursor
    for i in node.pathless:
        child = table.node(i)
        found.extend(_collect(table, child, segments, cursor, (*via, child)))
        if at_end and child.leaf:
            found.append(Candidate(child, via=via, terminal=True))

    return found
