"""Path resolution: backtracking depth-first descent over a route table.

Specificity ranking at one level can still dead-end deeper down (a
dynamic child that matches but has no valid continuation must fall back
to a sibling splat), so the descent keeps an explicit stack of ranked
candidates per level and backtracks until one fully consumes the path.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from types import MappingProxyType

from wayfinder.routing.matcher import Candidate, match
from wayfinder.routing.result import MatchResult, NotFound
from wayfinder.routing.segments import SegmentKind
from wayfinder.routing.table import RouteNode, RouteTable

logger = logging.getLogger("wayfinder.routing")


def split_path(path: str) -> tuple[str, str]:
    """Split a request path into ``(path, query)``, dropping any fragment.

    Examples::

        "/a?x=1"       -> ("/a", "x=1")
        "/a#top"       -> ("/a", "")
        "/a?x=1#top"   -> ("/a", "x=1")
    """
    path, _, _fragment = path.partition("#")
    path, _, query = path.partition("?")
    return path, query


def normalize_path(path: str) -> tuple[str, ...]:
    """Split a path into non-empty segments.

    Leading, trailing and repeated slashes are ignored; ``"/"`` and
    ``""`` give no segments.
    """
    return tuple(p for p in path.strip("/").split("/") if p)


@dataclass(slots=True)
class _Frame:
    """One level of the descent, with the candidates not yet tried."""

    node: RouteNode
    cursor: int
    chain: tuple[RouteNode, ...]
    params: dict[str, str]
    candidates: Iterator[Candidate]


def resolve(table: RouteTable, path: str) -> MatchResult | NotFound:
    """Resolve *path* against *table*.

    Returns a :class:`MatchResult` for the first chain that consumes the
    whole path, or :class:`NotFound`.  Pure: the same table and path
    always produce equal results.
    """
    raw_path, query = split_path(path)
    segments = normalize_path(raw_path)
    normalized = "/" + "/".join(segments)

    root = table.root
    stack = [_Frame(root, 0, (root,), {}, iter(match(table, root, segments, 0)))]

    while stack:
        frame = stack[-1]
        candidate = next(frame.candidates, None)

        if candidate is None:
            stack.pop()
            # Children exhausted: the node itself may be the terminal
            if frame.cursor == len(segments) and frame.node.leaf:
                return _result(frame.chain, frame.params, normalized, query)
            continue

        if (
            candidate.node.kind is SegmentKind.SPLAT
            and candidate.consumed == 0
            and frame.node.leaf
            and table.config.index_before_empty_splat
        ):
            # A declared leaf outranks a sibling splat that would bind ""
            return _result(frame.chain, frame.params, normalized, query)

        chain = (*frame.chain, *candidate.via, candidate.node)
        params = {**frame.params, **candidate.bound}
        cursor = frame.cursor + candidate.consumed

        if candidate.terminal:
            if candidate.node.leaf and cursor == len(segments):
                return _result(chain, params, normalized, query)
            continue

        stack.append(
            _Frame(
                candidate.node,
                cursor,
                chain,
                params,
                iter(match(table, candidate.node, segments, cursor)),
            )
        )

    logger.debug("No route matches %r", normalized)
    return NotFound(path=normalized, query=query, segments=segments)


def _result(
    chain: tuple[RouteNode, ...],
    params: dict[str, str],
    path: str,
    query: str,
) -> MatchResult:
    return MatchResult(
        nodes=chain,
        params=MappingProxyType(params),
        remainder=(),
        path=path,
        query=query,
    )
