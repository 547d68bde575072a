"""Routing: compiled route table with backtracking path resolution.

Declarations are registered during setup and compiled into an immutable
node arena; every resolution is a pure function of table and path.
"""

from wayfinder.routing.reload import (
    ReloadDecision,
    ReloadEntry,
    ReloadPlan,
    ReloadReason,
    classify_reload,
)
from wayfinder.routing.resolver import normalize_path, resolve, split_path
from wayfinder.routing.result import MatchResult, NotFound
from wayfinder.routing.segments import RouteSegment, SegmentKind, parse_declaration
from wayfinder.routing.table import (
    RouteDeclaration,
    RouteNode,
    RouteTable,
    RouteTableBuilder,
    build_route_table,
)

__all__ = [
    "MatchResult",
    "NotFound",
    "ReloadDecision",
    "ReloadEntry",
    "ReloadPlan",
    "ReloadReason",
    "RouteDeclaration",
    "RouteNode",
    "RouteSegment",
    "RouteTable",
    "RouteTableBuilder",
    "SegmentKind",
    "build_route_table",
    "classify_reload",
    "normalize_path",
    "parse_declaration",
    "resolve",
    "split_path",
]
