"""Reload classification between two consecutive navigations.

A node in the new chain is *reused* when the previous chain holds the
same node at the same depth and the value it binds did not change.
Everything else is *refetch*.  A changed query string or an action (a
write happened) invalidates the whole chain, because data dependencies
cannot be read off the segment path alone.
"""

from dataclasses import dataclass
from enum import Enum

from wayfinder.routing.result import MatchResult
from wayfinder.routing.table import RouteNode


class ReloadDecision(Enum):
    REUSE = "reuse"
    REFETCH = "refetch"


class ReloadReason(Enum):
    """Why a plan was computed the way it was."""

    INITIAL = "initial"  # No previous match
    QUERY = "query"  # Query string changed
    ACTION = "action"  # Navigation triggered by a write
    SEGMENTS = "segments"  # Per-node comparison


@dataclass(frozen=True, slots=True)
class ReloadEntry:
    node: RouteNode
    decision: ReloadDecision

    @property
    def reused(self) -> bool:
        return self.decision is ReloadDecision.REUSE


@dataclass(frozen=True, slots=True)
class ReloadPlan:
    """Per-node decisions for the new chain, root first."""

    entries: tuple[ReloadEntry, ...]
    reason: ReloadReason

    @property
    def refetch(self) -> tuple[RouteNode, ...]:
        return tuple(e.node for e in self.entries if not e.reused)

    @property
    def reused(self) -> tuple[RouteNode, ...]:
        return tuple(e.node for e in self.entries if e.reused)

    def decision_for(self, node: RouteNode) -> ReloadDecision | None:
        for entry in self.entries:
            if entry.node.index == node.index:
                return entry.decision
        return None

    @property
    def blanket(self) -> bool:
        """True if the whole chain was invalidated regardless of segments."""
        return self.reason is not ReloadReason.SEGMENTS


def classify_reload(
    previous: MatchResult | None,
    current: MatchResult,
    *,
    action: bool = False,
) -> ReloadPlan:
    """Classify every node of *current* against *previous*.

    Args:
        previous: The match that was active before this navigation, or
            ``None`` on first load.
        current: The match for the new path.
        action: ``True`` when the navigation follows a write operation.
    """
    if previous is None:
        return _blanket(current, ReloadReason.INITIAL)
    if action:
        return _blanket(current, ReloadReason.ACTION)
    if previous.query != current.query:
        return _blanket(current, ReloadReason.QUERY)

    entries: list[ReloadEntry] = []
    for depth, node in enumerate(current.nodes):
        reused = (
            depth < len(previous.nodes)
            and previous.nodes[depth].index == node.index
            and _own_value(previous, node) == _own_value(current, node)
        )
        decision = ReloadDecision.REUSE if reused else ReloadDecision.REFETCH
        entries.append(ReloadEntry(node, decision))
    return ReloadPlan(tuple(entries), ReloadReason.SEGMENTS)


def _own_value(result: MatchResult, node: RouteNode) -> str | None:
    name = node.param_name
    if name is None:
        return None
    return result.params.get(name)


def _blanket(current: MatchResult, reason: ReloadReason) -> ReloadPlan:
    entries = tuple(ReloadEntry(node, ReloadDecision.REFETCH) for node in current.nodes)
    return ReloadPlan(entries, reason)
