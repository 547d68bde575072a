"""Navigator: the caller-held state that changes on every navigation.

Resolves the new path, moves the nav tree state, and classifies what
must reload against the match that was active before.  The new match is
published only once all of that is done, so readers never see a
half-updated navigator.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from wayfinder.nav.state import NavTreeState
from wayfinder.nav.types import NavTree
from wayfinder.routing.reload import ReloadPlan, classify_reload
from wayfinder.routing.resolver import resolve
from wayfinder.routing.result import MatchResult, NotFound
from wayfinder.routing.table import RouteTable

logger = logging.getLogger("wayfinder.routing")


@dataclass(frozen=True, slots=True)
class Navigation:
    """Everything a navigation produced.

    Attributes:
        result: The match, or ``NotFound``.
        reload: Per-node reload plan; ``None`` when the path did not match.
        expanded: Expanded nav sections after the navigation.
        handled: Return value of the ``not_found`` callback, if it ran.
    """

    result: MatchResult | NotFound
    reload: ReloadPlan | None = None
    expanded: frozenset[str] = frozenset()
    handled: Any = None

    @property
    def found(self) -> bool:
        return isinstance(self.result, MatchResult)


class Navigator:
    """Session-level navigation over one route table.

    Usage::

        nav = Navigator(table, nav_tree=docs_tree)
        first = nav.navigate("/users/1/projects/9")
        second = nav.navigate("/users/1/projects/10")
        second.reload.refetch   # only the projects/[id] node
    """

    __slots__ = ("_current", "_nav_state", "_not_found", "_table")

    def __init__(
        self,
        table: RouteTable,
        *,
        nav_tree: NavTree | None = None,
        not_found: Callable[[NotFound], Any] | None = None,
    ) -> None:
        self._table = table
        self._nav_state = NavTreeState(nav_tree) if nav_tree is not None else None
        self._not_found = not_found
        self._current: MatchResult | None = None

    @property
    def current(self) -> MatchResult | None:
        """The match published by the last successful navigation."""
        return self._current

    @property
    def nav_state(self) -> NavTreeState | None:
        return self._nav_state

    def navigate(self, path: str, *, action: bool = False) -> Navigation:
        """Navigate to *path*.

        Args:
            path: Request path, optionally with a query string.
            action: ``True`` when the navigation follows a write; forces
                the whole chain to refetch.
        """
        result = resolve(self._table, path)
        expanded = self._nav_state.navigate(path) if self._nav_state is not None else frozenset()

        if isinstance(result, NotFound):
            self._current = None
            handled = self._not_found(result) if self._not_found is not None else None
            return Navigation(result=result, expanded=expanded, handled=handled)

        plan = classify_reload(self._current, result, action=action)
        self._current = result
        logger.debug(
            "navigate %s: %d refetch, %d reused (%s)",
            result.path,
            len(plan.refetch),
            len(plan.reused),
            plan.reason.value,
        )
        return Navigation(result=result, reload=plan, expanded=expanded)
