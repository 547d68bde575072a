"""Wayfinder: hierarchical file-path route resolution.

Maps a request path to the ordered chain of route definitions that
handle it (static, dynamic, splat, index and pathless layout segments),
extracts path parameters, decides what must reload between navigations,
and tracks which sidebar sections the current path expands.

Basic usage::

    from wayfinder import RouteDeclaration, build_route_table, resolve

    table = build_route_table([
        RouteDeclaration("/", leaf=False, payload="root-layout"),
        RouteDeclaration("/users/[id]", payload="user-page"),
    ])
    match = resolve(table, "/users/42")
    match.params  # {"id": "42"}
"""

__version__ = "0.1.0"
__all__ = [
    "BuildError",
    "ConfigurationError",
    "DuplicateRoute",
    "InvalidRoute",
    "MatchResult",
    "NavTree",
    "NavTreeState",
    "Navigator",
    "NotFound",
    "RouteDeclaration",
    "RouteTable",
    "RouteTableBuilder",
    "WayfinderConfig",
    "WayfinderError",
    "build_route_table",
    "classify_reload",
    "compute_expanded",
    "discover_routes",
    "resolve",
]

_ROUTING = frozenset({
    "MatchResult",
    "NotFound",
    "RouteDeclaration",
    "RouteTable",
    "RouteTableBuilder",
    "build_route_table",
    "classify_reload",
    "resolve",
})

_ERRORS = frozenset({
    "BuildError",
    "ConfigurationError",
    "DuplicateRoute",
    "InvalidRoute",
    "WayfinderError",
})


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wayfinder`` fast while providing a clean top-level API.
    """
    if name in _ROUTING:
        from wayfinder import routing

        return getattr(routing, name)

    if name in _ERRORS:
        from wayfinder import errors

        return getattr(errors, name)

    if name in ("NavTree", "NavTreeState", "compute_expanded"):
        from wayfinder import nav

        return getattr(nav, name)

    if name == "Navigator":
        from wayfinder.navigator import Navigator

        return Navigator

    if name == "WayfinderConfig":
        from wayfinder.config import WayfinderConfig

        return WayfinderConfig

    if name == "discover_routes":
        from wayfinder.discovery import discover_routes

        return discover_routes

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
