"""Wayfinder exception hierarchy.

Shared across the table builder, discovery, nav loader, and CLI so every
module raises and catches the same types.

``NotFound`` is deliberately absent: an unmatched path is an ordinary
outcome and is returned as :class:`wayfinder.routing.result.NotFound`.
"""


class WayfinderError(Exception):
    """Base for all wayfinder-specific errors."""


class ConfigurationError(WayfinderError):
    """Raised when configuration or a nav definition file is invalid."""


class BuildError(WayfinderError):
    """Raised while compiling route declarations into a table.

    Fatal at startup: a table is never produced from declarations that
    fail to build.
    """


class DuplicateRoute(BuildError):  # noqa: N818
    """Two declarations collide, or a chain binds a parameter twice.

    Attributes:
        path: The declaration that was rejected.
        existing: The earlier declaration it collides with.
    """

    def __init__(self, path: str, existing: str, detail: str = "") -> None:
        self.path = path
        self.existing = existing
        message = detail or f"Route {path!r} duplicates {existing!r}"
        super().__init__(message)


class InvalidRoute(BuildError):
    """A declaration is malformed (bad segment syntax or placement)."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        super().__init__(f"Invalid route {path!r}: {detail}")
