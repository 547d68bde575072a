"""Route segment parsing.

Declarations use file-router syntax, one token per slash-separated part::

    users        -> Static("users")
    [id]         -> Dynamic("id")
    [...rest]    -> Splat("rest")
    index        -> Index
    (marketing)  -> Pathless("marketing")
"""

import re
from dataclasses import dataclass
from enum import Enum

from wayfinder.errors import InvalidRoute

_NAME_RE = re.compile(r"^\w+$")


class SegmentKind(Enum):
    """How a segment matches. Declaration order is matching precedence."""

    STATIC = "static"
    DYNAMIC = "dynamic"
    SPLAT = "splat"
    INDEX = "index"
    PATHLESS = "pathless"


@dataclass(frozen=True, slots=True)
class RouteSegment:
    """A parsed segment of a route declaration.

    Static:   ``users``      (kind=STATIC, value="users")
    Dynamic:  ``[id]``       (kind=DYNAMIC, name="id")
    Splat:    ``[...rest]``  (kind=SPLAT, name="rest")
    Index:    ``index``      (kind=INDEX)
    Pathless: ``(group)``    (kind=PATHLESS, name="group")
    """

    kind: SegmentKind
    value: str = ""
    name: str | None = None

    @property
    def binds(self) -> bool:
        """True if matching this segment binds a path parameter."""
        return self.kind in (SegmentKind.DYNAMIC, SegmentKind.SPLAT)

    @property
    def key(self) -> str:
        """Sibling key: two children with equal kind and key are the same node."""
        if self.kind is SegmentKind.STATIC:
            return self.value
        return self.name or ""

    def __str__(self) -> str:
        return self.value


ROOT_SEGMENT = RouteSegment(kind=SegmentKind.PATHLESS, value="", name="")


def parse_segment(part: str, declaration: str, *, index_segment: str = "index") -> RouteSegment:
    """Parse one declaration token into a :class:`RouteSegment`.

    Raises ``InvalidRoute`` for malformed brackets or empty names.
    """
    if part == index_segment:
        return RouteSegment(kind=SegmentKind.INDEX, value=part)

    if part.startswith("[") or part.endswith("]"):
        if not (part.startswith("[") and part.endswith("]")):
            raise InvalidRoute(declaration, f"unbalanced brackets in {part!r}")
        inner = part[1:-1]
        kind = SegmentKind.DYNAMIC
        if inner.startswith("..."):
            inner = inner[3:]
            kind = SegmentKind.SPLAT
        if not _NAME_RE.match(inner):
            raise InvalidRoute(declaration, f"parameter name in {part!r} must be a word")
        return RouteSegment(kind=kind, value=part, name=inner)

    if part.startswith("(") or part.endswith(")"):
        if not (part.startswith("(") and part.endswith(")")):
            raise InvalidRoute(declaration, f"unbalanced parentheses in {part!r}")
        inner = part[1:-1]
        if not _NAME_RE.match(inner):
            raise InvalidRoute(declaration, f"layout group name in {part!r} must be a word")
        return RouteSegment(kind=SegmentKind.PATHLESS, value=part, name=inner)

    if part.startswith("{") and part.endswith("}"):
        msg = f"{part!r} uses {{param}} syntax; declare parameters as [param]"
        raise InvalidRoute(declaration, msg)

    return RouteSegment(kind=SegmentKind.STATIC, value=part)


def split_declaration(path: str) -> list[str]:
    """Split a declaration into its non-empty tokens.

    ``"/admin//settings/"`` and ``"admin/settings"`` both give
    ``["admin", "settings"]``.
    """
    return [p for p in path.strip("/").split("/") if p]


def parse_declaration(path: str, *, index_segment: str = "index") -> list[RouteSegment]:
    """Parse a declaration path into segments.

    Examples::

        "/"                  -> []
        "/users/[id]"        -> [Static("users"), Dynamic("id")]
        "/files/[...rest]"   -> [Static("files"), Splat("rest")]
        "/(shop)/cart"       -> [Pathless("shop"), Static("cart")]

    Raises ``InvalidRoute`` when a splat or index segment is followed
    by further segments.
    """
    segments: list[RouteSegment] = []
    for part in split_declaration(path):
        if segments and segments[-1].kind in (SegmentKind.SPLAT, SegmentKind.INDEX):
            last = segments[-1]
            raise InvalidRoute(path, f"{last.value!r} must be the last segment")
        segments.append(parse_segment(part, path, index_segment=index_segment))
    return segments


def canonical_path(segments: list[RouteSegment]) -> str:
    """Normalized declared path, e.g. ``/(shop)/cart``."""
    return "/" + "/".join(seg.value for seg in segments)


def url_pattern(segments: list[RouteSegment]) -> str:
    """URL shape of a declaration: pathless and index segments removed.

    ``/(shop)/cart/index`` -> ``/cart``
    """
    parts = [
        seg.value
        for seg in segments
        if seg.kind not in (SegmentKind.PATHLESS, SegmentKind.INDEX)
    ]
    return "/" + "/".join(parts)
