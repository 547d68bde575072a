"""Resolver configuration.

WayfinderConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WayfinderConfig:
    """Resolver configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = WayfinderConfig(index_segment="_index", log_level="debug")
    """

    # Declaration syntax
    index_segment: str = "index"  # Segment literal that declares an index route

    # Discovery
    layout_stem: str = "_layout"  # File stem that declares a directory layout
    route_suffixes: tuple[str, ...] = (".py", ".html", ".md", ".mdx")

    # Matching
    index_before_empty_splat: bool = True  # At end-of-path, Index outranks a zero-length splat

    # Logging (applied by the CLI; the library never configures handlers)
    log_level: str = "info"
