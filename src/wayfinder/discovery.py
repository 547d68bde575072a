"""Filesystem route discovery for a pages directory.

Walks the directory tree and turns it into route declarations:

- Directory names become segments verbatim, so ``[id]``, ``[...rest]``
  and ``(group)`` directories work as dynamic, splat and pathless levels.
- A ``_layout.*`` file declares its directory as a layout.
- Any other file with a route suffix declares ``directory/stem`` as a
  leaf; the stem ``index`` declares the directory's index route.

Files are never imported.  Each declaration's payload is the file path,
for the rendering collaborator to load.

Example::

    pages/
      _layout.html          # layout  /
      index.md              # leaf    /index          (serves /)
      users/
        [id].py             # leaf    /users/[id]
      files/
        [...rest].py        # leaf    /files/[...rest]
      (marketing)/
        _layout.html        # layout  /(marketing)
        about.md            # leaf    /(marketing)/about  (serves /about)
"""

import logging
from pathlib import Path

from wayfinder.config import WayfinderConfig
from wayfinder.routing.table import RouteDeclaration, RouteTable, build_route_table

logger = logging.getLogger("wayfinder.discovery")


def discover_routes(
    pages_dir: str | Path,
    config: WayfinderConfig | None = None,
) -> list[RouteDeclaration]:
    """Walk a pages directory and return its declarations.

    Args:
        pages_dir: Path to the pages directory.
        config: Supplies the layout stem and route suffixes.

    Returns:
        Declarations in a stable order: within a directory, its layout
        first, then its files sorted by name, then its subdirectories.
    """
    config = config or WayfinderConfig()
    root = Path(pages_dir).resolve()
    if not root.is_dir():
        raise FileNotFoundError(f"Pages directory not found: {root}")

    declarations: list[RouteDeclaration] = []
    _walk_directory(root, url_parts=[], config=config, declarations=declarations)
    logger.debug("Discovered %d declarations under %s", len(declarations), root)
    return declarations


def discover_table(
    pages_dir: str | Path,
    config: WayfinderConfig | None = None,
) -> RouteTable:
    """Discover and compile a pages directory in one step."""
    config = config or WayfinderConfig()
    return build_route_table(discover_routes(pages_dir, config), config)


def _walk_directory(
    directory: Path,
    *,
    url_parts: list[str],
    config: WayfinderConfig,
    declarations: list[RouteDeclaration],
) -> None:
    """Recursively walk a directory, collecting declarations.

    Args:
        directory: Current directory being walked.
        url_parts: Declaration segments accumulated so far.
        config: Discovery conventions.
        declarations: Accumulator for discovered declarations.
    """
    entries = sorted(directory.iterdir())
    dir_path = "/" + "/".join(url_parts)

    # Check for _layout.* at this level
    for item in entries:
        if item.is_file() and item.stem == config.layout_stem:
            declarations.append(RouteDeclaration(dir_path, leaf=False, payload=item))
            break

    # Route files at this level
    for item in entries:
        if not item.is_file():
            continue
        if item.suffix not in config.route_suffixes:
            continue
        if item.name.startswith(("_", ".")):
            continue
        path = "/" + "/".join([*url_parts, item.stem])
        declarations.append(RouteDeclaration(path, leaf=True, payload=item))

    # Recurse into subdirectories
    for item in entries:
        if not item.is_dir():
            continue
        if item.name.startswith(("_", ".")):
            continue
        _walk_directory(
            item,
            url_parts=[*url_parts, item.name],
            config=config,
            declarations=declarations,
        )
