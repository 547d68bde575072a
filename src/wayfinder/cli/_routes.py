"""``wayfinder routes``: list discovered routes.

Scans a pages directory, compiles it, and prints every node with its
kind, declared path, and source file.
"""

import argparse
import sys

from wayfinder.discovery import discover_table
from wayfinder.errors import BuildError
from wayfinder.routing.table import RouteTable


def load_table(pages_dir: str) -> RouteTable:
    """Discover and build, turning failures into a clean exit."""
    try:
        return discover_table(pages_dir)
    except (FileNotFoundError, BuildError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of KIND, PATH and SOURCE for ``args.pages_dir``."""
    table = load_table(args.pages_dir)

    rows: list[tuple[str, str, str]] = []
    for node in table.walk():
        if not node.declared:
            continue
        kind = "route" if node.leaf else "layout"
        source = str(node.payload.name) if node.payload is not None else ""
        rows.append((kind, node.path, source))

    if not rows:
        print("No routes discovered.")
        return

    # Column widths
    max_kind = max(max(len(r[0]) for r in rows), 4)  # "KIND" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_kind}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("KIND", "PATH", "SOURCE"))
    sep_len = max_kind + max_path + 4 + max((len(r[2]) for r in rows), default=0)
    print("-" * min(sep_len, 80))
    for kind, path, source in rows:
        print(fmt.format(kind, path, source))
