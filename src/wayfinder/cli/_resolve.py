"""``wayfinder resolve``: show the chain a path resolves to."""

import argparse
import sys

from wayfinder.cli._routes import load_table
from wayfinder.routing.resolver import resolve
from wayfinder.routing.result import NotFound


def run_resolve(args: argparse.Namespace) -> None:
    """Print the ancestor chain and parameters; exit 1 if nothing matches."""
    table = load_table(args.pages_dir)
    result = resolve(table, args.path)

    if isinstance(result, NotFound):
        print(f"Not found: {result.path}", file=sys.stderr)
        raise SystemExit(1)

    for depth, node in enumerate(result.nodes):
        label = node.path
        if node.declared:
            label += "  (route)" if node.leaf else "  (layout)"
        print(f"{'  ' * depth}{label}")

    for name, value in sorted(result.params.items()):
        print(f"{name} = {value}")
