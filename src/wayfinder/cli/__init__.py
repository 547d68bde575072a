"""Wayfinder CLI: inspect route tables and navigation state.

Entry point registered as ``wayfinder`` in ``pyproject.toml``::

    [project.scripts]
    wayfinder = "wayfinder.cli:main"
"""

import argparse
import logging
import sys

from wayfinder.config import WayfinderConfig


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wayfinder`` command."""
    parser = argparse.ArgumentParser(
        prog="wayfinder",
        description="Wayfinder: file-path route resolution and navigation state.",
    )
    parser.add_argument(
        "--log-level",
        default=WayfinderConfig().log_level,
        choices=["debug", "info", "warning", "error"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wayfinder routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List routes in a pages directory")
    routes_parser.add_argument("pages_dir", help="Pages directory to scan")

    # -- wayfinder resolve -------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Resolve a path to its route chain")
    resolve_parser.add_argument("pages_dir", help="Pages directory to scan")
    resolve_parser.add_argument("path", help="Request path (e.g. /users/42?tab=posts)")

    # -- wayfinder nav -----------------------------------------------------
    nav_parser = subparsers.add_parser("nav", help="Show expanded nav sections for a path")
    nav_parser.add_argument("nav_file", help="Nav definition (.json or .toml)")
    nav_parser.add_argument("path", help="Current path")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "routes":
        from wayfinder.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resolve":
        from wayfinder.cli._resolve import run_resolve

        run_resolve(args)
    elif args.command == "nav":
        from wayfinder.cli._nav import run_nav

        run_nav(args)
