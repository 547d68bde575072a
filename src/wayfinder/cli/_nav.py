"""``wayfinder nav``: show which nav sections a path expands."""

import argparse
import sys

from wayfinder.errors import ConfigurationError
from wayfinder.nav.loader import load_nav_tree
from wayfinder.nav.sequence import next_page
from wayfinder.nav.state import NavTreeState


def run_nav(args: argparse.Namespace) -> None:
    """Print every section marked ``[+]`` (expanded) or ``[-]``, then the next page."""
    try:
        tree = load_nav_tree(args.nav_file)
    except (FileNotFoundError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    state = NavTreeState(tree, args.path)
    for section in tree.iter_sections():
        marker = "[+]" if state.is_expanded(section.section_id) else "[-]"
        print(f"{marker} {section.name}")

    following = next_page(tree, args.path)
    if following is not None:
        print(f"next: {following.title} ({following.link})")
