"""Load a navigation display tree from a JSON or TOML file.

Two layouts are accepted.  A list of sections::

    {"sections": [
        {"name": "Guides", "pages": [
            {"name": "Tutorial", "link": "/tutorial"},
            {"name": "Advanced", "pages": [...]}
        ]}
    ]}

or a mapping keyed by section id::

    {"sections": {"guides": {"name": "Guides", "pages": [...]}}}

An entry with both ``link`` and ``pages`` is a linked section: a page
of its own that also groups the pages below it.
"""

import json
import tomllib
from pathlib import Path
from typing import Any

from wayfinder.errors import ConfigurationError
from wayfinder.nav.types import NavLeaf, NavSection, NavTree


def load_nav_tree(path: str | Path) -> NavTree:
    """Read and parse a nav definition file.

    The format is chosen by suffix: ``.toml`` or ``.json``.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ConfigurationError: If the file cannot be parsed or has the
            wrong shape.
    """
    file = Path(path)
    text = file.read_text(encoding="utf-8")
    try:
        if file.suffix == ".toml":
            data = tomllib.loads(text)
        elif file.suffix == ".json":
            data = json.loads(text)
        else:
            msg = f"Unsupported nav file type {file.suffix!r} (use .json or .toml)"
            raise ConfigurationError(msg)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        msg = f"Could not parse nav file {file}: {exc}"
        raise ConfigurationError(msg) from exc
    return parse_nav_tree(data, name=file.stem)


def parse_nav_tree(data: Any, *, name: str = "") -> NavTree:
    """Build a :class:`NavTree` from decoded JSON/TOML data."""
    if not isinstance(data, dict) or "sections" not in data:
        raise ConfigurationError("Nav definition must be a table with a 'sections' key")

    raw = data["sections"]
    if isinstance(raw, dict):
        sections = tuple(
            _parse_section(body, where=f"sections.{key}", default_id=key)
            for key, body in raw.items()
        )
    elif isinstance(raw, list):
        sections = tuple(
            _parse_section(body, where=f"sections[{i}]") for i, body in enumerate(raw)
        )
    else:
        raise ConfigurationError("'sections' must be a list or a table")
    return NavTree(sections=sections, name=str(data.get("name", name)))


def _parse_section(body: Any, *, where: str, default_id: str | None = None) -> NavSection:
    if not isinstance(body, dict) or "name" not in body:
        raise ConfigurationError(f"{where}: a section needs a 'name'")
    pages = body.get("pages", [])
    if not isinstance(pages, list):
        raise ConfigurationError(f"{where}.pages must be a list")
    return NavSection(
        name=str(body["name"]),
        pages=tuple(_parse_page(p, where=f"{where}.pages[{i}]") for i, p in enumerate(pages)),
        id=body.get("id", default_id),
        link=str(body["link"]) if "link" in body else None,
    )


def _parse_page(body: Any, *, where: str) -> NavLeaf | NavSection:
    if isinstance(body, dict) and "pages" in body:
        return _parse_section(body, where=where)
    if isinstance(body, dict) and "link" in body:
        if "name" not in body:
            raise ConfigurationError(f"{where}: a page needs a 'name'")
        return NavLeaf(name=str(body["name"]), link=str(body["link"]))
    raise ConfigurationError(f"{where}: expected a page with 'link' or a section with 'pages'")
