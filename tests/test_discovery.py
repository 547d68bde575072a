"""Tests for wayfinder.discovery: declarations from a pages directory."""

from pathlib import Path

import pytest

from wayfinder.config import WayfinderConfig
from wayfinder.discovery import discover_routes, discover_table
from wayfinder.errors import DuplicateRoute
from wayfinder.routing.resolver import resolve
from wayfinder.routing.result import MatchResult


def _touch(root: Path, relative: str) -> Path:
    file = root / relative
    file.parent.mkdir(parents=True, exist_ok=True)
    file.write_text("")
    return file


@pytest.fixture
def pages(tmp_path: Path) -> Path:
    root = tmp_path / "pages"
    _touch(root, "_layout.html")
    _touch(root, "index.md")
    _touch(root, "users/[id].py")
    _touch(root, "users/[id]/settings.py")
    _touch(root, "files/[...rest].py")
    _touch(root, "files/mine.html")
    _touch(root, "(marketing)/_layout.html")
    _touch(root, "(marketing)/about.md")
    _touch(root, "_private/secret.py")
    _touch(root, "notes.txt")
    return root


class TestDiscoverRoutes:
    def test_declarations(self, pages: Path) -> None:
        found = {(d.path, d.leaf) for d in discover_routes(pages)}
        assert found == {
            ("/", False),
            ("/index", True),
            ("/(marketing)", False),
            ("/(marketing)/about", True),
            ("/files/[...rest]", True),
            ("/files/mine", True),
            ("/users/[id]", True),
            ("/users/[id]/settings", True),
        }

    def test_layout_comes_before_files(self, pages: Path) -> None:
        declarations = discover_routes(pages)
        assert declarations[0].path == "/"
        assert declarations[0].leaf is False

    def test_payload_is_file(self, pages: Path) -> None:
        by_path = {d.path: d.payload for d in discover_routes(pages)}
        assert by_path["/users/[id]"] == (pages / "users" / "[id].py").resolve()

    def test_custom_suffixes(self, pages: Path) -> None:
        config = WayfinderConfig(route_suffixes=(".txt",))
        found = {d.path for d in discover_routes(pages, config) if d.leaf}
        assert found == {"/notes"}

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            discover_routes(tmp_path / "nope")


class TestDiscoverTable:
    def test_resolves_discovered_routes(self, pages: Path) -> None:
        table = discover_table(pages)

        home = resolve(table, "/")
        assert isinstance(home, MatchResult)
        assert home.leaf.payload.name == "index.md"

        about = resolve(table, "/about")
        assert isinstance(about, MatchResult)
        assert [n.payload.name for n in about.layouts] == ["_layout.html", "_layout.html"]

        settings = resolve(table, "/users/7/settings")
        assert isinstance(settings, MatchResult)
        assert settings.params == {"id": "7"}

        files = resolve(table, "/files/a/b")
        assert isinstance(files, MatchResult)
        assert files.params == {"rest": "a/b"}

    def test_conflicting_files(self, tmp_path: Path) -> None:
        root = tmp_path / "pages"
        _touch(root, "about.md")
        _touch(root, "(group)/about.md")
        with pytest.raises(DuplicateRoute):
            discover_table(root)
