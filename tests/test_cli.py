"""Tests for wayfinder.cli: CLI entrypoint and subcommands."""

import json
from pathlib import Path

import pytest

from wayfinder.cli import main


def _touch(root: Path, relative: str) -> None:
    file = root / relative
    file.parent.mkdir(parents=True, exist_ok=True)
    file.write_text("")


@pytest.fixture
def pages(tmp_path: Path) -> Path:
    root = tmp_path / "pages"
    _touch(root, "_layout.html")
    _touch(root, "index.md")
    _touch(root, "users/[id].py")
    return root


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    @pytest.mark.parametrize("command", ["routes", "resolve", "nav"])
    def test_subcommand_help_exits_zero(self, command: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([command, "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_resolve_missing_path(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "pages"])
        assert exc_info.value.code == 2

    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "wayfinder" in capsys.readouterr().out


class TestRoutes:
    def test_lists_routes(self, pages: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", str(pages)])
        out = capsys.readouterr().out
        assert "KIND" in out
        assert "/users/[id]" in out
        assert "layout" in out
        assert "[id].py" in out

    def test_missing_dir(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(tmp_path / "nope")])
        assert exc_info.value.code == 1
        assert "Error" in capsys.readouterr().err


class TestResolve:
    def test_prints_chain_and_params(self, pages: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", str(pages), "/users/42"])
        out = capsys.readouterr().out
        assert "/users/[id]  (route)" in out
        assert "id = 42" in out

    def test_not_found(self, pages: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", str(pages), "/nope/x"])
        assert exc_info.value.code == 1
        assert "Not found: /nope/x" in capsys.readouterr().err


class TestNav:
    def test_marks_expanded(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        nav_file = tmp_path / "nav.json"
        nav_file.write_text(json.dumps({
            "sections": [
                {"name": "Guides", "pages": [{"name": "Tutorial", "link": "/tutorial"}]},
                {
                    "name": "Reference",
                    "pages": [
                        {"name": "Concepts", "link": "/concepts"},
                        {"name": "API reference", "link": "/api-reference"},
                    ],
                },
            ]
        }))
        main(["nav", str(nav_file), "/concepts/signals"])
        out = capsys.readouterr().out
        assert "[-] Guides" in out
        assert "[+] Reference" in out
        assert "next: Reference / API reference (/api-reference)" in out

    def test_bad_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["nav", str(tmp_path / "missing.json"), "/"])
        assert exc_info.value.code == 1
