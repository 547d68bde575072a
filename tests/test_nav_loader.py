"""Tests for wayfinder.nav.loader: JSON and TOML nav definitions."""

import json
from pathlib import Path

import pytest

from wayfinder.errors import ConfigurationError
from wayfinder.nav.loader import load_nav_tree, parse_nav_tree
from wayfinder.nav.types import NavLeaf, NavSection


class TestParse:
    def test_list_of_sections(self) -> None:
        tree = parse_nav_tree({
            "sections": [
                {"name": "Guides", "pages": [{"name": "Tutorial", "link": "/tutorial"}]},
            ]
        })
        assert tree.sections == (NavSection("Guides", (NavLeaf("Tutorial", "/tutorial"),)),)

    def test_mapping_keys_become_ids(self) -> None:
        tree = parse_nav_tree({
            "sections": {"reference": {"name": "Reference", "pages": []}},
        })
        assert tree.sections[0].section_id == "reference"

    def test_nested_section(self) -> None:
        tree = parse_nav_tree({
            "sections": [
                {
                    "name": "API",
                    "pages": [
                        {"name": "Document", "pages": [{"name": "Head", "link": "/head"}]},
                    ],
                },
            ]
        })
        nested = tree.sections[0].pages[0]
        assert isinstance(nested, NavSection)
        assert nested.pages == (NavLeaf("Head", "/head"),)

    def test_missing_sections_key(self) -> None:
        with pytest.raises(ConfigurationError):
            parse_nav_tree({"menus": []})

    def test_page_without_link_or_pages(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            parse_nav_tree({"sections": [{"name": "A", "pages": [{"name": "x"}]}]})
        assert "sections[0].pages[0]" in str(exc_info.value)

    def test_linked_section_keeps_its_pages(self) -> None:
        tree = parse_nav_tree({
            "sections": [
                {
                    "name": "API",
                    "pages": [
                        {
                            "name": "Document",
                            "link": "/document",
                            "pages": [{"name": "Head", "link": "/Head"}],
                        },
                    ],
                },
            ]
        })
        nested = tree.sections[0].pages[0]
        assert isinstance(nested, NavSection)
        assert nested.link == "/document"
        assert nested.pages == (NavLeaf("Head", "/Head"),)
        assert [leaf.link for leaf in tree.leaves()] == ["/document", "/Head"]

    def test_top_level_section_link(self) -> None:
        tree = parse_nav_tree({
            "sections": [{"name": "Guides", "link": "/guides", "pages": []}],
        })
        assert tree.sections[0].link == "/guides"


class TestLoad:
    def test_json(self, tmp_path: Path) -> None:
        file = tmp_path / "docs.json"
        file.write_text(json.dumps({
            "sections": [{"name": "Guides", "pages": [{"name": "T", "link": "/t"}]}],
        }))
        tree = load_nav_tree(file)
        assert tree.name == "docs"
        assert [leaf.link for leaf in tree.leaves()] == ["/t"]

    def test_toml(self, tmp_path: Path) -> None:
        file = tmp_path / "nav.toml"
        file.write_text(
            'name = "sidebar"\n'
            "[[sections]]\n"
            'name = "Reference"\n'
            'id = "ref"\n'
            "[[sections.pages]]\n"
            'name = "API"\n'
            'link = "/api-reference"\n'
        )
        tree = load_nav_tree(file)
        assert tree.name == "sidebar"
        assert tree.sections[0].section_id == "ref"
        assert tree.sections[0].pages == (NavLeaf("API", "/api-reference"),)

    def test_invalid_json(self, tmp_path: Path) -> None:
        file = tmp_path / "bad.json"
        file.write_text("{not json")
        with pytest.raises(ConfigurationError):
            load_nav_tree(file)

    def test_unsupported_suffix(self, tmp_path: Path) -> None:
        file = tmp_path / "nav.yaml"
        file.write_text("sections: []")
        with pytest.raises(ConfigurationError):
            load_nav_tree(file)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_nav_tree(tmp_path / "absent.json")
