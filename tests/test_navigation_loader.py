"""Unit tests for building and validating navigation trees from YAML."""

from __future__ import annotations

import re
import typing as typ
from textwrap import dedent

import pytest

from docsite.navigation import (
    NavigationError,
    NavItem,
    NavSection,
    build_navigation,
    load_navigation,
    validate_tree,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_load_navigation_builds_frozen_tree(tmp_path: Path) -> None:
    """YAML sections and nested children become NavSection/NavItem tuples."""
    path = tmp_path / "navigation.yaml"
    path.write_text(
        dedent(
            """
            sections:
              - title: Getting Started
                items:
                  - title: Introduction
                    href: /docs/getting-started/introduction
                  - title: Installation
                    href: /docs/getting-started/installation
                    children:
                      - title: Windows
                        href: /docs/getting-started/installation/windows
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )

    tree = load_navigation(path)

    assert tree == (
        NavSection(
            "Getting Started",
            (
                NavItem("Introduction", "/docs/getting-started/introduction"),
                NavItem(
                    "Installation",
                    "/docs/getting-started/installation",
                    children=(
                        NavItem(
                            "Windows", "/docs/getting-started/installation/windows"
                        ),
                    ),
                ),
            ),
        ),
    )


def test_load_navigation_requires_existing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_navigation(tmp_path / "missing.yaml")


def test_load_navigation_wraps_yaml_errors(tmp_path: Path) -> None:
    nav_path = tmp_path / "navigation.yaml"
    nav_path.write_text("sections: [\n", encoding="utf-8")

    with pytest.raises(NavigationError, match="is not valid YAML"):
        load_navigation(nav_path)


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({}, "'sections' list"),
        ({"sections": [{"items": []}]}, "sections[0] is missing a 'title'"),
        (
            {"sections": [{"title": "A", "items": [{"title": "x"}]}]},
            "sections[0].items[0] is missing a 'href'",
        ),
        ({"sections": [{"title": "A", "items": "nope"}]}, "must be a list"),
    ],
)
def test_build_navigation_rejects_bad_shapes(
    payload: dict[str, typ.Any], message: str
) -> None:
    with pytest.raises(NavigationError, match=re.escape(message)):
        build_navigation(payload)


def test_validate_tree_reports_every_problem() -> None:
    """Duplicates, unrooted hrefs, and empty sections are listed together."""
    tree = (
        NavSection("Empty", ()),
        NavSection(
            "Docs",
            (
                NavItem("A", "/docs/a", children=(NavItem("A again", "/docs/a"),)),
                NavItem("Relative", "docs/b"),
            ),
        ),
    )
    with pytest.raises(NavigationError) as excinfo:
        validate_tree(tree)
    message = str(excinfo.value)
    assert "section 'Empty' has no items" in message
    assert "href '/docs/a' is used by both 'A' and 'A again'" in message
    assert "href 'docs/b' must start with '/'" in message


def test_item_as_dict_omits_empty_children() -> None:
    item = NavItem("A", "/a", children=(NavItem("B", "/a/b"),))
    assert item.as_dict() == {
        "title": "A",
        "href": "/a",
        "children": [{"title": "B", "href": "/a/b"}],
    }
    assert NavItem("B", "/b").as_dict() == {"title": "B", "href": "/b"}
