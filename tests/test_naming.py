"""Tests for mdpages.naming."""

from __future__ import annotations

import pytest

from mdpages.naming import (
    apply_base_route,
    artifact_filename,
    identifier_from_filename,
    slugify,
    title_from_filename,
)


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("user_guide", "/user-guide"),
        ("Multiple   Spaces", "/multiple-spaces"),
        ("API Reference", "/api-reference"),
        ("about.md", "/about"),
        ("about-us.md", "/about-us"),
        ("_leading and trailing_.md", "/leading-and-trailing"),
        ("mixed _-_ separators.md", "/mixed-separators"),
    ],
)
def test_slugify_normalises_separators(filename: str, expected: str) -> None:
    assert slugify(filename) == expected


def test_slugify_maps_index_to_root() -> None:
    assert slugify("index") == "/"
    assert slugify("INDEX") == "/"
    assert slugify("Index.md") == "/"
    assert slugify("index.md", "docs") == "/"


def test_slugify_keeps_punctuation() -> None:
    assert slugify("Q&A #1.md") == "/q&a-#1"


def test_slugify_applies_base_route() -> None:
    assert slugify("getting-started.md", "docs") == "/docs/getting-started"
    assert slugify("getting-started.md", "/docs/") == "/docs/getting-started"


@pytest.mark.parametrize(
    "filename",
    ["a  b", "__x__", "one - two", "Tab_and space", "----", "x_-_-_y", "index page"],
)
def test_slug_invariants(filename: str) -> None:
    slug = slugify(filename)
    assert slug.startswith("/")
    assert " " not in slug
    assert "_" not in slug
    assert "--" not in slug


def test_slugify_ignores_directories() -> None:
    assert slugify("guides/nested/setup_guide.md") == "/setup-guide"


def test_title_from_filename() -> None:
    assert title_from_filename("getting-started") == "Getting Started"
    assert title_from_filename("user_GUIDE.md") == "User Guide"
    assert title_from_filename("about") == "About"


def test_identifier_from_filename() -> None:
    assert identifier_from_filename("getting-started") == "GettingStarted"
    assert identifier_from_filename("user_guide.md") == "UserGuide"
    assert artifact_filename("about.md") == "About.razor"


def test_synthesis_tolerates_empty_and_non_letter_segments() -> None:
    assert title_from_filename("double--dash") == "Double Dash"
    assert identifier_from_filename("double--dash") == "DoubleDash"
    assert identifier_from_filename("2024-release-notes") == "2024ReleaseNotes"
    assert identifier_from_filename("Q&A") == "Qa"
    assert identifier_from_filename("---") == "Page"
    assert title_from_filename("---") == "---"


def test_apply_base_route() -> None:
    assert apply_base_route("custom") == "/custom"
    assert apply_base_route("/custom", "docs") == "/docs/custom"
    assert apply_base_route("/docs/custom", "docs") == "/docs/custom"
    assert apply_base_route("/", "docs") == "/"
