"""Tests for mdpages.discovery.filesystem."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from mdpages.config import ConfigError, MdPagesOptions
from mdpages.discovery import FilesystemDiscoveryService, build_route_map
from tests._fixtures.content_builder import ContentBuilder


def _service(root: Path, **overrides: object) -> FilesystemDiscoveryService:
    options = MdPagesOptions(source_directory=str(root), **overrides)  # type: ignore[arg-type]
    return FilesystemDiscoveryService(options)


def test_discover_with_routes_async_maps_file_names(content_builder: ContentBuilder) -> None:
    content_builder.write({"home.md": "# Home\n", "about-us.md": "# About\n", "notes.txt": "skip"})

    routes = asyncio.run(_service(content_builder.path()).discover_with_routes_async())

    assert routes == {"home.md": "/home", "about-us.md": "/about-us"}


def test_broad_file_pattern_still_discovers_only_markdown(content_builder: ContentBuilder) -> None:
    content_builder.write({"home.md": "# Home\n", "LOUD.MD": "# Loud\n", "notes.txt": "skip"})

    found = _service(content_builder.path(), file_pattern="*").discover()

    assert sorted(Path(path).name for path in found) == ["LOUD.MD", "home.md"]

def test_discovery_ignores_explicit_routes(content_builder: ContentBuilder) -> None:
    content_builder.write(
        {"guide.md": '<!-- This is configuration data -->\n<!-- @page "/custom" -->\n# Guide\n'}
    )

    routes = _service(content_builder.path()).discover_with_routes()

    assert routes == {"guide.md": "/guide"}


def test_discover_respects_recursion_setting(content_builder: ContentBuilder) -> None:
    content_builder.write({"top.md": "# Top\n", "nested/deep.md": "# Deep\n"})

    recursive = _service(content_builder.path()).discover()
    flat = _service(content_builder.path(), search_recursively=False).discover()

    assert sorted(Path(path).name for path in recursive) == ["deep.md", "top.md"]
    assert [Path(path).name for path in flat] == ["top.md"]


def test_discover_rescans_on_every_call(content_builder: ContentBuilder) -> None:
    service = _service(content_builder.path())
    assert service.discover() == []

    content_builder.write({"late.md": "# Late\n"})

    assert [Path(path).name for path in service.discover()] == ["late.md"]


def test_missing_source_directory_discovers_nothing(tmp_path: Path) -> None:
    service = _service(tmp_path / "missing")
    assert service.discover() == []
    assert asyncio.run(service.discover_async()) == []


def test_base_route_applies_to_route_map(content_builder: ContentBuilder) -> None:
    content_builder.write({"index.md": "# Home\n", "setup_guide.md": "# Setup\n"})

    routes = _service(content_builder.path(), base_route_path="docs").discover_with_routes()

    assert routes == {"index.md": "/", "setup_guide.md": "/docs/setup-guide"}


def test_directory_accessors_resolve_against_content_root(tmp_path: Path) -> None:
    options = MdPagesOptions(source_directory="content", output_directory="Pages")
    service = FilesystemDiscoveryService(options, content_root=tmp_path)

    assert service.source_directory() == str((tmp_path / "content").resolve())
    assert service.output_directory() == str((tmp_path / "Pages").resolve())


def test_invalid_options_fail_fast() -> None:
    with pytest.raises(ConfigError):
        FilesystemDiscoveryService(MdPagesOptions(source_directory=""))


def test_build_route_map_uses_base_names() -> None:
    assert build_route_map(["/abs/path/Read Me.md", "rel\\win_file.md"]) == {
        "Read Me.md": "/read-me",
        "win_file.md": "/win-file",
    }
