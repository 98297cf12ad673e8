"""Tests for mdpages.generator."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from mdpages.config import ConfigError, MdPagesOptions
from mdpages.generator import PageGenerator, generate, resolve_document
from mdpages.models import ContentDocument
from tests._fixtures.content_builder import ContentBuilder


def test_generate_plain_document_uses_filename_defaults(content_builder: ContentBuilder) -> None:
    content_builder.write({"about.md": "# About us\n"})

    report = generate(content_builder.path(), content_builder.output)

    assert report.ok
    assert [page.route for page in report.generated] == ["/about"]
    artifact = content_builder.read_output("About.razor")
    assert artifact.startswith('@page "/about"\n')
    assert "<PageTitle>About</PageTitle>" in artifact
    assert '<MarkdownSection FromAsset="about.md" />' in artifact


def test_generate_applies_base_route(content_builder: ContentBuilder) -> None:
    content_builder.write({"about.md": "# About\n"})
    options = MdPagesOptions(source_directory=str(content_builder.path()), base_route_path="docs")

    PageGenerator(options).generate(content_builder.path(), content_builder.output)

    assert content_builder.read_output("About.razor").startswith('@page "/docs/about"\n')


def test_generate_directive_route_beats_frontmatter(content_builder: ContentBuilder) -> None:
    content_builder.write(
        {
            "guide.md": """
            <!-- This is configuration data -->
            <!-- @page "/custom/path" -->
            ---
            route: /ignored
            title: From Frontmatter
            description: Kept description
            ---
            # Guide
            """,
        }
    )

    generate(content_builder.path(), content_builder.output)

    artifact = content_builder.read_output("Guide.razor")
    assert artifact.startswith('@page "/custom/path"\n')
    assert "<PageTitle>From Frontmatter</PageTitle>" in artifact
    assert 'content="Kept description"' in artifact


def test_generate_is_flat_and_idempotent(content_builder: ContentBuilder, tmp_path: Path) -> None:
    content_builder.write(
        {
            "index.md": "# Home\n",
            "guides/getting-started.md": "---\ntags: [setup, intro]\n---\nSteps\n",
            "guides/deep/user_guide.md": "# Guide\n",
        }
    )
    first = tmp_path / "first"
    second = tmp_path / "second"

    generate(content_builder.path(), first)
    generate(content_builder.path(), second)

    names = sorted(path.name for path in first.iterdir())
    assert names == ["GettingStarted.razor", "Index.razor", "UserGuide.razor"]
    assert all(path.is_file() for path in first.iterdir())
    for name in names:
        assert (first / name).read_bytes() == (second / name).read_bytes()
    assert 'FromAsset="guides/getting-started.md"' in (first / "GettingStarted.razor").read_text(
        encoding="utf-8"
    )
    assert (first / "Index.razor").read_text(encoding="utf-8").startswith('@page "/"\n')


def test_malformed_frontmatter_falls_back_to_defaults(content_builder: ContentBuilder) -> None:
    content_builder.write({"broken-page.md": "---\ntags: [one, two\n---\nBody\n"})

    report = generate(content_builder.path(), content_builder.output)

    assert report.ok
    artifact = content_builder.read_output("BrokenPage.razor")
    assert artifact.startswith('@page "/broken-page"\n')
    assert "<PageTitle>Broken Page</PageTitle>" in artifact


def test_missing_source_directory_yields_empty_report(
    tmp_path: Path, caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(logging.getLogger("mdpages"), "propagate", True)
    output = tmp_path / "out"

    with caplog.at_level(logging.WARNING, logger="mdpages"):
        report = generate(tmp_path / "missing", output)

    assert report.generated == []
    assert report.failed == []
    assert "Source directory does not exist" in caplog.text


def test_generate_rejects_empty_source_directory(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        generate("", tmp_path / "out")
    with pytest.raises(ConfigError):
        generate(None, tmp_path / "out")  # type: ignore[arg-type]


def test_per_document_failure_does_not_stop_batch(content_builder: ContentBuilder) -> None:
    content_builder.write({"good.md": "# Good\n"})
    (content_builder.path() / "bad.md").write_bytes(b"\xff\xfe\xfa not utf-8")

    report = generate(content_builder.path(), content_builder.output)

    assert [page.route for page in report.generated] == ["/good"]
    assert len(report.failed) == 1
    assert report.failed[0].source_path.endswith("bad.md")
    assert not report.ok


def test_colliding_identifiers_last_write_wins(content_builder: ContentBuilder) -> None:
    content_builder.write(
        {
            "a/user-guide.md": "<!-- This is configuration data -->\n<!-- title: First -->\n",
            "b/user_guide.md": "<!-- This is configuration data -->\n<!-- title: Second -->\n",
        }
    )

    report = generate(content_builder.path(), content_builder.output)

    assert len(report.generated) == 2
    assert "<PageTitle>Second</PageTitle>" in content_builder.read_output("UserGuide.razor")


def test_resolve_document_respects_disabled_dialects() -> None:
    document = ContentDocument(
        path="page.md",
        raw_text="<!-- This is configuration data -->\n<!-- title: Directive -->\n---\ntitle: Yaml\n---\n",
    )

    only_yaml = MdPagesOptions(enable_comment_directives=False)
    assert resolve_document(document, only_yaml).title == "Page"

    only_comments = MdPagesOptions(enable_frontmatter=False)
    assert resolve_document(document, only_comments).title == "Directive"

    both = resolve_document(document)
    assert both.title == "Directive"


def test_generate_skips_non_markdown_files_with_broad_pattern(
    content_builder: ContentBuilder,
) -> None:
    content_builder.write({"guide.md": "# Guide\n", "notes.txt": "plain text\n"})

    report = PageGenerator(MdPagesOptions(file_pattern="*")).generate(
        str(content_builder.root), str(content_builder.output)
    )

    assert [page.source_path for page in report.generated] == ["guide.md"]
    assert not (content_builder.output / "Notes.razor").exists()
