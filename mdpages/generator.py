"""Markdown to page artifact generation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .config import ConfigError, MdPagesOptions
from .emitter import PageEmitter
from .logging import get_logger
from .merge import merge
from .models import CommentDirectives, ContentDocument, Frontmatter, ResolvedConfig
from .naming import artifact_filename
from .parsing import parse_comment_directives, parse_frontmatter


@dataclass
class GeneratedPage:
    """One artifact written by a generation run."""

    source_path: str
    artifact_path: Path
    route: str


@dataclass
class FailedPage:
    """A document that could not be turned into an artifact."""

    source_path: str
    error: str


@dataclass
class GenerationReport:
    """Outcome of a generation run over a source directory."""

    generated: List[GeneratedPage] = field(default_factory=list)
    failed: List[FailedPage] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def resolve_document(
    document: ContentDocument, options: MdPagesOptions | None = None
) -> ResolvedConfig:
    """Parse both configuration dialects of ``document`` and merge them."""
    options = options or MdPagesOptions()
    directives: Optional[CommentDirectives] = None
    frontmatter: Optional[Frontmatter] = None
    remainder = document.raw_text

    if options.enable_comment_directives:
        directives, remainder = parse_comment_directives(remainder)
    if options.enable_frontmatter:
        frontmatter, remainder = parse_frontmatter(remainder)

    return merge(
        frontmatter,
        directives,
        filename=document.path,
        base_route=options.base_route_path,
    )


def read_document(path: Path, source_root: Path) -> ContentDocument:
    """Read ``path`` into a :class:`ContentDocument` relative to ``source_root``."""
    try:
        relative = path.relative_to(source_root).as_posix()
    except ValueError:
        relative = path.name
    return ContentDocument(path=relative, raw_text=path.read_text(encoding="utf-8-sig"))


def find_documents(
    source_root: Path, pattern: str = "*.md", *, recursive: bool = True
) -> List[Path]:
    """Return matching files under ``source_root`` in a stable order."""
    matches = source_root.rglob(pattern) if recursive else source_root.glob(pattern)
    return sorted(
        path for path in matches if path.is_file() and path.suffix.lower() == ".md"
    )


class PageGenerator:
    """Generates one page artifact per markdown document."""

    def __init__(
        self,
        options: MdPagesOptions | None = None,
        emitter: PageEmitter | None = None,
    ) -> None:
        self.options = options or MdPagesOptions()
        self.emitter = emitter or PageEmitter(self.options.templates_dir)
        self.logger = get_logger("generator")

    def generate(
        self, source_directory: str | Path | None, output_directory: str | Path | None
    ) -> GenerationReport:
        """Write artifacts for every document under ``source_directory``.

        Output is flat: nested source folders are not mirrored, and artifacts
        whose names collide overwrite each other in discovery order.
        """
        if source_directory is None or not str(source_directory).strip():
            raise ConfigError("source_directory cannot be null or empty")
        if output_directory is None or not str(output_directory).strip():
            raise ConfigError("output_directory cannot be null or empty")

        source_root = Path(source_directory).expanduser().resolve()
        output_root = Path(output_directory).expanduser().resolve()
        report = GenerationReport()

        if not source_root.is_dir():
            self.logger.warning("Source directory does not exist: %s", source_root)
            return report

        output_root.mkdir(parents=True, exist_ok=True)
        documents = find_documents(source_root, self.options.file_pattern, recursive=True)
        self.logger.info("Found %d markdown files to process", len(documents))

        for path in documents:
            try:
                page = self.generate_page(path, source_root, output_root)
            except Exception as exc:
                self.logger.error("Error processing %s: %s", path, exc)
                report.failed.append(FailedPage(source_path=str(path), error=str(exc)))
                continue
            report.generated.append(page)
        return report

    def generate_page(self, path: Path, source_root: Path, output_root: Path) -> GeneratedPage:
        """Generate the artifact for a single markdown file."""
        document = read_document(path, source_root)
        config = resolve_document(document, self.options)
        target = output_root / artifact_filename(path.name)
        self.emitter.write(config, document.path, target)
        self.logger.info("Generated: %s -> %s", target.name, config.route)
        return GeneratedPage(source_path=document.path, artifact_path=target, route=config.route)


def generate(
    source_directory: str | Path,
    output_directory: str | Path,
    *,
    options: MdPagesOptions | None = None,
) -> GenerationReport:
    """Convenience wrapper around :meth:`PageGenerator.generate`."""
    return PageGenerator(options).generate(source_directory, output_directory)


__all__ = [
    "FailedPage",
    "GeneratedPage",
    "GenerationReport",
    "PageGenerator",
    "find_documents",
    "generate",
    "read_document",
    "resolve_document",
]
