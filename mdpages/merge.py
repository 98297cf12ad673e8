"""Precedence rules combining frontmatter and comment directives."""

from __future__ import annotations

from typing import Optional

from .models import CommentDirectives, Frontmatter, PageSettings, ResolvedConfig
from .naming import apply_base_route, slugify, title_from_filename


def merge_settings(
    frontmatter: Optional[Frontmatter],
    directives: Optional[CommentDirectives],
) -> PageSettings:
    """Overlay directive fields on frontmatter fields, one field at a time."""
    merged = PageSettings()
    if frontmatter is not None:
        merged.title = frontmatter.title
        merged.layout = frontmatter.layout
        merged.show_title = frontmatter.show_title
        merged.description = frontmatter.description
        merged.tags = list(frontmatter.tags) if frontmatter.tags is not None else None

    if directives is not None:
        if directives.title:
            merged.title = directives.title
        if directives.layout:
            merged.layout = directives.layout
        if directives.show_title is not None:
            merged.show_title = directives.show_title
        if directives.description:
            merged.description = directives.description
        if directives.tags:
            merged.tags = list(directives.tags)
    return merged


def resolve_route(
    filename: str,
    frontmatter: Optional[Frontmatter],
    directives: Optional[CommentDirectives],
    *,
    base_route: str | None = None,
) -> str:
    """Return the final route: ``@page`` directive, then frontmatter, then filename."""
    if directives is not None and directives.route_directive:
        return directives.route_directive
    if frontmatter is not None and frontmatter.route:
        return apply_base_route(frontmatter.route, base_route)
    return slugify(filename, base_route)


def merge(
    frontmatter: Optional[Frontmatter],
    directives: Optional[CommentDirectives],
    *,
    filename: str,
    base_route: str | None = None,
) -> ResolvedConfig:
    """Resolve the configuration for ``filename`` from both dialects."""
    settings = merge_settings(frontmatter, directives)
    return ResolvedConfig(
        route=resolve_route(filename, frontmatter, directives, base_route=base_route),
        title=settings.title or title_from_filename(filename),
        layout=settings.layout,
        show_title=settings.show_title is not False,
        description=settings.description,
        tags=list(settings.tags or []),
    )


__all__ = ["merge", "merge_settings", "resolve_route"]
