"""Route, title and artifact name synthesis from markdown filenames."""

from __future__ import annotations

import os
import re
from pathlib import PurePath
from typing import List

ARTIFACT_SUFFIX = ".razor"

_SLUG_SEPARATORS = re.compile(r"[ _]+")
_HYPHEN_RUNS = re.compile(r"-{2,}")
_WORD_SEPARATORS = re.compile(r"[-_\s]+")
_NON_IDENTIFIER_CHARS = re.compile(r"\W+")
_FALLBACK_IDENTIFIER = "Page"


def file_stem(filename: str) -> str:
    """Return the filename without directories or its final extension."""
    name = PurePath(filename.replace("\\", "/")).name
    stem, _ = os.path.splitext(name)
    return stem


def slugify(filename: str, base_route: str | None = None) -> str:
    """Return the default route for ``filename``.

    ``index`` (any case) maps to ``/``. Spaces and underscores become single
    hyphens; every other character passes through unchanged.
    """
    stem = file_stem(filename)
    if stem.lower() == "index":
        return "/"

    slug = _SLUG_SEPARATORS.sub("-", stem.lower())
    slug = _HYPHEN_RUNS.sub("-", slug).strip("-")

    base = (base_route or "").strip().strip("/")
    if base:
        return f"/{base}/{slug}" if slug else f"/{base}"
    return f"/{slug}"


def apply_base_route(route: str, base_route: str | None = None) -> str:
    """Ensure ``route`` is rooted and, when configured, nested under ``base_route``."""
    route = route.strip()
    if not route.startswith("/"):
        route = "/" + route

    base = (base_route or "").strip().strip("/")
    if not base or route == "/":
        return route
    prefix = f"/{base}"
    if route == prefix or route.startswith(prefix + "/"):
        return route
    return prefix + route


def title_from_filename(filename: str) -> str:
    """Return a display title, e.g. ``getting-started`` -> ``Getting Started``."""
    words = _split_words(file_stem(filename))
    if not words:
        return file_stem(filename).strip()
    return " ".join(_capitalize(word) for word in words)


def identifier_from_filename(filename: str) -> str:
    """Return the artifact base name, e.g. ``getting-started`` -> ``GettingStarted``."""
    words = _split_words(file_stem(filename))
    identifier = "".join(_capitalize(word) for word in words)
    identifier = _NON_IDENTIFIER_CHARS.sub("", identifier).replace("_", "")
    if not identifier:
        return _FALLBACK_IDENTIFIER
    return identifier


def artifact_filename(filename: str) -> str:
    """Return the output file name for a markdown file, e.g. ``About.razor``."""
    return f"{identifier_from_filename(filename)}{ARTIFACT_SUFFIX}"


def _split_words(stem: str) -> List[str]:
    return [word for word in _WORD_SEPARATORS.split(stem) if word]


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


__all__ = [
    "ARTIFACT_SUFFIX",
    "apply_base_route",
    "artifact_filename",
    "file_stem",
    "identifier_from_filename",
    "slugify",
    "title_from_filename",
]
