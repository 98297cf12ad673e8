"""YAML frontmatter extraction for markdown documents."""

from __future__ import annotations

import re
from typing import Any, List, Mapping, Optional, Tuple

import yaml

from ..logging import get_logger
from ..models import Frontmatter

_FRONTMATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*\r?$\n?(.*)\Z",
    re.DOTALL | re.MULTILINE,
)

_NULL_SCALARS = frozenset({"~", "null", "Null", "NULL"})

_logger = get_logger("parsing.frontmatter")


class FrontmatterError(ValueError):
    """Raised internally when a frontmatter block is not a usable mapping."""


def parse_frontmatter(text: str) -> Tuple[Optional[Frontmatter], str]:
    """Split a leading ``---`` block from ``text``.

    Returns ``(frontmatter, remainder)``. When no block is present, or the
    block is malformed, returns ``(None, text)`` unchanged.
    """
    match = _FRONTMATTER_RE.match(text)
    if match is None:
        return None, text

    block, remainder = match.group(1), match.group(2)
    try:
        # BaseLoader keeps every scalar as written, so dates and yes/no stay text.
        loaded = yaml.load(block, Loader=yaml.BaseLoader)
        frontmatter = _build_frontmatter(loaded)
    except (yaml.YAMLError, FrontmatterError) as exc:
        _logger.warning("Error parsing frontmatter: %s", exc)
        return None, text
    return frontmatter, remainder


def _build_frontmatter(data: Any) -> Frontmatter:
    if data is None:
        return Frontmatter()
    if not isinstance(data, Mapping):
        raise FrontmatterError("frontmatter must be a mapping of keys to values")

    return Frontmatter(
        route=_as_str(data.get("route")),
        title=_as_str(data.get("title")),
        layout=_as_str(data.get("layout")),
        show_title=_as_bool(_first_present(data, "showTitle", "show_title")),
        description=_as_str(data.get("description")),
        tags=_as_tags(data.get("tags")),
    )


def _first_present(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (str, int, float)):
        text = str(value).strip()
        if text in _NULL_SCALARS:
            return None
        return text or None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "on", "1"}:
            return True
        if lowered in {"false", "no", "off", "0"}:
            return False
    return None


def _as_tags(value: Any) -> Optional[List[str]]:
    if value is None:
        return None
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        raise FrontmatterError("tags must be a list of strings")
    tags = [str(item).strip() for item in value if isinstance(item, (str, int, float))]
    return [tag for tag in tags if tag]


__all__ = ["parse_frontmatter"]
