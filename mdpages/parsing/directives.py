"""HTML comment directive extraction for markdown documents.

A document opts in by starting with the marker comment::

    <!-- This is configuration data -->
    <!-- @page "/custom/path" -->
    <!-- title: Custom Title -->
    <!-- tags: guide, setup -->

Directive lines continue until the first line that is not a complete
one-line comment; that line starts the remaining content.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from ..logging import get_logger
from ..models import CommentDirectives

CONFIG_MARKER = "This is configuration data"

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"

_MARKER_RE = re.compile(
    rf"^{re.escape(COMMENT_OPEN)}\s*{re.escape(CONFIG_MARKER)}\s*{re.escape(COMMENT_CLOSE)}$",
    re.IGNORECASE,
)
_PAGE_DIRECTIVE_RE = re.compile(r'@page\s+"([^"]+)"')

_logger = get_logger("parsing.directives")


def parse_comment_directives(text: str) -> Tuple[Optional[CommentDirectives], str]:
    """Parse a leading comment-directive block from ``text``.

    Returns ``(directives, remainder)``; ``(None, text)`` when the first line
    is not the configuration marker.
    """
    lines = text.split("\n")
    if not _MARKER_RE.match(lines[0].strip()):
        return None, text

    _logger.debug("Found comment configuration marker, parsing directives")
    directives = CommentDirectives()
    content_start = len(lines)
    for index in range(1, len(lines)):
        body = _comment_body(lines[index].strip())
        if body is None:
            content_start = index
            break
        _apply_directive(directives, body)

    return directives, "\n".join(lines[content_start:])


def _comment_body(line: str) -> Optional[str]:
    """Return the text inside a one-line comment, or ``None`` if ``line`` is not one."""
    if not line or len(line) < len(COMMENT_OPEN) + len(COMMENT_CLOSE):
        return None
    if not (line.startswith(COMMENT_OPEN) and line.endswith(COMMENT_CLOSE)):
        return None
    return line[len(COMMENT_OPEN) : -len(COMMENT_CLOSE)].strip()


def _apply_directive(directives: CommentDirectives, body: str) -> None:
    if body.startswith("@page "):
        match = _PAGE_DIRECTIVE_RE.search(body)
        if match:
            directives.route_directive = match.group(1)
            _logger.debug("Found @page directive: %s", directives.route_directive)
    elif body.startswith("title:"):
        directives.title = _unquote(body[len("title:") :])
    elif body.startswith("layout:"):
        directives.layout = _unquote(body[len("layout:") :])
    elif body.startswith("showTitle:"):
        parsed = _parse_bool(body[len("showTitle:") :])
        if parsed is not None:
            directives.show_title = parsed
    elif body.startswith("description:"):
        directives.description = _unquote(body[len("description:") :])
    elif body.startswith("tags:"):
        directives.tags = _split_tags(body[len("tags:") :])
    # Unknown directives are ignored so newer documents still build.


def _unquote(value: str) -> str:
    return value.strip().strip('"')


def _parse_bool(value: str) -> Optional[bool]:
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def _split_tags(value: str) -> List[str]:
    tags = [_unquote(part) for part in value.split(",")]
    return [tag for tag in tags if tag]


__all__ = ["CONFIG_MARKER", "parse_comment_directives"]
