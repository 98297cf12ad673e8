"""Parsers for the two page configuration dialects."""

from .directives import CONFIG_MARKER, parse_comment_directives
from .frontmatter import parse_frontmatter

__all__ = ["CONFIG_MARKER", "parse_comment_directives", "parse_frontmatter"]
