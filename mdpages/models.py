"""Core data models shared across mdpages components."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class ContentDocument:
    """A markdown document read from the content root."""

    path: str
    raw_text: str


@dataclass
class PageSettings:
    """Page fields shared by both configuration dialects.

    ``None`` means the field was not set by the document.
    """

    title: Optional[str] = None
    layout: Optional[str] = None
    show_title: Optional[bool] = None
    description: Optional[str] = None
    tags: Optional[List[str]] = None


@dataclass
class Frontmatter(PageSettings):
    """Settings parsed from a ``---`` delimited YAML block."""

    route: Optional[str] = None


@dataclass
class CommentDirectives(PageSettings):
    """Settings parsed from a leading run of HTML comment directives."""

    route_directive: Optional[str] = None


@dataclass
class ResolvedConfig:
    """Merged configuration that drives artifact emission."""

    route: str
    title: str
    layout: Optional[str] = None
    show_title: bool = True
    description: Optional[str] = None
    tags: List[str] = field(default_factory=list)


@dataclass
class PageInfo:
    """Metadata describing the artifact generated for one document."""

    route: str
    artifact_name: str
    source_path: str
    title: str
    description: Optional[str] = None
    layout: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    show_title: bool = True
