"""Metadata discovery for the pages a generation run would produce."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Dict, List, Optional

from ..generator import read_document, resolve_document
from ..logging import get_logger
from ..models import PageInfo
from ..naming import artifact_filename
from .filesystem import FilesystemDiscoveryService


class PageCatalog:
    """Resolves every discovered document exactly as generation would.

    Unlike :meth:`FileDiscoveryService.discover_with_routes`, routes here
    honour ``@page`` directives and frontmatter.
    """

    def __init__(self, discovery: FilesystemDiscoveryService | None = None) -> None:
        self.discovery = discovery or FilesystemDiscoveryService()
        self.logger = get_logger("discovery.pages")

    def pages(self) -> List[PageInfo]:
        source_root = self.discovery.source_path()
        pages: List[PageInfo] = []
        for file in self.discovery.discover():
            page = self._load(Path(file), source_root)
            if page is not None:
                pages.append(page)
        return pages

    async def pages_async(self) -> List[PageInfo]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.pages)

    def page_info(self, markdown_path: str | Path) -> Optional[PageInfo]:
        """Return metadata for one document, or ``None`` if it is missing."""
        if not str(markdown_path).strip():
            return None
        source_root = self.discovery.source_path()
        path = Path(markdown_path)
        if not path.is_absolute():
            path = source_root / path
        if not path.is_file():
            return None
        return self._load(path, source_root)

    def pages_by_tag(self) -> Dict[str, List[PageInfo]]:
        grouped: Dict[str, List[PageInfo]] = {}
        for page in self.pages():
            for tag in page.tags:
                grouped.setdefault(tag, []).append(page)
        return grouped

    def _load(self, path: Path, source_root: Path) -> Optional[PageInfo]:
        try:
            document = read_document(path, source_root)
        except (OSError, UnicodeDecodeError) as exc:
            self.logger.debug("Skipping unreadable document %s: %s", path, exc)
            return None
        config = resolve_document(document, self.discovery.options)
        return PageInfo(
            route=config.route,
            artifact_name=artifact_filename(path.name),
            source_path=document.path,
            title=config.title,
            description=config.description,
            layout=config.layout,
            tags=list(config.tags),
            show_title=config.show_title,
        )


__all__ = ["PageCatalog"]
