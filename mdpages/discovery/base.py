"""Shared contract for markdown file discovery services."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from ..config import MdPagesOptions
from ..naming import file_stem, slugify


def build_route_map(files: Iterable[str], base_route: str | None = None) -> Dict[str, str]:
    """Map each file name (with extension) to its filename-derived route.

    Explicit ``@page`` or frontmatter routes are not consulted here.
    """
    routes: Dict[str, str] = {}
    for file in files:
        name = file.replace("\\", "/").rsplit("/", 1)[-1]
        if not file_stem(name):
            continue
        routes[name] = slugify(name, base_route)
    return routes


class FileDiscoveryService(ABC):
    """Contract for services that list markdown documents and their routes."""

    def __init__(self, options: MdPagesOptions | None = None) -> None:
        self.options = options or MdPagesOptions()
        self.options.validate()

    @abstractmethod
    def discover(self) -> List[str]:
        """Return identifiers for the markdown documents currently known."""

    @abstractmethod
    async def discover_async(self) -> List[str]:
        """Asynchronous variant of :meth:`discover`."""

    def discover_with_routes(self) -> Dict[str, str]:
        """Return ``file name -> route`` for :meth:`discover` results."""
        return build_route_map(self.discover(), self.options.base_route_path)

    async def discover_with_routes_async(self) -> Dict[str, str]:
        """Return ``file name -> route`` for :meth:`discover_async` results."""
        files = await self.discover_async()
        return build_route_map(files, self.options.base_route_path)

    @abstractmethod
    def source_directory(self) -> str:
        """Return the configured source location."""

    @abstractmethod
    def output_directory(self) -> Optional[str]:
        """Return the configured output location, if any."""


__all__ = ["FileDiscoveryService", "build_route_map"]
