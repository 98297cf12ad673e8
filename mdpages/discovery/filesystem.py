"""Discovery backed by direct filesystem access."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Optional

from ..config import MdPagesOptions
from ..generator import find_documents
from ..logging import get_logger
from .base import FileDiscoveryService


class FilesystemDiscoveryService(FileDiscoveryService):
    """Scans the source directory on every call; nothing is cached."""

    def __init__(
        self,
        options: MdPagesOptions | None = None,
        *,
        content_root: Path | None = None,
    ) -> None:
        super().__init__(options)
        self.content_root = (content_root or Path.cwd()).expanduser().resolve()
        self.logger = get_logger("discovery.filesystem")

    def discover(self) -> List[str]:
        source = self.source_path()
        if not source.is_dir():
            self.logger.debug("Source directory %s not found; nothing to discover", source)
            return []
        try:
            documents = find_documents(
                source,
                self.options.file_pattern,
                recursive=self.options.search_recursively,
            )
        except OSError as exc:
            self.logger.warning("Unable to scan %s: %s", source, exc)
            return []
        return [str(path) for path in documents]

    async def discover_async(self) -> List[str]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.discover)

    def source_path(self) -> Path:
        """Return the absolute source directory."""
        return self.options.absolute_source_path(self.content_root)

    def source_directory(self) -> str:
        return str(self.source_path())

    def output_directory(self) -> Optional[str]:
        output = self.options.absolute_output_path(self.content_root)
        return str(output) if output is not None else None


__all__ = ["FilesystemDiscoveryService"]
