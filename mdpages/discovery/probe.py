"""Discovery for runtimes without filesystem access.

Candidate file names are checked with an existence probe (an HTTP GET
against ``<base_url>/<source_directory>/<name>`` by default). All probes run
concurrently and the verified set is cached until a new candidate is added
or :meth:`ProbeDiscoveryService.invalidate` is called.
"""

from __future__ import annotations

import asyncio
import threading
from typing import Callable, Dict, Iterable, List, Optional, Set
from urllib.error import HTTPError
from urllib.parse import quote, urljoin, urlsplit
from urllib.request import Request, urlopen

from ..config import ConfigError, MdPagesOptions
from ..logging import get_logger
from .base import FileDiscoveryService

Probe = Callable[[str], bool]

DEFAULT_KNOWN_FILES = (
    "documentation.md",
    "features.md",
    "getting-started.md",
    "wasm-performance.md",
    "index.md",
    "readme.md",
    "README.md",
)

_MARKDOWN_SUFFIX = ".md"


class HttpProbe:
    """Reports whether a URL answers with a 2xx status."""

    def __init__(self, timeout: float = 5.0) -> None:
        self.timeout = timeout

    def __call__(self, url: str) -> bool:
        request = Request(url, method="GET")
        # Only the status line and headers are read; the body is discarded.
        try:
            with urlopen(request, timeout=self.timeout) as response:  # type: ignore[arg-type]
                status = getattr(response, "status", None) or response.getcode()
        except HTTPError as exc:
            status = exc.code
            exc.close()
        return 200 <= int(status) < 300


class ProbeDiscoveryService(FileDiscoveryService):
    """Verifies a registry of candidate markdown files through a probe."""

    def __init__(
        self,
        options: MdPagesOptions | None = None,
        *,
        probe: Probe | None = None,
        known_files: Iterable[str] | None = None,
    ) -> None:
        super().__init__(options)
        self.logger = get_logger("discovery.probe")
        if probe is None:
            self._require_absolute_urls()
        self._probe: Probe = probe or HttpProbe(self.options.probe_timeout)
        self._known: Dict[str, None] = {}
        self._verified: Set[str] = set()
        self._verified_ready = False
        self._lock = threading.Lock()

        initial = DEFAULT_KNOWN_FILES if known_files is None else tuple(known_files)
        for name in (*initial, *self.options.known_files):
            self._register(name)

    @property
    def known_files(self) -> List[str]:
        """Candidate names in registration order."""
        return list(self._known)

    @property
    def is_verified(self) -> bool:
        return self._verified_ready

    def add_known_file(self, file_name: str) -> bool:
        """Register a candidate; returns True when it was new.

        Non-markdown and blank names are ignored. A new name drops the
        verified cache so the next async discovery probes again.
        """
        if not self._register(file_name):
            return False
        self.invalidate()
        return True

    def add_known_files(self, file_names: Iterable[str]) -> None:
        for file_name in file_names:
            self.add_known_file(file_name)

    def invalidate(self) -> None:
        """Forget verified results."""
        with self._lock:
            self._verified_ready = False
            self._verified.clear()

    def discover(self) -> List[str]:
        """Return verified names once probed, otherwise the unverified candidates."""
        if self._verified_ready:
            return self._ordered(self._verified)
        return self.known_files

    async def discover_async(self) -> List[str]:
        if self._verified_ready:
            return self._ordered(self._verified)

        self.invalidate()
        candidates = self.known_files
        await asyncio.gather(*(self._verify(name) for name in candidates))
        with self._lock:
            self._verified_ready = True
            verified = set(self._verified)
        self.logger.debug("Verified %d of %d candidate files", len(verified), len(candidates))
        return self._ordered(verified)

    def source_directory(self) -> str:
        return self.options.source_directory

    def output_directory(self) -> Optional[str]:
        return self.options.output_directory

    def candidate_url(self, file_name: str) -> str:
        """Return the probe URL for ``file_name``.

        A relative ``source_directory`` is resolved against ``base_url``.
        """
        path = f"{self.options.source_directory.rstrip('/')}/{quote(file_name)}"
        base_url = self.options.base_url
        if not base_url:
            return path
        return urljoin(base_url.rstrip("/") + "/", path)

    def _require_absolute_urls(self) -> None:
        url = self.candidate_url("index.md")
        if urlsplit(url).scheme not in {"http", "https"}:
            raise ConfigError(
                f"Cannot fetch '{url}' over HTTP; set base_url or use an absolute source_directory"
            )

    async def _verify(self, file_name: str) -> None:
        loop = asyncio.get_running_loop()
        url = self.candidate_url(file_name)
        try:
            found = await loop.run_in_executor(None, self._probe, url)
        except Exception as exc:
            self.logger.debug("Could not verify file '%s': %s", file_name, exc)
            return
        if found:
            with self._lock:
                self._verified.add(file_name)

    def _register(self, file_name: str) -> bool:
        if not file_name or not file_name.strip():
            return False
        name = file_name.strip()
        if not name.lower().endswith(_MARKDOWN_SUFFIX):
            return False
        if name in self._known:
            return False
        self._known[name] = None
        return True

    def _ordered(self, names: Set[str]) -> List[str]:
        return [name for name in self._known if name in names]


__all__ = ["DEFAULT_KNOWN_FILES", "HttpProbe", "Probe", "ProbeDiscoveryService"]
