"""Markdown document discovery services."""

from .base import FileDiscoveryService, build_route_map
from .filesystem import FilesystemDiscoveryService
from .pages import PageCatalog
from .probe import DEFAULT_KNOWN_FILES, HttpProbe, Probe, ProbeDiscoveryService

__all__ = [
    "DEFAULT_KNOWN_FILES",
    "FileDiscoveryService",
    "FilesystemDiscoveryService",
    "HttpProbe",
    "PageCatalog",
    "Probe",
    "ProbeDiscoveryService",
    "build_route_map",
]
