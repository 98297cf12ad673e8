"""Generate routable pages from markdown documents."""

from .config import ConfigError, MdPagesOptions, load_config
from .generator import GenerationReport, PageGenerator, generate
from .merge import merge
from .naming import identifier_from_filename, slugify, title_from_filename

__version__ = "1.0.0"

__all__ = [
    "ConfigError",
    "GenerationReport",
    "MdPagesOptions",
    "PageGenerator",
    "generate",
    "identifier_from_filename",
    "load_config",
    "merge",
    "slugify",
    "title_from_filename",
]
