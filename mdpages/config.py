"""Configuration options and loading for mdpages (.mdpages.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".mdpages.yml"


class ConfigError(RuntimeError):
    """Raised when configuration is invalid or cannot be parsed."""


@dataclass
class MdPagesOptions:
    """Settings shared by page generation and discovery."""

    source_directory: str = "MDFilesToConvert"
    output_directory: Optional[str] = None
    file_pattern: str = "*.md"
    search_recursively: bool = True
    enable_comment_directives: bool = True
    enable_frontmatter: bool = True
    base_route_path: Optional[str] = None
    known_files: List[str] = field(default_factory=list)
    probe_timeout: float = 5.0
    base_url: Optional[str] = None
    templates_dir: Optional[Path] = None

    def validate(self) -> None:
        """Raise :class:`ConfigError` for settings no run can succeed with."""
        if not self.source_directory or not str(self.source_directory).strip():
            raise ConfigError("source_directory cannot be null or empty")
        if not self.file_pattern or not self.file_pattern.strip():
            raise ConfigError("file_pattern cannot be null or empty")
        if not self.enable_comment_directives and not self.enable_frontmatter:
            raise ConfigError(
                "At least one configuration method (comment directives or frontmatter) must be enabled"
            )
        if self.probe_timeout is not None and self.probe_timeout <= 0:
            raise ConfigError("probe_timeout must be positive")
        if self.base_url and not self.base_url.startswith(("http://", "https://")):
            raise ConfigError("base_url must be an absolute http(s) URL")

    def absolute_source_path(self, content_root: Path) -> Path:
        """Return the source directory resolved against ``content_root``."""
        return _resolve_against(content_root, self.source_directory)

    def absolute_output_path(self, content_root: Path) -> Optional[Path]:
        """Return the output directory resolved against ``content_root``, if set."""
        if not self.output_directory or not self.output_directory.strip():
            return None
        return _resolve_against(content_root, self.output_directory)


def load_config(config_path: Path) -> MdPagesOptions:
    """Load options from ``.mdpages.yml``; defaults when the file is missing."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent

    if not config_file.exists():
        return MdPagesOptions()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    defaults = MdPagesOptions()
    templates_dir_str = _as_str(data.get("templates_dir"))
    probe_timeout = _as_float(data.get("probe_timeout"))

    return MdPagesOptions(
        source_directory=_as_str(data.get("source_directory")) or defaults.source_directory,
        output_directory=_as_str(data.get("output_directory")),
        file_pattern=_as_str(data.get("file_pattern")) or defaults.file_pattern,
        search_recursively=_bool_or(data.get("search_recursively"), defaults.search_recursively),
        enable_comment_directives=_bool_or(
            data.get("enable_comment_directives"), defaults.enable_comment_directives
        ),
        enable_frontmatter=_bool_or(data.get("enable_frontmatter"), defaults.enable_frontmatter),
        base_route_path=_as_str(data.get("base_route_path")),
        known_files=_as_str_list(data.get("known_files")),
        probe_timeout=probe_timeout if probe_timeout is not None else defaults.probe_timeout,
        base_url=_as_str(data.get("base_url")),
        templates_dir=root / templates_dir_str if templates_dir_str else None,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _resolve_against(root: Path, directory: str) -> Path:
    candidate = Path(directory).expanduser()
    if candidate.is_absolute():
        return candidate.resolve()
    return (root / candidate).resolve()


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (str, int, float)):
        text = str(value).strip()
        return text or None
    return None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _bool_or(value: Any, default: bool) -> bool:
    parsed = _as_bool(value)
    return default if parsed is None else parsed


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = ["CONFIG_FILENAME", "ConfigError", "MdPagesOptions", "load_config"]
