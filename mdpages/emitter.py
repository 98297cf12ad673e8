"""Renders page artifacts from resolved configuration."""

from __future__ import annotations

from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader

from .models import ResolvedConfig

DEFAULT_TEMPLATE = "page.razor.j2"
DEFAULT_COMPONENT_NAMESPACE = "MarkdownToRazor.Components"


class PageEmitter:
    """Turns a :class:`ResolvedConfig` into page artifact text.

    Templates are looked up in ``templates_dir`` first, then in the bundled
    ``templates/`` directory, so projects can override ``page.razor.j2``.
    """

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        template_name: str = DEFAULT_TEMPLATE,
        component_namespace: str = DEFAULT_COMPONENT_NAMESPACE,
    ) -> None:
        self.templates_dir = templates_dir
        self.template_name = template_name
        self.component_namespace = component_namespace
        self._env = self._create_env(templates_dir)

    def render(self, config: ResolvedConfig, asset_path: str) -> str:
        """Return the artifact text for ``config`` pointing at ``asset_path``."""
        template = self._env.get_template(self.template_name)
        return template.render(
            page=config,
            asset_path=asset_path.replace("\\", "/"),
            component_namespace=self.component_namespace,
        )

    def write(self, config: ResolvedConfig, asset_path: str, target: Path) -> Path:
        """Render and write the artifact to ``target``; returns the written path."""
        content = self.render(config, asset_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the rendered "\n" endings on every platform.
        with target.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        return target

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories: List[str] = []
        if templates_dir:
            directories.append(str(templates_dir))
        default_dir = str(Path(__file__).with_name("templates"))
        if default_dir not in directories:
            directories.append(default_dir)
        loader = FileSystemLoader(directories)
        return Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )


__all__ = ["DEFAULT_COMPONENT_NAMESPACE", "DEFAULT_TEMPLATE", "PageEmitter"]
