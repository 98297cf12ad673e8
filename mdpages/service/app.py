"""FastAPI application entrypoint for mdpages service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import ConfigError, MdPagesOptions
from ..discovery import FileDiscoveryService, FilesystemDiscoveryService, PageCatalog
from ..generator import GenerationReport, PageGenerator


class HealthResponse(BaseModel):
    status: str


class PageResponse(BaseModel):
    route: str
    artifact_name: str
    source_path: str
    title: str
    description: Optional[str] = None
    layout: Optional[str] = None
    tags: List[str] = []
    show_title: bool = True


class GenerateRequest(BaseModel):
    source_directory: str
    output_directory: str
    base_route_path: Optional[str] = None


class GenerateResponse(BaseModel):
    generated: List[str]
    failed: List[str]


def _default_discovery() -> FileDiscoveryService:
    return FilesystemDiscoveryService()


def create_app(
    discovery_factory: Callable[[], FileDiscoveryService] = _default_discovery,
    catalog_factory: Callable[[], PageCatalog] | None = None,
    generator_factory: Callable[[MdPagesOptions], PageGenerator] = PageGenerator,
) -> FastAPI:
    """Create the FastAPI application exposing discovery and generation."""

    app = FastAPI(title="mdpages Service", version="1.0.0")

    async def get_discovery() -> FileDiscoveryService:
        return discovery_factory()

    async def get_catalog() -> PageCatalog:
        if catalog_factory is not None:
            return catalog_factory()
        discovery = discovery_factory()
        if not isinstance(discovery, FilesystemDiscoveryService):
            raise ConfigError("Page metadata requires filesystem discovery")
        return PageCatalog(discovery)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/routes", response_model=Dict[str, str])
    async def routes(
        discovery: FileDiscoveryService = Depends(get_discovery),
    ) -> Dict[str, str]:
        return await discovery.discover_with_routes_async()

    @app.get("/pages", response_model=List[PageResponse])
    async def pages(catalog: PageCatalog = Depends(get_catalog)) -> List[PageResponse]:
        found = await catalog.pages_async()
        return [PageResponse(**vars(page)) for page in found]

    @app.get("/pages/tags", response_model=Dict[str, List[str]])
    async def pages_by_tag(catalog: PageCatalog = Depends(get_catalog)) -> Dict[str, List[str]]:
        loop = asyncio.get_running_loop()
        grouped = await loop.run_in_executor(None, catalog.pages_by_tag)
        return {tag: [page.route for page in items] for tag, items in grouped.items()}

    @app.post("/generate", response_model=GenerateResponse)
    async def generate(payload: GenerateRequest) -> GenerateResponse:
        options = MdPagesOptions(
            source_directory=payload.source_directory,
            output_directory=payload.output_directory,
            base_route_path=payload.base_route_path,
        )
        options.validate()
        generator = generator_factory(options)

        def _run_generate() -> GenerationReport:
            return generator.generate(payload.source_directory, payload.output_directory)

        loop = asyncio.get_running_loop()
        report = await loop.run_in_executor(None, _run_generate)
        return GenerateResponse(
            generated=[str(page.artifact_path) for page in report.generated],
            failed=[failure.source_path for failure in report.failed],
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(
        _: Any, exc: ConfigError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1",
    port: int = 8000,
    *,
    options: MdPagesOptions | None = None,
) -> None:  # pragma: no cover - integration path
    import uvicorn

    def _discovery() -> FileDiscoveryService:
        return FilesystemDiscoveryService(options)

    app = create_app(_discovery)
    uvicorn.run(app, host=host, port=port)
