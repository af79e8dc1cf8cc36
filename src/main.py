from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from src.application.dtos.common_dto import HealthResponse, RootResponse
from src.application.use_cases.build_catalog import BuildProfileCatalogUseCase
from src.infrastructure.config import Settings
from src.infrastructure.github.credentials import resolve_github_token
from src.infrastructure.github.identity_resolver import GitHubIdentityResolver
from src.infrastructure.images.sources import LocalImageSource
from src.infrastructure.rendering.svg_renderer import SvgTemplateRenderer

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Everything on app.state is written here, before the first request,
        # and only read afterwards.
        token = await asyncio.to_thread(
            resolve_github_token, settings.github_token, settings.github_token_file
        )
        renderer = SvgTemplateRenderer(settings.template_path)
        catalog = await BuildProfileCatalogUseCase(
            renderer=renderer,
            profile_image=LocalImageSource(settings.profile_image_path),
        ).execute()
        async with httpx.AsyncClient(transport=transport) as client:
            app.state.settings = settings
            app.state.http_client = client
            app.state.renderer = renderer
            app.state.catalog = catalog
            app.state.identity = GitHubIdentityResolver(
                client, token=token, api_url=settings.github_api_url
            )
            logger.info("Profilator ready (GitHub API: %s)", settings.github_api_url)
            yield

    app = FastAPI(
        title="Profilator",
        version="0.1.0",
        description="""
        ## Profilator

        Renders embeddable SVG profile cards for GitHub users.

        The profile pipeline (identity lookup, avatar encoding, template
        rendering and the pre-rendered reserved cards) is wired at startup and
        exposed to request handlers through `src.infrastructure.api.dependencies`.
        """,
        lifespan=lifespan,
    )

    @app.get(
        "/",
        response_model=RootResponse,
        summary="API Root",
        description="Get basic information about the Profilator service",
    )
    def root():
        """Get API root information."""
        return {"status": "ok", "service": "profilator", "version": app.version}

    @app.get(
        "/health",
        response_model=HealthResponse,
        summary="Health Check",
        description="Check that the service started and its profile catalog is loaded",
    )
    def health():
        """Check API health status."""
        return {"status": "healthy", "catalog": list(app.state.catalog.entries)}

    return app


app = create_app()
