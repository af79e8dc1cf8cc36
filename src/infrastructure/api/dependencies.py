from __future__ import annotations

from functools import partial
from typing import Annotated

import httpx
from fastapi import Depends, Request

from src.application.use_cases.render_profile import RenderProfileUseCase
from src.domain.entities.catalog import ProfileCatalog
from src.infrastructure.config import Settings
from src.infrastructure.github.identity_resolver import GitHubIdentityResolver
from src.infrastructure.images.sources import RemoteImageSource
from src.infrastructure.rendering.svg_renderer import SvgTemplateRenderer


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def get_catalog(request: Request) -> ProfileCatalog:
    return request.app.state.catalog


def get_renderer(request: Request) -> SvgTemplateRenderer:
    return request.app.state.renderer


def get_identity_resolver(request: Request) -> GitHubIdentityResolver:
    return request.app.state.identity


def get_render_profile_use_case(
    settings: Annotated[Settings, Depends(get_settings)],
    client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
    catalog: Annotated[ProfileCatalog, Depends(get_catalog)],
    renderer: Annotated[SvgTemplateRenderer, Depends(get_renderer)],
    identity: Annotated[GitHubIdentityResolver, Depends(get_identity_resolver)],
) -> RenderProfileUseCase:
    return RenderProfileUseCase(
        identity=identity,
        catalog=catalog,
        renderer=renderer,
        avatar_source=partial(RemoteImageSource, client=client),
        avatar_url=settings.github_avatar_url,
    )
