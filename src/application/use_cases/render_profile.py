from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable
from urllib.parse import quote

from src.domain.entities.catalog import ProfileCatalog
from src.domain.entities.image import EncodedImage
from src.domain.entities.profile import ProfileData
from src.infrastructure.github.identity_resolver import GitHubIdentityResolver
from src.infrastructure.images.sources import ImageSource, ImageSourceError, load_image
from src.infrastructure.rendering.svg_renderer import SvgTemplateRenderer

logger = logging.getLogger(__name__)


@dataclass
class RenderProfileUseCase:
    """
    Turn a handle into a profile card SVG.

    Fallbacks:
    - reserved handles return their catalog entry as is
    - an unresolvable handle returns the catalog's 404 card
    - an avatar that cannot be fetched is replaced by the blank GIF
    """

    identity: GitHubIdentityResolver
    catalog: ProfileCatalog
    renderer: SvgTemplateRenderer
    avatar_source: Callable[[str], ImageSource]
    avatar_url: str = "https://github.com/{handle}.png"

    async def execute(self, handle: str) -> str:
        cached = self.catalog.get(handle)
        if cached is not None:
            return cached

        identity = await self.identity.resolve(handle)
        if identity.err:
            return self.catalog.not_found

        url = identity.avatar_url or self.avatar_url.format(handle=quote(handle, safe=""))
        try:
            image = await load_image(self.avatar_source(url))
        except ImageSourceError as exc:
            logger.warning("Avatar unavailable for %r, using blank image: %s", handle, exc)
            image = EncodedImage.blank()

        profile = ProfileData(
            username=handle,
            name=identity.name,
            image=image.data,
            mime_type=image.mime_type,
        )
        return self.renderer.render(profile)
