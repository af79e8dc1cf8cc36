from __future__ import annotations

import logging
from dataclasses import dataclass

from src.domain.entities.catalog import ProfileCatalog
from src.domain.entities.image import EncodedImage
from src.domain.entities.profile import ProfileData
from src.infrastructure.images.sources import ImageSource, load_image
from src.infrastructure.rendering.svg_renderer import SvgTemplateRenderer

logger = logging.getLogger(__name__)

_BLANK = EncodedImage.blank()

BLANK_PROFILE = ProfileData(username="", name="", image=_BLANK.data, mime_type=_BLANK.mime_type)
NOT_FOUND_PROFILE = ProfileData(
    username="Not Found",
    name="GitHub user not found.",
    image=_BLANK.data,
    mime_type=_BLANK.mime_type,
)


@dataclass
class BuildProfileCatalogUseCase:
    """
    Render the reserved cards once, at startup.

    The bundled avatar is read here; a missing asset fails startup rather
    than being replaced by a placeholder.
    """

    renderer: SvgTemplateRenderer
    profile_image: ImageSource

    async def execute(self) -> ProfileCatalog:
        image = await load_image(self.profile_image)
        profilator = ProfileData(
            username="Profilator",
            name="Snap GitHub profiles",
            image=image.data,
            mime_type=image.mime_type,
        )
        catalog = ProfileCatalog(
            profilator=self.renderer.render(profilator),
            blank=self.renderer.render(BLANK_PROFILE),
            not_found=self.renderer.render(NOT_FOUND_PROFILE),
        )
        logger.info("Profile catalog ready: %s", ", ".join(catalog.entries))
        return catalog
