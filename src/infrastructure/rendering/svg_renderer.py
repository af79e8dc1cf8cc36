from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from src.domain.entities.profile import ProfileData


class SvgTemplateRenderer:
    """Render ProfileData through a Jinja2 SVG template.

    The template is compiled once at construction. Values are XML-escaped;
    nothing else about the profile is checked.
    """

    def __init__(self, template_path: str | Path) -> None:
        path = Path(template_path)
        self.template_path = path
        self._env = Environment(
            loader=FileSystemLoader(str(path.parent)),
            autoescape=True,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
        self._template = self._env.get_template(path.name)

    def render(self, profile: ProfileData) -> str:
        return self._template.render(
            username=profile.username,
            name=profile.name,
            image=profile.image,
            mime_type=profile.mime_type,
        )
