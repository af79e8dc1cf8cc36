from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    github_token: str | None
    github_token_file: Path
    github_api_url: str
    github_avatar_url: str  # format pattern with a {handle} placeholder
    assets_dir: Path
    log_level: str

    @property
    def template_path(self) -> Path:
        return self.assets_dir / "template.svg.j2"

    @property
    def profile_image_path(self) -> Path:
        return self.assets_dir / "profile.png"

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            github_token=os.getenv("GITHUB_TOKEN") or None,
            github_token_file=Path(os.getenv("GITHUB_TOKEN_FILE", ".github_token")),
            github_api_url=os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/"),
            github_avatar_url=os.getenv("GITHUB_AVATAR_URL", "https://github.com/{handle}.png"),
            assets_dir=Path(os.getenv("PROFILATOR_ASSETS_DIR", "assets")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
