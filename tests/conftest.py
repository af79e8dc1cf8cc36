import io
import os
import struct
import sys
import zlib
from pathlib import Path

import httpx
import numpy as np
import pytest
from PIL import Image

# Ensure project root is on sys.path so 'src' is importable during tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("PROFILATOR_ASSETS_DIR", str(ROOT / "assets"))

ASSETS_DIR = ROOT / "assets"
TORVALDS_AVATAR_URL = "https://avatars.githubusercontent.com/u/1024025?v=4"


def make_png_bytes(w=4, h=4, color=(128, 64, 32)) -> bytes:
    arr = np.zeros((h, w, 3), dtype=np.uint8)
    arr[:, :] = color
    img = Image.fromarray(arr)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def make_oversized_png(w=60000, h=60000) -> bytes:
    """PNG whose IHDR declares huge dimensions, with no real pixel data."""

    def chunk(kind: bytes, data: bytes) -> bytes:
        return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data))

    ihdr = struct.pack(">IIBBBBB", w, h, 8, 2, 0, 0, 0)
    return b"\x89PNG\r\n\x1a\n" + chunk(b"IHDR", ihdr) + chunk(b"IDAT", zlib.compress(b"")) + chunk(b"IEND", b"")


AVATAR_PNG = make_png_bytes(color=(12, 34, 56))


def fake_github(request: httpx.Request) -> httpx.Response:
    """Stand-in for api.github.com and the avatar CDN."""
    if request.url.host == "api.github.com":
        if request.url.path == "/users/torvalds":
            return httpx.Response(
                200,
                json={
                    "login": "torvalds",
                    "id": 1024025,
                    "avatar_url": TORVALDS_AVATAR_URL,
                    "type": "User",
                    "site_admin": False,
                    "name": "Linus Torvalds",
                    "company": "Linux Foundation",
                    "public_repos": 8,
                    "followers": 200000,
                },
            )
        return httpx.Response(404, json={"message": "Not Found"})
    if str(request.url) == TORVALDS_AVATAR_URL:
        return httpx.Response(200, content=AVATAR_PNG, headers={"Content-Type": "image/png"})
    return httpx.Response(404)


@pytest.fixture()
def png_bytes() -> bytes:
    return make_png_bytes()


@pytest.fixture()
def oversized_png() -> bytes:
    return make_oversized_png()


@pytest.fixture()
def avatar_png() -> bytes:
    return AVATAR_PNG


@pytest.fixture()
def assets_dir() -> Path:
    return ASSETS_DIR


@pytest.fixture()
def github_handler():
    return fake_github


@pytest.fixture()
def fake_transport() -> httpx.MockTransport:
    return httpx.MockTransport(fake_github)


@pytest.fixture()
def settings(tmp_path):
    from src.infrastructure.config import Settings

    return Settings(
        github_token="test-token",
        github_token_file=tmp_path / ".github_token",
        github_api_url="https://api.github.com",
        github_avatar_url="https://github.com/{handle}.png",
        assets_dir=ASSETS_DIR,
        log_level="DEBUG",
    )


@pytest.fixture()
def renderer():
    from src.infrastructure.rendering.svg_renderer import SvgTemplateRenderer

    return SvgTemplateRenderer(ASSETS_DIR / "template.svg.j2")


@pytest.fixture()
def app(settings, fake_transport):
    from src.main import create_app

    return create_app(settings, transport=fake_transport)


@pytest.fixture()
def client(app):
    from fastapi.testclient import TestClient

    # entering the context runs the lifespan, which builds the catalog
    with TestClient(app) as test_client:
        yield test_client
