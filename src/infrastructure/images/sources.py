from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from pathlib import Path

import httpx

from src.domain.entities.image import EncodedImage
from src.domain.services.image_encoding import detect_mime_type, encode_image


class ImageSourceError(RuntimeError):
    """Raised when image bytes cannot be fetched or read."""


class ImageSource(ABC):
    """Something that yields raw image bytes."""

    @abstractmethod
    async def read(self) -> bytes:
        ...


class RemoteImageSource(ImageSource):
    _MAX_IMAGE_BYTES = 5 * 1024 * 1024  # 5 MB

    def __init__(self, url: str, client: httpx.AsyncClient, *, max_bytes: int = _MAX_IMAGE_BYTES) -> None:
        self.url = url
        self.max_bytes = max_bytes
        self._client = client

    async def read(self) -> bytes:
        try:
            async with self._client.stream("GET", self.url, follow_redirects=True) as resp:
                resp.raise_for_status()
                declared = resp.headers.get("Content-Length", "")
                if declared.isdigit() and int(declared) > self.max_bytes:
                    raise ImageSourceError(f"Image at {self.url} exceeds {self.max_bytes} bytes")
                body = bytearray()
                async for chunk in resp.aiter_bytes():
                    body.extend(chunk)
                    if len(body) > self.max_bytes:
                        raise ImageSourceError(f"Image at {self.url} exceeds {self.max_bytes} bytes")
        except httpx.HTTPError as exc:
            raise ImageSourceError(f"Image fetch failed for {self.url}: {exc}") from exc
        return bytes(body)

    def __repr__(self) -> str:
        return f"RemoteImageSource({self.url!r})"


class LocalImageSource(ImageSource):
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    async def read(self) -> bytes:
        try:
            return await asyncio.to_thread(self.path.read_bytes)
        except OSError as exc:
            raise ImageSourceError(f"Image read failed for {self.path}: {exc}") from exc

    def __repr__(self) -> str:
        return f"LocalImageSource({str(self.path)!r})"


async def encode_source(source: ImageSource) -> str:
    return encode_image(await source.read())


async def load_image(source: ImageSource) -> EncodedImage:
    """Read ``source`` once and return its base64 payload with the sniffed MIME type."""
    data = await source.read()
    return EncodedImage(data=encode_image(data), mime_type=detect_mime_type(data))


async def encode_remote(url: str, client: httpx.AsyncClient) -> str:
    return await encode_source(RemoteImageSource(url, client))


async def encode_local(path: str | Path) -> str:
    return await encode_source(LocalImageSource(path))
