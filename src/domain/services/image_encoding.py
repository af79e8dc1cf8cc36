from __future__ import annotations

import base64
from io import BytesIO

from PIL import Image

DEFAULT_MIME_TYPE = "image/png"


def encode_image(data: bytes) -> str:
    """Standard base64 (RFC 4648, padded) of the raw bytes, as ASCII text."""
    return base64.b64encode(data).decode("ascii")


def detect_mime_type(data: bytes, default: str = DEFAULT_MIME_TYPE) -> str:
    # Pillow only parses the header here; the bytes are never re-encoded.
    # Oversized headers trip the decompression-bomb guard, which is not an OSError.
    try:
        with Image.open(BytesIO(data)) as img:
            return Image.MIME.get(img.format, default)
    except (OSError, Image.DecompressionBombError):
        return default
