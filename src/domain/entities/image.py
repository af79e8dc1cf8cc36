from __future__ import annotations

from dataclasses import dataclass

# 1x1 transparent GIF
BLANK_GIF_BASE64 = "R0lGODlhAQABAIAAAAAAAP///yH5BAEAAAAALAAAAAABAAEAAAIBRAA7"
BLANK_GIF_MIME_TYPE = "image/gif"


@dataclass(frozen=True)
class EncodedImage:
    data: str  # base64
    mime_type: str

    @classmethod
    def blank(cls) -> EncodedImage:
        return cls(data=BLANK_GIF_BASE64, mime_type=BLANK_GIF_MIME_TYPE)
