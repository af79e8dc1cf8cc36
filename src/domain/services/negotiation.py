from __future__ import annotations

from fastapi import Request

HTML_MEDIA_TYPE = "text/html"

# User-Agent substrings of proxies that fetch images on behalf of a page
IMAGE_PROXY_SIGNATURES: tuple[str, ...] = ("GitHub-Camo",)


def _accepted_media_types(accept: str) -> list[str]:
    accepted: list[str] = []
    for part in accept.split(","):
        media_type, *params = (p.strip() for p in part.split(";"))
        if not media_type:
            continue
        refused = False
        for param in params:
            key, _, value = param.partition("=")
            if key.strip().lower() == "q":
                try:
                    refused = float(value) <= 0.0
                except ValueError:
                    refused = True
        if not refused:
            accepted.append(media_type.lower())
    return accepted


def accepts_html(request: Request) -> bool:
    """True when the Accept header lists text/html."""
    accept = request.headers.get("accept")
    if not accept:
        return False
    return HTML_MEDIA_TYPE in _accepted_media_types(accept)


def is_known_image_proxy_bot(request: Request) -> bool:
    """True when the User-Agent belongs to a known image proxy such as GitHub Camo."""
    user_agent = request.headers.get("user-agent")
    if not user_agent:
        return False
    return any(signature in user_agent for signature in IMAGE_PROXY_SIGNATURES)
