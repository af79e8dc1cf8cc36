from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProfileData:
    username: str
    name: str
    image: str  # base64 payload, no data: prefix
    mime_type: str = "image/png"


@dataclass(frozen=True)
class IdentityLookupResult:
    """Outcome of resolving a handle against the identity provider.

    ``err`` is the only signal callers should branch on. A missing user and an
    unreachable provider produce the same result.
    """

    name: str
    err: bool
    avatar_url: str = ""

    @classmethod
    def found(cls, name: str, avatar_url: str = "") -> IdentityLookupResult:
        return cls(name=name, err=False, avatar_url=avatar_url)

    @classmethod
    def missing(cls) -> IdentityLookupResult:
        return cls(name="", err=True)
