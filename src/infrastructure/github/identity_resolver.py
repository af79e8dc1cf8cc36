"""GitHub REST API lookup of a user's display name."""
from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from src.application.dtos.github_dto import GitHubUser
from src.domain.entities.profile import IdentityLookupResult

logger = logging.getLogger(__name__)


class GitHubIdentityResolver:
    """Resolve a handle to a display name through ``GET /users/{handle}``.

    Every failure mode (transport error, non-2xx status, unparseable body)
    collapses into ``IdentityLookupResult.missing()``. Nothing is retried.
    """

    _BASE_API_URL = "https://api.github.com"

    def __init__(self, client: httpx.AsyncClient, *, token: str = "", api_url: str = _BASE_API_URL) -> None:
        self._client = client
        self._api_url = api_url.rstrip("/")
        self._headers = {"Accept": "application/vnd.github+json"}
        if token:
            self._headers["Authorization"] = f"token {token}"

    def user_url(self, handle: str) -> str:
        return f"{self._api_url}/users/{quote(handle, safe='')}"

    async def resolve(self, handle: str) -> IdentityLookupResult:
        if not handle:
            return IdentityLookupResult.missing()
        url = self.user_url(handle)
        logger.debug("GET %s", url)
        try:
            resp = await self._client.get(url, headers=self._headers, follow_redirects=True)
            resp.raise_for_status()
            user = GitHubUser.model_validate(resp.json())
        except (httpx.HTTPError, ValueError) as exc:
            # ValueError covers both invalid JSON and pydantic validation errors
            logger.debug("Identity lookup for %r failed: %s", handle, exc)
            return IdentityLookupResult.missing()
        return IdentityLookupResult.found(name=user.name or "", avatar_url=user.avatar_url)
