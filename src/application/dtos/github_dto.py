from __future__ import annotations

from pydantic import BaseModel, Field


class GitHubUser(BaseModel):
    """Subset of the GitHub `GET /users/{username}` payload.

    The full record carries dozens of fields (followers, repos_url, bio...).
    Only the ones below are read; the rest are ignored without validation.
    """

    login: str = Field(..., description="GitHub handle", examples=["torvalds"])
    name: str | None = Field(None, description="Display name, null when the user has not set one", examples=["Linus Torvalds"])
    avatar_url: str = Field("", description="URL of the user's avatar image", examples=["https://avatars.githubusercontent.com/u/1024025?v=4"])
