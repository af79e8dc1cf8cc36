from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_token_file(path: Path) -> str | None:
    """Return the token stored in ``path``, or None if it cannot be read."""
    try:
        token = path.read_bytes().decode("utf-8").strip()
    except (OSError, UnicodeDecodeError):
        return None
    return token or None


def resolve_github_token(env_value: str | None, token_file: Path) -> str:
    """Pick the GitHub token: environment first, then the local file, else ''.

    Called once at startup; the result is reused for every API call.
    """
    if env_value:
        return env_value
    token = read_token_file(token_file)
    if token is not None:
        logger.info("Using GitHub token from %s", token_file)
        return token
    logger.info("No GitHub token configured, using anonymous API access")
    return ""
