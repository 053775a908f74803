"""Retrieve ERRORS.md from the upstream repo over HTTP or from a local checkout."""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from errsync.config import DEFAULT_SOURCE_URL, DEFAULT_TIMEOUT
from errsync.errors import SourceError

logger = logging.getLogger(__name__)

ERRORS_MD = "ERRORS.md"


def read_local(local_path: Path) -> str:
    """Read ERRORS.md from a checkout directory, or from the file itself."""
    file_path = local_path / ERRORS_MD if local_path.is_dir() else local_path
    logger.info("Reading from local file: %s", file_path)
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"Cannot read {file_path}: {e}") from e


def fetch_remote(
    url: str = DEFAULT_SOURCE_URL,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    client: httpx.Client | None = None,
) -> str:
    """GET the document. Any transport error or non-2xx status raises SourceError."""
    logger.info("Fetching from: %s", url)
    try:
        if client is not None:
            response = client.get(url, timeout=timeout)
        else:
            with httpx.Client(timeout=timeout, follow_redirects=True) as own_client:
                response = own_client.get(url)
    except httpx.HTTPError as e:
        raise SourceError(f"Failed to fetch {ERRORS_MD}: {e}") from e

    if not response.is_success:
        raise SourceError(
            f"Failed to fetch {ERRORS_MD}: {response.status_code} {response.reason_phrase}"
        )
    return response.text


def fetch_errors_md(
    local_path: Path | None = None,
    *,
    url: str = DEFAULT_SOURCE_URL,
    timeout: float = DEFAULT_TIMEOUT,
    client: httpx.Client | None = None,
) -> str:
    """Return the raw ERRORS.md text. A local path takes precedence over the URL."""
    if local_path is not None:
        return read_local(Path(local_path))
    return fetch_remote(url, timeout=timeout, client=client)
