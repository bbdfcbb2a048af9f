"""GitHub client module: read repository contents and run code searches.

This module provides a small async client focused on the two REST endpoints
used by the server: the Contents API (files and directory listings) and the
code search API. Non-success statuses and transport faults are translated
into the project's error types; callers decide how to present them.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional

import httpx

from core.errors import (
    ExternalServiceError,
    MalformedResponseError,
    NotFoundError,
    UpstreamStatusError,
)
from core.models import RepositoryLocation

logger = logging.getLogger(__name__)


class GitHubClient:
    """Async GitHub client bound to a single repository.

    Purpose:
      - get_contents(path, ref=None) -> dict | list (Contents API payload)
      - search_code(query) -> dict (search payload with an ``items`` list)

    Key behavior:
      - One short-lived httpx.AsyncClient per call.
      - Adds ``Authorization: token ...`` when GITHUB_TOKEN is set.
      - No retries, no caching.
    """

    BASE_URL = "https://api.github.com"
    JSON_ACCEPT = "application/vnd.github.v3+json"
    USER_AGENT = "MCP-WithCustomCursor-Server"

    def __init__(
        self,
        *,
        location: RepositoryLocation,
        timeout: float = 20.0,
        verify: bool = True,
    ) -> None:
        self._location = location
        self._timeout = float(timeout)
        self._verify = bool(verify)

        self._headers = self._build_headers()

    @property
    def location(self) -> RepositoryLocation:
        return self._location

    async def get_contents(self, path: str, *, ref: Optional[str] = None) -> Any:
        """Fetch a Contents API entry; ``ref=None`` uses the upstream default branch."""
        url = f"{self._location.api_path}/contents/{path}"
        params = {"ref": ref} if ref else None

        async with self._create_client() as client:
            resp = await self._request(client, url, params=params)

        if resp.status_code == 404:
            raise NotFoundError(f"Not found: {path}")
        self._raise_for_status(resp, context="contents")
        return self._json(resp, context="contents")

    async def search_code(self, query: str) -> Mapping[str, Any]:
        async with self._create_client() as client:
            resp = await self._request(client, "/search/code", params={"q": query})

        self._raise_for_status(resp, context="search/code")
        data = self._json(resp, context="search/code")
        if not isinstance(data, dict):
            raise MalformedResponseError("GitHub search returned an unexpected payload")
        return data

    # --- HTTP helpers ---

    def _build_headers(self) -> dict[str, str]:
        headers = {
            "Accept": self.JSON_ACCEPT,
            "User-Agent": self.USER_AGENT,
        }
        # If GITHUB_TOKEN present, add Authorization for higher rate limits
        token = (os.environ.get("GITHUB_TOKEN") or "").strip()
        if token:
            headers["Authorization"] = f"token {token}"
        return headers

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.BASE_URL,
            headers=self._headers,
            timeout=self._timeout,
            verify=self._verify,
        )

    def _raise_for_status(self, resp: httpx.Response, *, context: str) -> None:
        if resp.is_success:
            return
        raise UpstreamStatusError(
            f"GitHub request failed ({context}): HTTP {resp.status_code}",
            status_code=resp.status_code,
        )

    def _json(self, resp: httpx.Response, *, context: str) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise MalformedResponseError(f"GitHub returned invalid JSON ({context})") from e

    async def _request(
        self,
        client: httpx.AsyncClient,
        url: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Response:
        logger.debug("GET %s params=%s", url, dict(params or {}))
        try:
            resp = await client.get(url, params=dict(params or {}))
        except httpx.HTTPError as e:
            raise ExternalServiceError(f"GitHub request failed (GET {url}): {e}") from e
        logger.debug("GET %s -> %s", url, resp.status_code)
        return resp
