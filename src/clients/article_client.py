from __future__ import annotations

import logging

import httpx

from core.errors import ExternalServiceError, ValidationError

logger = logging.getLogger(__name__)


class ArticleClient:
    USER_AGENT = "MCP-WithCustomCursor-Server"

    def __init__(self, *, timeout: float, verify: bool = True) -> None:
        self._timeout = timeout
        self._verify = verify

    async def fetch_html(self, url: str) -> str:
        target = (url or "").strip()
        if not target:
            raise ValidationError("Article URL is empty")

        logger.debug("GET %s", target)
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                verify=self._verify,
                follow_redirects=True,
            ) as c:
                r = await c.get(target, headers={"User-Agent": self.USER_AGENT})
                r.raise_for_status()
                return r.text
        except httpx.HTTPStatusError as e:
            raise ExternalServiceError(f"HTTP {e.response.status_code} from {target}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            # InvalidURL is not an HTTPError subclass
            raise ExternalServiceError(f"{type(e).__name__}: {e}") from e
