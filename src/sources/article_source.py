from __future__ import annotations

from typing import Optional

from clients.article_client import ArticleClient
from core.errors import ExternalServiceError, ValidationError
from core.html import extract_title, html_to_markdown
from core.models import ArticleDocument


"""Article-backed ArticleProvider implementation.

Fetches one HTML page (default URL from config, or a per-call override)
and converts it to pseudo-markdown text.
"""


class ArticleSource:
    def __init__(self, *, client: ArticleClient, default_url: str) -> None:
        self._client = client
        self._default_url = (default_url or "").strip()

        if not self._default_url:
            raise ValidationError("Missing default article URL")

    async def get_article(self, *, url: Optional[str] = None) -> ArticleDocument:
        target = (url or "").strip() or self._default_url
        try:
            html = await self._client.fetch_html(target)
        except ExternalServiceError as e:
            raise ExternalServiceError(f"Failed to fetch article: {e}") from e

        return ArticleDocument(url=target, title=extract_title(html), text=html_to_markdown(html))
