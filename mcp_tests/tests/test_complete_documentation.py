from datetime import datetime, timezone

import pytest

from core.errors import ExternalServiceError, NotFoundError, ReadmeNotFoundError
from tools import get_complete_documentation

FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _sections(out: str):
    return out.split("\n\n---\n\n")


@pytest.mark.asyncio
async def test_all_sections_in_fixed_order(tool_context, fake_docs, fake_articles):
    out = await get_complete_documentation.handle(tool_context, {}, now=lambda: FIXED_NOW)

    assert out.startswith("# with-custom-cursor Complete Documentation\n\n")
    assert "Repository: https://github.com/AndreQuintero/with-custom-cursor" in out
    assert "Generated: 2024-05-01T12:00:00+00:00" in out
    assert out.index("## README") < out.index("## Medium Article") < out.index("## package.json")
    assert "```json\n{}\n```" in out
    assert fake_docs.calls == [("readme", "main"), ("file", "package.json", "main")]
    assert fake_articles.calls == [None]


@pytest.mark.asyncio
async def test_readme_failure_degrades_to_placeholder(tool_context, fake_docs):
    fake_docs.readme = ReadmeNotFoundError("README not found in AndreQuintero/with-custom-cursor.")

    out = await get_complete_documentation.handle(tool_context, {})

    assert not out.startswith("Error:")
    assert out.count("## ") == 3
    readme_at = out.index("## README")
    article_at = out.index("## Medium Article")
    readme_section = out[readme_at:article_at]
    assert "*README not available: README not found in AndreQuintero/with-custom-cursor.*" in readme_section
    assert "Article body" in out
    assert "Size: 120 bytes" in out


@pytest.mark.asyncio
async def test_every_section_can_fail_independently(tool_context, fake_docs, fake_articles):
    fake_docs.readme = ReadmeNotFoundError("no readme")
    fake_articles.article = ExternalServiceError("Failed to fetch article: HTTP 500")
    fake_docs.files["package.json"] = NotFoundError("File not found: package.json in branch main")

    out = await get_complete_documentation.handle(tool_context, {})

    assert "*README not available: no readme*" in out
    assert "*Medium Article not available: Failed to fetch article: HTTP 500*" in out
    assert "*package.json not available: File not found: package.json in branch main*" in out


@pytest.mark.asyncio
async def test_malformed_article_url_degrades_to_placeholder(fake_docs):
    from clients.article_client import ArticleClient
    from core.interfaces import ToolContext
    from sources.article_source import ArticleSource

    articles = ArticleSource(client=ArticleClient(timeout=5.0), default_url="http://[::1")
    ctx = ToolContext(docs=fake_docs, articles=articles)

    out = await get_complete_documentation.handle(ctx, {})

    assert out.count("## ") == 3
    assert "*Medium Article not available: Failed to fetch article: InvalidURL" in out
    assert "Size: 120 bytes" in out


@pytest.mark.asyncio
async def test_unexpected_section_error_degrades_to_placeholder(tool_context, fake_articles):
    fake_articles.article = RuntimeError("parser exploded")

    out = await get_complete_documentation.handle(tool_context, {})

    assert "*Medium Article not available: parser exploded*" in out
    assert out.index("## README") < out.index("## Medium Article") < out.index("## package.json")
