"""MCP tool that assembles README, article and package manifest into one document.

Each section is fetched independently; a failing section is replaced by a
"not available" placeholder and the remaining sections are still built.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Mapping, Optional

from mcp.server.fastmcp import FastMCP

from clients.github.inputs import DEFAULT_BRANCH
from core.dispatch import ToolDispatcher
from core.errors import DocServerError
from core.interfaces import ToolContext
from core.models import ToolDescriptor
from tools.get_file_content import format_file
from tools.get_medium_article import format_article
from tools.get_readme import format_readme

logger = logging.getLogger(__name__)

NAME = "get_complete_documentation"
MANIFEST_PATH = "package.json"
SECTION_SEPARATOR = "\n\n---\n\n"

DESCRIPTOR = ToolDescriptor(
    name=NAME,
    description=(
        "Get the complete with-custom-cursor documentation: README, Medium article "
        "and package.json in a single document"
    ),
)


async def _section(title: str, build: Callable[[], Awaitable[str]]) -> str:
    try:
        body = await build()
    except DocServerError as e:
        logger.info("%s section unavailable: %s", title, e)
        body = f"*{title} not available: {e}*"
    except Exception as e:
        logger.exception("%s section raised an unexpected error", title)
        body = f"*{title} not available: {e or type(e).__name__}*"
    return f"## {title}\n\n{body}"


async def handle(
    ctx: ToolContext,
    arguments: Mapping[str, Any],
    *,
    now: Optional[Callable[[], datetime]] = None,
) -> str:
    location = ctx.docs.location

    async def readme() -> str:
        return format_readme(await ctx.docs.get_readme(branch=DEFAULT_BRANCH), location)

    async def article() -> str:
        return format_article(await ctx.articles.get_article())

    async def manifest() -> str:
        doc = await ctx.docs.get_file(file_path=MANIFEST_PATH, branch=DEFAULT_BRANCH)
        return format_file(doc, location)

    # One upstream request in flight at a time, in output order
    sections = [
        await _section("README", readme),
        await _section("Medium Article", article),
        await _section(MANIFEST_PATH, manifest),
    ]

    generated = (now or (lambda: datetime.now(timezone.utc)))().isoformat()
    header = (
        f"# {location.repo} Complete Documentation\n\n"
        f"Repository: {location.html_url}\n"
        f"Generated: {generated}"
    )
    return SECTION_SEPARATOR.join([header, *sections])


def register(mcp: FastMCP, *, dispatcher: ToolDispatcher) -> None:
    @mcp.tool(name=NAME, description=DESCRIPTOR.description)
    async def get_complete_documentation() -> str:
        return await dispatcher.call_text(NAME, {})
