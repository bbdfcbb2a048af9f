"""MCP tool that finds markdown files via GitHub code search."""

from __future__ import annotations

from typing import Any, List, Mapping

from mcp.server.fastmcp import FastMCP

from core.dispatch import ToolDispatcher
from core.interfaces import ToolContext
from core.models import RepositoryLocation, SearchHit, ToolDescriptor

NAME = "search_docs"

DESCRIPTOR = ToolDescriptor(
    name=NAME,
    description="Search for documentation and markdown files in the repository",
)


def format_hits(hits: List[SearchHit], location: RepositoryLocation) -> str:
    title = f"# Documentation files found in {location.repo}:"
    if not hits:
        return f"{title}\n\nNo markdown documentation files found."
    body = "\n\n".join(
        f"- **{hit.name}**\n  Path: `{hit.path}`\n  URL: {hit.url or 'n/a'}" for hit in hits
    )
    return f"{title}\n\n{body}"


async def handle(ctx: ToolContext, arguments: Mapping[str, Any]) -> str:
    hits = await ctx.docs.search_markdown()
    return format_hits(hits, ctx.docs.location)


def register(mcp: FastMCP, *, dispatcher: ToolDispatcher) -> None:
    @mcp.tool(name=NAME, description=DESCRIPTOR.description)
    async def search_docs() -> str:
        return await dispatcher.call_text(NAME, {})
