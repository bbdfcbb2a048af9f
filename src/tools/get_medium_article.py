"""MCP tool that fetches the companion article and returns it as text.

Registers 'get_medium_article'. The HTML is reduced to pseudo-markdown by
core.html.html_to_markdown.
"""

from __future__ import annotations

from typing import Annotated, Any, Mapping, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from core.dispatch import ToolDispatcher
from core.interfaces import ToolContext
from core.models import ArticleDocument, ToolDescriptor

NAME = "get_medium_article"

DESCRIPTOR = ToolDescriptor(
    name=NAME,
    description="Fetch the Medium article about with-custom-cursor and return it as readable text",
    input_schema={
        "type": "object",
        "properties": {
            "url": {
                "type": "string",
                "description": "Article URL (optional, defaults to the configured article)",
            },
        },
        "required": [],
    },
)

UrlArg = Annotated[Optional[str], Field(description=DESCRIPTOR.param_description("url"))]


def format_article(doc: ArticleDocument) -> str:
    header = f"# Medium Article\n\nSource: {doc.url}\n"
    if doc.title:
        header += f"Title: {doc.title}\n"
    return f"{header}\n---\n\n{doc.text}"


async def handle(ctx: ToolContext, arguments: Mapping[str, Any]) -> str:
    doc = await ctx.articles.get_article(url=arguments.get("url"))
    return format_article(doc)


def register(mcp: FastMCP, *, dispatcher: ToolDispatcher) -> None:
    @mcp.tool(name=NAME, description=DESCRIPTOR.description)
    async def get_medium_article(url: UrlArg = None) -> str:
        """Return the article at `url` (or the configured default) as text."""
        return await dispatcher.call_text(NAME, {"url": url})
