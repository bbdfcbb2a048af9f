"""MCP tool that lists entries of a repository directory.

Registers 'get_project_files' which returns one bullet per entry, in the
order the Contents API returned them.
"""

from __future__ import annotations

from typing import Annotated, Any, List, Mapping

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from core.dispatch import ToolDispatcher
from core.interfaces import ToolContext
from core.models import ContentEntry, RepositoryLocation, ToolDescriptor

NAME = "get_project_files"

DESCRIPTOR = ToolDescriptor(
    name=NAME,
    description="Get a list of all files in the with-custom-cursor repository",
    input_schema={
        "type": "object",
        "properties": {
            "path": {
                "type": "string",
                "description": "Directory path to explore (optional, defaults to root)",
                "default": "",
            },
        },
        "required": [],
    },
)

PathArg = Annotated[str, Field(description=DESCRIPTOR.param_description("path"))]


def _format_entry(entry: ContentEntry) -> str:
    size = entry.size if entry.size is not None else 0
    return (
        f"- **{entry.name}** ({entry.type}) - {size} bytes\n"
        f"  Path: `{entry.path}`\n"
        f"  URL: {entry.url or 'n/a'}"
    )


def format_listing(entries: List[ContentEntry], location: RepositoryLocation, path: str = "") -> str:
    title = f"# Files in {location.repo}{'/' + path if path else ''}"
    if not entries:
        return f"{title}\n\nNo files found."
    return f"{title}\n\n" + "\n\n".join(_format_entry(e) for e in entries)


async def handle(ctx: ToolContext, arguments: Mapping[str, Any]) -> str:
    path = (arguments.get("path") or "").strip().strip("/")
    entries = await ctx.docs.list_entries(path=path)
    return format_listing(entries, ctx.docs.location, path)


def register(mcp: FastMCP, *, dispatcher: ToolDispatcher) -> None:
    @mcp.tool(name=NAME, description=DESCRIPTOR.description)
    async def get_project_files(path: PathArg = "") -> str:
        """List files and directories at `path` (repository root by default)."""
        return await dispatcher.call_text(NAME, {"path": path})
