"""MCP tool that returns the repository README.

Registers 'get_readme', which probes branch/filename combinations until
one README is found and returns it as a formatted text block.
"""

from __future__ import annotations

from typing import Annotated, Any, Mapping

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from clients.github.inputs import DEFAULT_BRANCH
from core.dispatch import ToolDispatcher
from core.interfaces import ToolContext
from core.models import ReadmeDocument, RepositoryLocation, ToolDescriptor

NAME = "get_readme"

DESCRIPTOR = ToolDescriptor(
    name=NAME,
    description="Fetch README documentation from the with-custom-cursor repository",
    input_schema={
        "type": "object",
        "properties": {
            "branch": {
                "type": "string",
                "description": "Branch name (optional, defaults to main)",
                "default": DEFAULT_BRANCH,
            },
        },
        "required": [],
    },
)

BranchArg = Annotated[str, Field(description=DESCRIPTOR.param_description("branch"))]


def format_readme(doc: ReadmeDocument, location: RepositoryLocation) -> str:
    return (
        f"# {location.repo} Project Documentation\n\n"
        f"Repository: {location.html_url}\n"
        f"File: {doc.filename} (branch: {doc.branch})\n\n"
        f"---\n\n"
        f"{doc.content}"
    )


async def handle(ctx: ToolContext, arguments: Mapping[str, Any]) -> str:
    branch = arguments.get("branch") or DEFAULT_BRANCH
    doc = await ctx.docs.get_readme(branch=branch)
    return format_readme(doc, ctx.docs.location)


def register(mcp: FastMCP, *, dispatcher: ToolDispatcher) -> None:
    @mcp.tool(name=NAME, description=DESCRIPTOR.description)
    async def get_readme(branch: BranchArg = DEFAULT_BRANCH) -> str:
        """Return the README, trying the given branch, then main and master."""
        return await dispatcher.call_text(NAME, {"branch": branch})
