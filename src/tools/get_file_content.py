"""MCP tool that returns one file's content in a fenced block.

Registers 'get_file_content'; the fence language hint is the file's
lowercased extension.
"""

from __future__ import annotations

from typing import Annotated, Any, Mapping

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from clients.github.inputs import DEFAULT_BRANCH
from core.dispatch import ToolDispatcher
from core.errors import ValidationError
from core.interfaces import ToolContext
from core.models import FileDocument, RepositoryLocation, ToolDescriptor
from core.paths import file_extension

NAME = "get_file_content"

DESCRIPTOR = ToolDescriptor(
    name=NAME,
    description="Get content of a specific file from the with-custom-cursor repository",
    input_schema={
        "type": "object",
        "properties": {
            "file_path": {
                "type": "string",
                "description": "Path to the file (e.g., 'src/index.js', 'package.json')",
            },
            "branch": {
                "type": "string",
                "description": "Branch name (optional, defaults to main)",
                "default": DEFAULT_BRANCH,
            },
        },
        "required": ["file_path"],
    },
)

FilePathArg = Annotated[str, Field(description=DESCRIPTOR.param_description("file_path"))]
BranchArg = Annotated[str, Field(description=DESCRIPTOR.param_description("branch"))]


def format_file(doc: FileDocument, location: RepositoryLocation) -> str:
    # Size is reported as the upstream declared it
    return (
        f"# File: {doc.path}\n\n"
        f"Repository: {location.repo}\n"
        f"Branch: {doc.branch}\n"
        f"Size: {doc.size} bytes\n\n"
        f"```{file_extension(doc.path)}\n"
        f"{doc.content}\n"
        f"```"
    )


async def handle(ctx: ToolContext, arguments: Mapping[str, Any]) -> str:
    file_path = arguments.get("file_path")
    if not file_path or not str(file_path).strip():
        raise ValidationError("file_path is required")

    branch = arguments.get("branch") or DEFAULT_BRANCH
    doc = await ctx.docs.get_file(file_path=str(file_path), branch=branch)
    return format_file(doc, ctx.docs.location)


def register(mcp: FastMCP, *, dispatcher: ToolDispatcher) -> None:
    @mcp.tool(name=NAME, description=DESCRIPTOR.description)
    async def get_file_content(file_path: FilePathArg, branch: BranchArg = DEFAULT_BRANCH) -> str:
        """Return the text of `file_path` at `branch`.

        Params:
          - file_path: repository-relative path (required).
          - branch: branch name (default: "main").
        """
        return await dispatcher.call_text(NAME, {"file_path": file_path, "branch": branch})
