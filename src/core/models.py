"""Immutable dataclasses shared by clients, sources and tools.

Includes the repository location, the request-scoped documents produced
by the sources (README, file, listing rows, search hits, article) and the
tool descriptor/request/response types used by the dispatcher.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Optional, Tuple


@dataclass(frozen=True)
class RepositoryLocation:
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def html_url(self) -> str:
        return f"https://github.com/{self.owner}/{self.repo}"

    @property
    def api_path(self) -> str:
        return f"/repos/{self.owner}/{self.repo}"


@dataclass(frozen=True)
class ContentEntry:
    """One row of a contents listing (file, dir, symlink or submodule)."""

    name: str
    type: str
    path: str
    size: Optional[int] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class ReadmeDocument:
    filename: str
    branch: str
    content: str


@dataclass(frozen=True)
class FileDocument:
    path: str
    branch: str
    size: Optional[int]
    content: str


@dataclass(frozen=True)
class SearchHit:
    name: str
    path: str
    url: Optional[str] = None


@dataclass(frozen=True)
class ArticleDocument:
    url: str
    text: str
    title: Optional[str] = None


@dataclass(frozen=True)
class ToolDescriptor:
    """Name, description and JSON input schema of one exposed tool."""

    name: str
    description: str
    input_schema: Mapping[str, Any] = field(
        default_factory=lambda: {"type": "object", "properties": {}, "required": []}
    )

    def param_description(self, param: str) -> str:
        return self.input_schema["properties"][param].get("description", "")


@dataclass(frozen=True)
class ToolRequest:
    name: str
    arguments: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class TextBlock:
    text: str
    type: Literal["text"] = "text"


@dataclass(frozen=True)
class ToolResponse:
    """Uniform envelope for both outcomes.

    Errors keep the same shape; the single text block starts with
    ``ERROR_PREFIX`` so hosts that only read text still see the failure.
    """

    content: Tuple[TextBlock, ...]

    ERROR_PREFIX = "Error: "

    @classmethod
    def success(cls, text: str) -> "ToolResponse":
        return cls(content=(TextBlock(text=text),))

    @classmethod
    def failure(cls, message: str) -> "ToolResponse":
        return cls(content=(TextBlock(text=f"{cls.ERROR_PREFIX}{message}"),))

    @property
    def text(self) -> str:
        return "\n".join(block.text for block in self.content)

