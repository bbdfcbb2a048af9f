"""Core protocol and interface definitions.

Defines the DocumentationSource and ArticleProvider protocols the tool
handlers depend on, and the ToolContext bundle handed to every handler.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol

from core.models import (
    ArticleDocument,
    ContentEntry,
    FileDocument,
    ReadmeDocument,
    RepositoryLocation,
    SearchHit,
)


class DocumentationSource(Protocol):
    """Contract for the repository-backed documentation source."""

    @property
    def location(self) -> RepositoryLocation:
        ...

    async def get_readme(self, *, branch: str = "main") -> ReadmeDocument:
        ...

    async def list_entries(self, *, path: str = "") -> List[ContentEntry]:
        ...

    async def get_file(self, *, file_path: str, branch: str = "main") -> FileDocument:
        ...

    async def search_markdown(self) -> List[SearchHit]:
        ...


class ArticleProvider(Protocol):
    """Contract for the external article source."""

    async def get_article(self, *, url: Optional[str] = None) -> ArticleDocument:
        ...


@dataclass(frozen=True)
class ToolContext:
    docs: DocumentationSource
    articles: ArticleProvider
