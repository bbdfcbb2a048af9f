from __future__ import annotations

import base64
import binascii
from typing import Any, List, Mapping, Tuple

from clients.github import GitHubClient
from clients.github.inputs import DEFAULT_BRANCH, normalize_dir, normalize_path, normalize_ref
from core.errors import (
    DocServerError,
    MalformedResponseError,
    NotFoundError,
    ReadmeNotFoundError,
    UpstreamStatusError,
    WrongEntryTypeError,
)
from core.models import ContentEntry, FileDocument, ReadmeDocument, RepositoryLocation, SearchHit


"""GitHub-backed DocumentationSource implementation.

- README lookup probes branch/filename combinations in a fixed order.
- Listings accept both single-entry and directory payloads.
- File bodies arrive base64-encoded in the Contents API `content` field.
"""


README_FILENAMES: Tuple[str, ...] = ("README.md", "readme.md", "Readme.md", "README.MD")
FALLBACK_BRANCHES: Tuple[str, ...] = ("main", "master")
MARKDOWN_GLOB = "*.md"


def readme_candidates(branch: str) -> List[Tuple[str, str]]:
    """(branch, filename) pairs in probe order; duplicates are kept."""
    branches = [branch, *FALLBACK_BRANCHES]
    return [(b, name) for b in branches for name in README_FILENAMES]


def decode_content(data: Mapping[str, Any]) -> str:
    raw = data.get("content")
    if not isinstance(raw, str):
        raise MalformedResponseError("Contents payload has no 'content' field")
    try:
        # GitHub wraps base64 at 60 columns; b64decode drops the newlines
        payload = base64.b64decode(raw)
    except (binascii.Error, ValueError) as e:
        raise MalformedResponseError("Contents payload is not valid base64") from e
    return payload.decode("utf-8", errors="replace")


def _entry(item: Mapping[str, Any]) -> ContentEntry:
    return ContentEntry(
        name=str(item.get("name", "")),
        type=str(item.get("type", "")),
        path=str(item.get("path", "")),
        size=item.get("size"),
        url=item.get("html_url"),
    )


class GitHubSource:
    def __init__(self, *, client: GitHubClient) -> None:
        self._client = client

    @property
    def location(self) -> RepositoryLocation:
        return self._client.location

    async def get_readme(self, *, branch: str = DEFAULT_BRANCH) -> ReadmeDocument:
        for branch_name, filename in readme_candidates(normalize_ref(branch)):
            try:
                data = await self._client.get_contents(filename, ref=branch_name)
                if not isinstance(data, dict):
                    continue
                content = decode_content(data)
            except DocServerError:
                # Try next combination
                continue
            return ReadmeDocument(filename=filename, branch=branch_name, content=content)

        raise ReadmeNotFoundError(
            f"README not found in {self.location.full_name}. "
            "Tried multiple branches and filename variations."
        )

    async def list_entries(self, *, path: str = "") -> List[ContentEntry]:
        path_clean = normalize_dir(path)
        try:
            data = await self._client.get_contents(path_clean)
        except (NotFoundError, UpstreamStatusError) as e:
            suffix = f"/{path_clean}" if path_clean else ""
            raise NotFoundError(
                f"Failed to fetch files from {self.location.full_name}{suffix}"
            ) from e

        items = data if isinstance(data, list) else [data]
        return [_entry(item) for item in items if isinstance(item, dict)]

    async def get_file(self, *, file_path: str, branch: str = DEFAULT_BRANCH) -> FileDocument:
        path_clean = normalize_path(file_path)
        ref = normalize_ref(branch)
        try:
            data = await self._client.get_contents(path_clean, ref=ref)
        except (NotFoundError, UpstreamStatusError) as e:
            raise NotFoundError(f"File not found: {path_clean} in branch {ref}") from e

        if isinstance(data, list):
            raise WrongEntryTypeError(f"{path_clean} is not a file (it's a dir)")
        if not isinstance(data, dict):
            raise MalformedResponseError(f"Unexpected contents payload for {path_clean}")
        entry_type = data.get("type")
        if entry_type != "file":
            raise WrongEntryTypeError(f"{path_clean} is not a file (it's a {entry_type})")

        return FileDocument(
            path=path_clean,
            branch=ref,
            size=data.get("size"),
            content=decode_content(data),
        )

    async def search_markdown(self) -> List[SearchHit]:
        query = f"filename:{MARKDOWN_GLOB} repo:{self.location.full_name}"
        try:
            data = await self._client.search_code(query)
        except (NotFoundError, UpstreamStatusError) as e:
            raise UpstreamStatusError(
                f"Failed to search documentation in {self.location.full_name}",
                status_code=getattr(e, "status_code", 404),
            ) from e

        items = data.get("items")
        if not isinstance(items, list):
            raise MalformedResponseError(
                f"Search results for {self.location.full_name} are missing 'items'"
            )
        return [
            SearchHit(
                name=str(item.get("name", "")),
                path=str(item.get("path", "")),
                url=item.get("html_url"),
            )
            for item in items
            if isinstance(item, dict)
        ]
