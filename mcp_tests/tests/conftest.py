import pytest

from core.errors import NotFoundError
from core.interfaces import ToolContext
from core.models import (
    ArticleDocument,
    ContentEntry,
    FileDocument,
    ReadmeDocument,
    RepositoryLocation,
    SearchHit,
)

LOCATION = RepositoryLocation(owner="AndreQuintero", repo="with-custom-cursor")


class DummyMCP:
    """Minimal FastMCP stand-in to capture tool registration."""

    def __init__(self) -> None:
        self.tools = {}
        self.descriptions = {}

    def tool(self, *, name: str, description: str = ""):
        def _decorator(fn):
            self.tools[name] = fn
            self.descriptions[name] = description
            return fn
        return _decorator


class FakeDocs:
    """In-memory DocumentationSource; set an attribute to an exception to make that call fail."""

    def __init__(
        self,
        *,
        readme=None,
        entries=None,
        files=None,
        hits=None,
    ) -> None:
        self.location = LOCATION
        self.readme = readme or ReadmeDocument(filename="README.md", branch="main", content="# Hello")
        self.entries = entries if entries is not None else []
        self.files = files or {}
        self.hits = hits if hits is not None else []
        self.calls = []

    async def get_readme(self, *, branch: str = "main"):
        self.calls.append(("readme", branch))
        if isinstance(self.readme, Exception):
            raise self.readme
        return self.readme

    async def list_entries(self, *, path: str = ""):
        self.calls.append(("list", path))
        if isinstance(self.entries, Exception):
            raise self.entries
        return list(self.entries)

    async def get_file(self, *, file_path: str, branch: str = "main"):
        self.calls.append(("file", file_path, branch))
        out = self.files.get(file_path)
        if isinstance(out, Exception):
            raise out
        if out is None:
            raise NotFoundError(f"File not found: {file_path} in branch {branch}")
        return out

    async def search_markdown(self):
        self.calls.append(("search",))
        if isinstance(self.hits, Exception):
            raise self.hits
        return list(self.hits)


class FakeArticles:
    def __init__(self, article=None) -> None:
        self.article = article or ArticleDocument(
            url="https://medium.example/post", title="Post", text="Article body"
        )
        self.calls = []

    async def get_article(self, *, url=None):
        self.calls.append(url)
        if isinstance(self.article, Exception):
            raise self.article
        return self.article


@pytest.fixture
def dummy_mcp():
    return DummyMCP()


@pytest.fixture
def fake_docs():
    return FakeDocs(
        entries=[ContentEntry(name="src", type="dir", path="src", size=0, url="https://github.com/x/src")],
        files={
            "package.json": FileDocument(path="package.json", branch="main", size=120, content="{}"),
        },
        hits=[SearchHit(name="README.md", path="README.md", url="https://github.com/x/README.md")],
    )


@pytest.fixture
def fake_articles():
    return FakeArticles()


@pytest.fixture
def tool_context(fake_docs, fake_articles):
    return ToolContext(docs=fake_docs, articles=fake_articles)
