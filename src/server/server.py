"""Server bootstrap for the with-custom-cursor documentation MCP service.

Creates the FastMCP instance, wires clients, sources and the tool
dispatcher, registers the tools and starts the MCP server (stdio transport).
"""

import logging
import sys

from mcp.server.fastmcp import FastMCP

from clients.article_client import ArticleClient
from clients.github import GitHubClient
from config import (
    ARTICLE_TIMEOUT,
    GITHUB_TIMEOUT,
    HTTP_VERIFY,
    LOG_LEVEL,
    MEDIUM_ARTICLE_URL,
    REPO_NAME,
    REPO_OWNER,
)
from core.interfaces import ToolContext
from core.models import RepositoryLocation
from sources.article_source import ArticleSource
from sources.github_source import GitHubSource
from tools.catalog import build_dispatcher

from tools.get_readme import register as register_get_readme
from tools.get_project_files import register as register_get_project_files
from tools.get_file_content import register as register_get_file_content
from tools.search_docs import register as register_search_docs
from tools.get_medium_article import register as register_get_medium_article
from tools.get_complete_documentation import register as register_get_complete_documentation

logger = logging.getLogger(__name__)

mcp = FastMCP("with-custom-cursor-doc-server")


def configure_logging() -> None:
    # stdout carries the MCP stream; logs must go to stderr
    logging.basicConfig(
        level=LOG_LEVEL,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def register_tools() -> None:
    location = RepositoryLocation(owner=REPO_OWNER, repo=REPO_NAME)
    github_client = GitHubClient(location=location, timeout=GITHUB_TIMEOUT, verify=HTTP_VERIFY)
    article_client = ArticleClient(timeout=ARTICLE_TIMEOUT, verify=HTTP_VERIFY)

    context = ToolContext(
        docs=GitHubSource(client=github_client),
        articles=ArticleSource(client=article_client, default_url=MEDIUM_ARTICLE_URL),
    )
    dispatcher = build_dispatcher(context)

    register_get_readme(mcp, dispatcher=dispatcher)
    register_get_project_files(mcp, dispatcher=dispatcher)
    register_get_file_content(mcp, dispatcher=dispatcher)
    register_search_docs(mcp, dispatcher=dispatcher)
    register_get_medium_article(mcp, dispatcher=dispatcher)
    register_get_complete_documentation(mcp, dispatcher=dispatcher)


register_tools()


def main() -> None:
    configure_logging()
    logger.info("%s/%s documentation MCP server running on stdio", REPO_OWNER, REPO_NAME)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
