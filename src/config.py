"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants (target repository, article URL,
HTTP behaviour, timeouts and log level).
"""

from __future__ import annotations

import os


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


# Target repository (single-tenant)
REPO_OWNER = "AndreQuintero"
REPO_NAME = "with-custom-cursor"

# Article source. The default is a placeholder; deployments set MEDIUM_ARTICLE_URL
DEFAULT_MEDIUM_ARTICLE_URL = "https://medium.com/@AndreQuintero/with-custom-cursor"
MEDIUM_ARTICLE_URL = _env_str("MEDIUM_ARTICLE_URL", DEFAULT_MEDIUM_ARTICLE_URL)

# Network / HTTP
HTTP_VERIFY = _env_bool("HTTP_VERIFY", True)
GITHUB_TIMEOUT = _env_float("GITHUB_TIMEOUT", 20.0)
ARTICLE_TIMEOUT = _env_float("ARTICLE_TIMEOUT", 20.0)

# Logging (always stderr; stdout carries the MCP stream)
LOG_LEVEL = _env_str("LOG_LEVEL", "INFO").upper()
