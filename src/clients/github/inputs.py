from __future__ import annotations

from typing import Optional

from core.errors import ValidationError
from core.paths import clean_root, normalize_posix_relpath


DEFAULT_BRANCH = "main"


def normalize_ref(ref: Optional[str], default: str = DEFAULT_BRANCH) -> str:
    # Missing or blank refs fall back to the default branch
    ref_clean = (ref or "").strip()
    return ref_clean or default


def normalize_path(path: Optional[str]) -> str:
    # Keep GitHub paths stable and OS-independent:
    # - Convert "\" to "/"
    # - Drop leading "/" and repeated "./"
    # - Require a non-empty relative path
    path_clean = normalize_posix_relpath(path or "")
    if not path_clean:
        raise ValidationError("file_path is required")
    return path_clean


def normalize_dir(path: Optional[str]) -> str:
    # Empty result addresses the repository root
    return clean_root(path or "")
