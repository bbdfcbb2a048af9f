from __future__ import annotations

import posixpath

"""
Path utilities used across the project.

Provides consistent POSIX-style normalization of repository paths and the
extension lookup used for fenced-block language hints.
"""


def normalize_posix_relpath(p: str) -> str:
    """Normalize a user path to a clean POSIX relative path.

    Converts backslashes to '/', trims whitespace, removes leading '/'
    and repeated './' markers.
    """
    s = (p or "").strip()
    s = s.replace("\\", "/")        # Unify path separators across OSes.
    s = s.lstrip("/")               # Contents API paths are repo-relative.
    while s.startswith("./"):       # Drop repeated "./" prefixes.
        s = s[2:]
    return s


def clean_root(root: str) -> str:
    """Normalize a directory hint.

    Treats '.', './', '/', and empty as repository root (returns '').
    """
    r = (root or "").strip().replace("\\", "/")
    if r in ("", ".", "./", "/"):
        return ""
    while r.startswith("./"):
        r = r[2:]
    return r.strip("/")


def file_extension(path: str) -> str:
    """Lowercased extension of the path's basename, '' when there is none.

    Dotfiles such as '.gitignore' have no extension.
    """
    base = posixpath.basename((path or "").replace("\\", "/").rstrip("/"))
    _, ext = posixpath.splitext(base)
    return ext[1:].lower()
