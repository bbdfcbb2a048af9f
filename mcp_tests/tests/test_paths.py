import pytest

from core.paths import clean_root, file_extension, normalize_posix_relpath


@pytest.mark.parametrize(
    "path,ext",
    [
        ("script.py", "py"),
        ("package.json", "json"),
        ("src/App.TSX", "tsx"),
        ("Makefile", ""),
        (".gitignore", ""),
        ("conf.d/Makefile", ""),
        ("archive.tar.gz", "gz"),
        ("", ""),
    ],
)
def test_file_extension(path, ext):
    assert file_extension(path) == ext


def test_normalize_posix_relpath():
    assert normalize_posix_relpath("  ./././a/b ") == "a/b"
    assert normalize_posix_relpath("\\a\\b") == "a/b"


def test_clean_root():
    assert clean_root("./") == ""
    assert clean_root("docs/") == "docs"
