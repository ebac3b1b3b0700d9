"""Tests for ignore-file loading and the built-in path filter."""

from pathlib import Path

import pytest

from add_header.ignore import ignore_file_for, load_ignore, should_process_path


def test_nothing_ignored_without_files(tmp_path: Path) -> None:
    ignores = load_ignore(tmp_path)
    assert ignores("anything.ts") is False
    assert ignore_file_for(tmp_path) is None


def test_uses_addheaderignore(tmp_path: Path) -> None:
    (tmp_path / ".addheaderignore").write_text("ignored.txt\n", encoding="utf-8")
    ignores = load_ignore(tmp_path)
    assert ignores("ignored.txt") is True
    assert ignores("other.ts") is False


def test_falls_back_to_legacy_file(tmp_path: Path) -> None:
    (tmp_path / ".addheader").write_text("fallback.txt\n", encoding="utf-8")
    ignores = load_ignore(tmp_path)
    assert ignore_file_for(tmp_path) == tmp_path / ".addheader"
    assert ignores("fallback.txt") is True
    assert ignores("other.ts") is False


def test_new_file_takes_precedence(tmp_path: Path) -> None:
    (tmp_path / ".addheaderignore").write_text("only-this.txt\n", encoding="utf-8")
    (tmp_path / ".addheader").write_text("*.ts\n", encoding="utf-8")
    ignores = load_ignore(tmp_path)
    assert ignore_file_for(tmp_path) == tmp_path / ".addheaderignore"
    assert ignores("only-this.txt") is True
    assert ignores("file.ts") is False


def test_gitignore_semantics(tmp_path: Path) -> None:
    (tmp_path / ".addheaderignore").write_text(
        "# generated code\n" "dist/\n" "**/*.gen.ts\n" "docs/*.md\n" "!docs/keep.md\n",
        encoding="utf-8",
    )
    ignores = load_ignore(tmp_path)
    assert ignores("dist/bundle.js")
    assert ignores("src/deep/api.gen.ts")
    assert ignores("docs/intro.md")
    assert not ignores("docs/keep.md")
    assert not ignores("src/api.ts")


def test_backslash_paths_normalized(tmp_path: Path) -> None:
    (tmp_path / ".addheaderignore").write_text("vendor/\n", encoding="utf-8")
    assert load_ignore(tmp_path)("vendor\\lib\\x.js") is True


@pytest.mark.parametrize(
    "path, expected",
    [
        ("src/index.ts", True),
        ("Makefile", True),
        ("node_modules/pkg/file.ts", False),
        ("web/node_modules/pkg/file.ts", False),
        (".git/config", False),
        ("assets/logo.png", False),
        ("assets/Logo.PNG", False),
        ("map/file.js.map", False),
        ("lock/file.lock", False),
    ],
)
def test_should_process_path(path: str, expected: bool) -> None:
    assert should_process_path(path) is expected
