"""Ignore-file loading and built-in path filtering."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import pathspec

from add_header.constants import (
    EXCLUDED_DIR_PARTS,
    EXCLUDED_PREFIXES,
    EXCLUDED_SUFFIXES,
    IGNORE_FILENAMES,
)
from add_header.utils import read_text, to_posix

IgnorePredicate = Callable[[str], bool]


def ignore_file_for(root: Path) -> Optional[Path]:
    """Return the ignore file in effect; the legacy name is read only as fallback."""
    for name in IGNORE_FILENAMES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def build_ignore_spec(lines: list[str]) -> pathspec.PathSpec:
    return pathspec.PathSpec.from_lines("gitwildmatch", lines)


def load_ignore(root: Path) -> IgnorePredicate:
    ignore_file = ignore_file_for(root)
    if ignore_file is None:
        return lambda _path: False

    spec = build_ignore_spec(read_text(ignore_file).splitlines())

    def _ignores(path: str) -> bool:
        return spec.match_file(to_posix(path))

    return _ignores


def should_process_path(path: str) -> bool:
    unix_path = to_posix(path)
    parts = unix_path.split("/")
    if any(part in EXCLUDED_DIR_PARTS for part in parts[:-1]):
        return False
    if unix_path.startswith(EXCLUDED_PREFIXES):
        return False
    return not unix_path.lower().endswith(EXCLUDED_SUFFIXES)
