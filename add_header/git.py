"""Thin wrapper over the git command line."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Sequence

from add_header.constants import CHANGED_DIFF_FILTER
from add_header.errors import GitCommandError


class GitRepository:
    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def _git(self, args: Sequence[str]) -> str:
        proc = subprocess.run(
            ["git", *args],
            cwd=str(self._root),
            capture_output=True,
            text=True,
            check=False,
        )
        if proc.returncode != 0:
            raise GitCommandError(list(args), proc.returncode, proc.stderr)
        return proc.stdout

    @classmethod
    def discover(cls, cwd: Path) -> "GitRepository":
        toplevel = cls(cwd)._git(["rev-parse", "--show-toplevel"]).strip()
        return cls(Path(toplevel))

    def changed_files(self, base: str, head: str) -> list[str]:
        out = self._git(
            [
                "-c",
                "core.quotepath=off",
                "diff",
                "--name-only",
                f"--diff-filter={CHANGED_DIFF_FILTER}",
                f"{base}..{head}",
            ]
        )
        return [line for line in out.splitlines() if line]

    def stage(self, rel_path: str) -> None:
        self._git(["add", "--", rel_path])
