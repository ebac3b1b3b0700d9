from dataclasses import dataclass
from pathlib import Path

import pytest

from add_header.rules.repository import RuleConfigRepository


@dataclass(frozen=True)
class PullRequestRepo:
    root: Path
    base: str
    head: str


@pytest.fixture
def pr_repo(git_repo: Path, commit) -> PullRequestRepo:
    """A repo whose head commit adds one observed and one ignored file."""
    (git_repo / ".addheaderignore").write_text("ignored.txt\n", encoding="utf-8")
    RuleConfigRepository(git_repo).write_default()
    base = commit(git_repo, "initial")

    (git_repo / "observed.ts").write_text("console.log('hello');\n", encoding="utf-8")
    (git_repo / "ignored.txt").write_text("sem cabecalho\n", encoding="utf-8")
    head = commit(git_repo, "add files")
    return PullRequestRepo(root=git_repo, base=base, head=head)
