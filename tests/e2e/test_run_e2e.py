"""End-to-end runs against a real git repository."""

import shutil

import pytest

from add_header.__main__ import cli
from add_header.pipeline import run

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


@pytest.mark.asyncio
async def test_adds_headers_to_non_ignored_files(pr_repo, git) -> None:
    edits = await run(root=pr_repo.root, base=pr_repo.base, head=pr_repo.head)

    observed = (pr_repo.root / "observed.ts").read_text(encoding="utf-8")
    ignored = (pr_repo.root / "ignored.txt").read_text(encoding="utf-8")
    assert observed == "// observed.ts\nconsole.log('hello');\n"
    assert ignored == "sem cabecalho\n"
    assert edits == 1
    assert git(pr_repo.root, "diff", "--cached", "--name-only") == "observed.ts"


@pytest.mark.asyncio
async def test_second_run_makes_no_edits(pr_repo) -> None:
    assert await run(root=pr_repo.root, base=pr_repo.base, head=pr_repo.head) == 1
    assert await run(root=pr_repo.root, base=pr_repo.base, head=pr_repo.head) == 0


@pytest.mark.asyncio
async def test_legacy_pattern_ignored_when_new_file_exists(pr_repo) -> None:
    root = pr_repo.root
    (root / ".addheader").write_text("*.ts\n", encoding="utf-8")

    assert await run(root=root, base=pr_repo.base, head=pr_repo.head) == 1
    assert (root / "observed.ts").read_text(encoding="utf-8").startswith("// observed.ts\n")


def test_cli_run_reads_revisions_from_env(pr_repo, cli_runner) -> None:
    result = cli_runner.invoke(
        cli,
        ["run", "--root", str(pr_repo.root)],
        env={"PR_BASE_SHA": pr_repo.base, "PR_HEAD_SHA": pr_repo.head},
    )
    assert result.exit_code == 0, result.output
    assert "Files updated: 1." in result.output

    again = cli_runner.invoke(
        cli,
        ["run", "--root", str(pr_repo.root)],
        env={"PR_BASE_SHA": pr_repo.base, "PR_HEAD_SHA": pr_repo.head},
    )
    assert again.exit_code == 0
    assert "No changes needed in the PR files." in again.output


def test_cli_check_reports_missing_headers(pr_repo, cli_runner) -> None:
    result = cli_runner.invoke(
        cli, ["check", "--root", str(pr_repo.root), "--base", pr_repo.base, "--head", pr_repo.head]
    )
    assert result.exit_code == 1
    assert "observed.ts" in result.output
    assert (pr_repo.root / "observed.ts").read_text(encoding="utf-8") == "console.log('hello');\n"
