import sys
import json
import subprocess
from pathlib import Path
from typing import Any

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()



@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for name in ("OPENROUTER_TOKEN", "USE_OPENROUTER", "PR_BASE_SHA", "PR_HEAD_SHA"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_json():
    def _write(path: Path, payload: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")

    return _write


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    root = tmp_path / "repo"
    root.mkdir()
    return root


@pytest.fixture
def default_rules(repo_root: Path) -> Path:
    from add_header.rules.repository import RuleConfigRepository

    repository = RuleConfigRepository(repo_root)
    repository.write_default()
    return repository.config_path


@pytest.fixture
def git():
    def _git(root: Path, *args: str) -> str:
        proc = subprocess.run(
            ["git", *args], cwd=str(root), capture_output=True, text=True, check=True
        )
        return proc.stdout.strip()

    return _git


@pytest.fixture
def git_repo(repo_root: Path, git) -> Path:
    git(repo_root, "init", "-q")
    git(repo_root, "config", "user.email", "ci@example.com")
    git(repo_root, "config", "user.name", "CI")
    git(repo_root, "config", "commit.gpgsign", "false")
    return repo_root


@pytest.fixture
def commit(git):
    def _commit(root: Path, message: str) -> str:
        git(root, "add", "-A")
        git(root, "commit", "-q", "-m", message)
        return git(root, "rev-parse", "HEAD")

    return _commit


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()
