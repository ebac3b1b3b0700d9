import asyncio
from pathlib import Path
from typing import Callable, Optional

import click
from rich.console import Console

from add_header.constants import DEFAULT_BASE_REF, DEFAULT_HEAD_REF
from add_header.errors import HeaderAppError
from add_header.git import GitRepository
from add_header.headers import prepare_header
from add_header.models import RunReport
from add_header.pipeline import HeaderPipeline
from add_header.rewrite import RewriteSettings, build_rewriter
from add_header.rules.repository import RuleConfigRepository
from add_header.tui import HeaderConsoleUI
from add_header.utils import read_text, to_posix


def _root_option() -> Callable:
    return click.option(
        "--root",
        type=click.Path(path_type=Path, file_okay=False),
        default=None,
        help="Working copy root (defaults to the git top level).",
    )


def _config_option() -> Callable:
    return click.option(
        "--config",
        "config_path",
        type=click.Path(path_type=Path, dir_okay=False),
        default=None,
        help="Header rule config (defaults to <root>/.addheaderrc.json).",
    )


def _selection_options(func: Callable) -> Callable:
    decorators = [
        _root_option(),
        _config_option(),
        click.option("--base", envvar="PR_BASE_SHA", default=DEFAULT_BASE_REF, show_default=True),
        click.option("--head", envvar="PR_HEAD_SHA", default=DEFAULT_HEAD_REF, show_default=True),
        click.option(
            "--file",
            "files",
            multiple=True,
            help="Process these paths instead of the git diff (repeatable).",
        ),
        click.option("-v", "--verbose", is_flag=True, help="Show per-file outcomes."),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def _resolve_root(root: Optional[Path]) -> Path:
    if root is not None:
        return root.expanduser().resolve()
    return GitRepository.discover(Path.cwd()).root


def _changed_files(files: tuple[str, ...]) -> Optional[list[str]]:
    return list(files) if files else None


def _execute(pipeline: HeaderPipeline, files: tuple[str, ...], base: str, head: str) -> RunReport:
    return asyncio.run(pipeline.run(changed_files=_changed_files(files), base=base, head=head))


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Relative-path headers for files changed in a pull request."""
    ctx.obj = {}


@cli.command(help="Insert missing headers into changed files and stage them.")
@_selection_options
@click.option("--openrouter-token", envvar="OPENROUTER_TOKEN", default=None, hidden=True)
@click.option("--use-openrouter", envvar="USE_OPENROUTER", default=None, help="Enable the LLM rewrite step.")
@click.option("--model", envvar="OPENROUTER_MODEL", default=None)
@click.option("--base-url", envvar="OPENROUTER_BASE_URL", default=None)
@click.option("--timeout", envvar="OPENROUTER_TIMEOUT", type=float, default=None)
def run(
    root: Optional[Path],
    config_path: Optional[Path],
    base: str,
    head: str,
    files: tuple[str, ...],
    verbose: bool,
    openrouter_token: Optional[str],
    use_openrouter: Optional[str],
    model: Optional[str],
    base_url: Optional[str],
    timeout: Optional[float],
) -> None:
    ui = HeaderConsoleUI(Console())
    settings = RewriteSettings.from_values(
        token=openrouter_token,
        enabled=use_openrouter,
        model=model,
        base_url=base_url,
        timeout_s=timeout,
    )

    try:
        resolved_root = _resolve_root(root)
        pipeline = HeaderPipeline(
            root=resolved_root,
            rules=RuleConfigRepository(resolved_root, config_path),
            rewriter=build_rewriter(settings),
        )
        report = _execute(pipeline, files, base, head)
    except HeaderAppError as exc:
        raise click.ClickException(f"Fatal: {exc}")

    mode = "run:rewrite" if settings.active else "run:deterministic"
    ui.render_run(report, mode=mode, verbose=verbose)


@cli.command(help="Report changed files missing their header without writing.")
@_selection_options
def check(
    root: Optional[Path],
    config_path: Optional[Path],
    base: str,
    head: str,
    files: tuple[str, ...],
    verbose: bool,
) -> None:
    ui = HeaderConsoleUI(Console())
    try:
        resolved_root = _resolve_root(root)
        pipeline = HeaderPipeline(
            root=resolved_root,
            rules=RuleConfigRepository(resolved_root, config_path),
            dry_run=True,
        )
        report = _execute(pipeline, files, base, head)
    except HeaderAppError as exc:
        raise click.ClickException(f"Fatal: {exc}")

    if verbose:
        ui.render_run(report, mode="check", verbose=True)
    ui.render_check(report)
    if report.pending:
        raise click.exceptions.Exit(1)


@cli.command(help="Show the effective rule and rendered header for a path.")
@click.argument("path")
@_root_option()
@_config_option()
def resolve(path: str, root: Optional[Path], config_path: Optional[Path]) -> None:
    ui = HeaderConsoleUI(Console())
    try:
        resolved_root = _resolve_root(root)
        config = RuleConfigRepository(resolved_root, config_path).load()
        rel = to_posix(path)
        abs_path = resolved_root / rel
        content = read_text(abs_path) if abs_path.is_file() else ""
        prepared = prepare_header(rel, content, config)
    except HeaderAppError as exc:
        raise click.ClickException(f"Fatal: {exc}")
    ui.render_rule(prepared)


@cli.command(help="Write the starter header rule config.")
@_root_option()
@_config_option()
@click.option("--force", is_flag=True, help="Overwrite an existing config.")
def init(root: Optional[Path], config_path: Optional[Path], force: bool) -> None:
    ui = HeaderConsoleUI(Console())
    try:
        resolved_root = _resolve_root(root)
    except HeaderAppError as exc:
        raise click.ClickException(f"Fatal: {exc}")
    repository = RuleConfigRepository(resolved_root, config_path)
    written = repository.write_default(force=force)
    ui.render_config_written(str(repository.config_path), written)


def main() -> int:
    try:
        rv = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    except Exception as exc:
        HeaderConsoleUI(Console(stderr=True)).render_error(f"Fatal: {exc}")
        return 1
    # standalone_mode=False returns the Exit code instead of raising it.
    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
