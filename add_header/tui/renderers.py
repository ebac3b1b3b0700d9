from typing import Optional

from rich.console import Console, RenderableType
from rich.panel import Panel

from add_header.models import FileStatus, RunReport
from add_header.rules.models import PreparedHeader
from add_header.tui.enums import UIStyle
from add_header.tui.tables import RuleTable, RunTable

NO_CHANGES_MESSAGE = "No changes needed in the PR files."


def _panel(
    title: str, body: RenderableType, style: str, subtitle: Optional[str] = None
) -> Panel:
    return Panel(body, title=title, subtitle=subtitle, border_style=style, padding=(0, 1))


class HeaderConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_run(self, report: RunReport, mode: str, verbose: bool = False) -> None:
        self.console.print(
            _panel("header overview", RunTable.summary_block(report, mode=mode), UIStyle.BLUE.value)
        )
        if verbose and report.outcomes:
            self.console.print(
                _panel("files", RunTable.outcomes_table(report.outcomes), UIStyle.CYAN.value)
            )

        if report.dry_run:
            return
        if report.edited == 0:
            self.console.print(NO_CHANGES_MESSAGE)
        else:
            self.console.print(f"Files updated: {report.edited}.")

    def render_check(self, report: RunReport) -> None:
        pending = report.with_status(FileStatus.WOULD_EDIT)
        if not pending:
            self.console.print(
                _panel("check", "All changed files carry their header.", UIStyle.GREEN.value)
            )
            return
        self.console.print(
            _panel(
                "missing headers",
                RunTable.outcomes_table(pending),
                UIStyle.YELLOW.value,
                subtitle=f"{len(pending)} file(s)",
            )
        )

    def render_rule(self, prepared: PreparedHeader) -> None:
        self.console.print(
            _panel("resolved rule", RuleTable.resolved_block(prepared), UIStyle.MAGENTA.value)
        )

    def render_config_written(self, path: str, written: bool) -> None:
        if written:
            self.console.print(_panel("config", f"Wrote starter rules: {path}", UIStyle.GREEN.value))
            return
        self.console.print(
            _panel(
                "config",
                f"Config already exists (use --force to overwrite): {path}",
                UIStyle.YELLOW.value,
            )
        )

    def render_error(self, message: str) -> None:
        self.console.print(_panel("errors", message, UIStyle.RED.value))
