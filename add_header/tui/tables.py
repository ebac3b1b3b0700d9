from collections import Counter

from rich.table import Column, Table

from add_header.models import FileOutcome, RunReport
from add_header.rules.models import PreparedHeader
from add_header.tui.enums import FILE_STATUS_STYLE, UIStyle


class RunTable:
    @staticmethod
    def summary_block(report: RunReport, mode: str) -> Table:
        counts = Counter(item.status.value for item in report.outcomes)
        chips = [f"{key}={value}" for key, value in sorted(counts.items()) if value > 0]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Mode", mode)
        table.add_row("Files", str(len(report.outcomes)))
        table.add_row("Statuses", "  ".join(chips))
        return table

    @staticmethod
    def outcomes_table(outcomes: list[FileOutcome]) -> Table:
        table = Table(
            Column(header="Path", overflow="ellipsis", max_width=60),
            Column(header="Status", width=12),
            Column(header="Source", width=13),
            Column(header="Detail", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )

        for outcome in outcomes:
            style = FILE_STATUS_STYLE.get(outcome.status, UIStyle.WHITE.value)
            row = outcome.as_dict()
            table.add_row(
                row["path"],
                f"[{style}]{row['status']}[/{style}]",
                row["source"],
                row["detail"],
            )
        return table


class RuleTable:
    @staticmethod
    def resolved_block(prepared: PreparedHeader) -> Table:
        rule = prepared.rule
        detect = ", ".join(
            f"{item.kind.value}({item.value!r})" for item in rule.detect
        ) or "prefix at offset"

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Path", prepared.path)
        table.add_row("Action", rule.action.value)
        table.add_row("Insert", rule.insert.value)
        table.add_row("Detect", detect)
        table.add_row("Header", repr(prepared.header))
        return table
