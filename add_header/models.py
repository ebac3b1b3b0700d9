from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class FileStatus(str, Enum):
    EDITED = "edited"
    WOULD_EDIT = "would_edit"
    PRESENT = "present"
    SKIPPED_RULE = "skipped_rule"
    IGNORED = "ignored"
    FILTERED = "filtered"
    MISSING = "missing"


class HeaderSource(str, Enum):
    DETERMINISTIC = "deterministic"
    REWRITE = "rewrite"


@dataclass(frozen=True)
class FileOutcome:
    path: str
    status: FileStatus
    detail: str = ""
    source: Optional[HeaderSource] = None

    def as_dict(self) -> dict[str, str]:
        return {
            "path": self.path,
            "status": self.status.value,
            "source": self.source.value if self.source is not None else "",
            "detail": self.detail,
        }


@dataclass
class RunReport:
    outcomes: list[FileOutcome] = field(default_factory=list)
    dry_run: bool = False

    def add(self, outcome: FileOutcome) -> None:
        self.outcomes.append(outcome)

    def with_status(self, *statuses: FileStatus) -> list[FileOutcome]:
        return [item for item in self.outcomes if item.status in statuses]

    @property
    def edited(self) -> int:
        return len(self.with_status(FileStatus.EDITED))

    @property
    def pending(self) -> int:
        return len(self.with_status(FileStatus.WOULD_EDIT))

    def summary(self) -> dict[str, int]:
        counts = {status.value: 0 for status in FileStatus}
        counts.update(Counter(item.status.value for item in self.outcomes))
        counts["files"] = len(self.outcomes)
        return counts
