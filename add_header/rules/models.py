"""Header rule data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from add_header.constants import DEFAULT_WITHIN_FIRST_LINES


class InsertMode(str, Enum):
    START = "start"
    AFTER_SHEBANG = "afterShebang"


class RuleAction(str, Enum):
    ADD = "add"
    SKIP = "skip"


class DetectionKind(str, Enum):
    STARTS_WITH = "startsWith"
    INCLUDES = "includes"
    WITHIN_FIRST_LINES = "withinFirstLines"
    REGEX = "regex"


@dataclass(frozen=True)
class Detection:
    kind: DetectionKind
    value: Optional[str] = None
    lines: int = DEFAULT_WITHIN_FIRST_LINES
    flags: str = ""

    def as_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"type": self.kind.value}
        if self.value is not None:
            payload["value"] = self.value
        if self.kind == DetectionKind.WITHIN_FIRST_LINES:
            payload["lines"] = self.lines
        if self.kind == DetectionKind.REGEX and self.flags:
            payload["flags"] = self.flags
        return payload


@dataclass(frozen=True)
class Rule:
    """A partial rule; omitted fields fall back to the default rule."""

    template: Optional[str] = None
    insert: Optional[InsertMode] = None
    action: Optional[RuleAction] = None
    detect: Optional[tuple[Detection, ...]] = None
    filenames: frozenset[str] = field(default_factory=frozenset)
    extensions: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class HeaderRuleConfig:
    default: Rule
    rules: tuple[Rule, ...] = ()


@dataclass(frozen=True)
class ResolvedRule:
    template: Optional[str]
    insert: InsertMode = InsertMode.START
    action: RuleAction = RuleAction.ADD
    detect: tuple[Detection, ...] = ()

    @property
    def is_skip(self) -> bool:
        return self.action == RuleAction.SKIP


@dataclass(frozen=True)
class PreparedHeader:
    header: str
    insert_at: int
    rule: ResolvedRule
    path: str
