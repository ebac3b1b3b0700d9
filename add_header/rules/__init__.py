from add_header.rules.models import (
    Detection,
    DetectionKind,
    HeaderRuleConfig,
    InsertMode,
    PreparedHeader,
    ResolvedRule,
    Rule,
    RuleAction,
)
from add_header.rules.resolver import resolve_rule

__all__ = [
    "Detection",
    "DetectionKind",
    "HeaderRuleConfig",
    "InsertMode",
    "PreparedHeader",
    "ResolvedRule",
    "Rule",
    "RuleAction",
    "resolve_rule",
]
