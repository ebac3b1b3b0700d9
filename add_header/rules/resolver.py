"""Resolve the effective header rule for a path."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Optional, TypeVar

from add_header.errors import MissingTemplateError
from add_header.rules.models import (
    HeaderRuleConfig,
    InsertMode,
    ResolvedRule,
    Rule,
    RuleAction,
)
from add_header.utils import to_posix

WILDCARD_EXTENSION = "*"

T = TypeVar("T")


def path_extension(rel_path: str) -> str:
    return PurePosixPath(to_posix(rel_path)).suffix.lstrip(".").lower()


def _matches_extension(pattern: str, name: str, extension: str) -> bool:
    if pattern == WILDCARD_EXTENSION:
        return True
    if pattern.startswith("."):
        return name.endswith(pattern)
    return pattern == extension


def rule_matches(rule: Rule, rel_path: str) -> bool:
    name = PurePosixPath(to_posix(rel_path)).name.lower()
    if name in rule.filenames:
        return True
    extension = path_extension(rel_path)
    return any(_matches_extension(pattern, name, extension) for pattern in rule.extensions)


def match_rule(rel_path: str, config: HeaderRuleConfig) -> Optional[Rule]:
    for rule in config.rules:
        if rule_matches(rule, rel_path):
            return rule
    return None


def _first(*values: Optional[T]) -> Optional[T]:
    for value in values:
        if value is not None:
            return value
    return None


def resolve_rule(rel_path: str, config: HeaderRuleConfig) -> ResolvedRule:
    """Merge the first matching rule over the default, field by field."""
    matched = match_rule(rel_path, config) or Rule()
    default = config.default

    action = _first(matched.action, default.action, RuleAction.ADD)
    template = _first(matched.template, default.template)
    if action == RuleAction.ADD and template is None:
        raise MissingTemplateError(to_posix(rel_path))

    return ResolvedRule(
        template=template,
        insert=_first(matched.insert, default.insert, InsertMode.START),
        action=action,
        detect=_first(matched.detect, default.detect, ()),
    )
