"""Header rendering, insertion offsets and already-present detection."""

from __future__ import annotations

import re
from typing import Callable

from add_header.constants import HEADER_PLACEHOLDER, PATH_PLACEHOLDER, SHEBANG_PREFIX
from add_header.errors import InvalidPatternError
from add_header.rules.models import (
    Detection,
    DetectionKind,
    HeaderRuleConfig,
    InsertMode,
    PreparedHeader,
    ResolvedRule,
)
from add_header.rules.parser import regex_flags
from add_header.rules.resolver import resolve_rule
from add_header.utils import to_posix


def render_template(template: str, rel_path: str) -> str:
    return template.replace(PATH_PLACEHOLDER, to_posix(rel_path))


def insertion_offset(content: str, insert: InsertMode) -> int:
    if insert != InsertMode.AFTER_SHEBANG or not content.startswith(SHEBANG_PREFIX):
        return 0
    newline = content.find("\n")
    if newline == -1:
        return len(content)
    return newline + 1


def prepare_header(rel_path: str, content: str, config: HeaderRuleConfig) -> PreparedHeader:
    return prepare_with_rule(rel_path, content, resolve_rule(rel_path, config))


def prepare_with_rule(rel_path: str, content: str, rule: ResolvedRule) -> PreparedHeader:
    unix_path = to_posix(rel_path)
    if rule.is_skip or rule.template is None:
        return PreparedHeader(header="", insert_at=0, rule=rule, path=unix_path)
    return PreparedHeader(
        header=render_template(rule.template, unix_path),
        insert_at=insertion_offset(content, rule.insert),
        rule=rule,
        path=unix_path,
    )


def splice_header(content: str, prepared: PreparedHeader) -> str:
    """Return ``content`` with the header inserted at its offset."""
    if prepared.rule.is_skip:
        return content
    offset = prepared.insert_at
    head = content[:offset]
    # Shebang without a trailing newline: keep it on its own line.
    if offset and offset == len(content) and not head.endswith("\n"):
        head += "\n"
    return head + prepared.header + content[offset:]


def substitute(value: str, prepared: PreparedHeader) -> str:
    return value.replace(PATH_PLACEHOLDER, prepared.path).replace(
        HEADER_PLACEHOLDER, prepared.header
    )


def _prefix_at_offset(content: str, prepared: PreparedHeader) -> bool:
    return content[prepared.insert_at :].startswith(prepared.header)


def _starts_with(content: str, detection: Detection, prepared: PreparedHeader) -> bool:
    if detection.value is None:
        return _prefix_at_offset(content, prepared)
    return content.startswith(substitute(detection.value, prepared))


def _includes(content: str, detection: Detection, prepared: PreparedHeader) -> bool:
    return substitute(detection.value or "", prepared) in content


def _within_first_lines(content: str, detection: Detection, prepared: PreparedHeader) -> bool:
    head = "\n".join(content.split("\n")[: detection.lines])
    return substitute(detection.value or "", prepared) in head


def _regex(content: str, detection: Detection, prepared: PreparedHeader) -> bool:
    pattern = substitute(detection.value or "", prepared)
    try:
        compiled = re.compile(pattern, regex_flags(detection.flags))
    except re.error as exc:
        raise InvalidPatternError(pattern, str(exc)) from exc
    return compiled.search(content) is not None


DETECTORS: dict[DetectionKind, Callable[[str, Detection, PreparedHeader], bool]] = {
    DetectionKind.STARTS_WITH: _starts_with,
    DetectionKind.INCLUDES: _includes,
    DetectionKind.WITHIN_FIRST_LINES: _within_first_lines,
    DetectionKind.REGEX: _regex,
}


def detection_passes(content: str, detection: Detection, prepared: PreparedHeader) -> bool:
    return DETECTORS[detection.kind](content, detection, prepared)


def header_already_present(content: str, prepared: PreparedHeader) -> bool:
    if prepared.rule.is_skip:
        return True
    if not prepared.rule.detect:
        return _prefix_at_offset(content, prepared)
    return all(detection_passes(content, item, prepared) for item in prepared.rule.detect)
