"""Parse the JSON header rule configuration into frozen models."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Optional

from jsonschema import Draft202012Validator

from add_header.constants import DEFAULT_WITHIN_FIRST_LINES
from add_header.errors import InvalidConfigSchemaError, UnknownDetectionError
from add_header.rules.models import (
    Detection,
    DetectionKind,
    HeaderRuleConfig,
    InsertMode,
    Rule,
    RuleAction,
)
from add_header.rules.schema import CONFIG_SCHEMA

_VALIDATOR = Draft202012Validator(CONFIG_SCHEMA)

REGEX_FLAGS: dict[str, re.RegexFlag] = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}
# Accepted for compatibility with JavaScript-style flag strings; no effect here.
IGNORED_REGEX_FLAGS = frozenset("guy")

_VALUE_REQUIRED = (
    DetectionKind.INCLUDES,
    DetectionKind.WITHIN_FIRST_LINES,
    DetectionKind.REGEX,
)


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def regex_flags(flags: str) -> re.RegexFlag:
    compiled = re.RegexFlag(0)
    for letter in flags:
        if letter in IGNORED_REGEX_FLAGS:
            continue
        compiled |= REGEX_FLAGS[letter]
    return compiled


def parse_detection(raw: dict[str, Any], source: Path) -> Detection:
    kind_name = raw.get("type")
    try:
        kind = DetectionKind(kind_name)
    except ValueError:
        raise UnknownDetectionError(source, str(kind_name)) from None

    value = raw.get("value")
    if value is not None and not isinstance(value, str):
        raise InvalidConfigSchemaError(source, f"detection '{kind.value}' value must be a string")
    if value is None and kind in _VALUE_REQUIRED:
        raise InvalidConfigSchemaError(source, f"detection '{kind.value}' requires a value")

    lines = raw.get("lines", DEFAULT_WITHIN_FIRST_LINES)
    if isinstance(lines, bool) or not isinstance(lines, int) or lines < 1:
        raise InvalidConfigSchemaError(source, "withinFirstLines.lines must be a positive integer")

    flags = raw.get("flags") or ""
    if not isinstance(flags, str):
        raise InvalidConfigSchemaError(source, "regex flags must be a string")
    unknown = sorted(set(flags) - set(REGEX_FLAGS) - IGNORED_REGEX_FLAGS)
    if unknown:
        raise InvalidConfigSchemaError(source, f"unsupported regex flags: {''.join(unknown)}")

    return Detection(kind=kind, value=value, lines=lines, flags=flags)


def _join_template(raw: Any) -> Optional[str]:
    if raw is None:
        return None
    if isinstance(raw, list):
        return "\n".join(raw)
    return str(raw)


def parse_rule(raw: dict[str, Any], source: Path) -> Rule:
    detect_raw = raw.get("detect")
    detect: Optional[tuple[Detection, ...]] = None
    if detect_raw is not None:
        detect = tuple(parse_detection(item, source) for item in detect_raw)

    insert = raw.get("insert")
    action = raw.get("action")
    return Rule(
        template=_join_template(raw.get("template")),
        insert=InsertMode(insert) if insert is not None else None,
        action=RuleAction(action) if action is not None else None,
        detect=detect,
        filenames=frozenset(name.lower() for name in raw.get("filenames", [])),
        extensions=frozenset(ext.lower() for ext in raw.get("extensions", [])),
    )


def parse_config(payload: Any, source: Path) -> HeaderRuleConfig:
    error = next(iter(_VALIDATOR.iter_errors(payload)), None)
    if error is not None:
        raise InvalidConfigSchemaError(source, format_schema_error(error))

    return HeaderRuleConfig(
        default=parse_rule(payload["default"], source),
        rules=tuple(parse_rule(item, source) for item in payload.get("rules", [])),
    )
