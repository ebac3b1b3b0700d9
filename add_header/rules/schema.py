from typing import Any, Final

from add_header.rules.models import InsertMode, RuleAction


_STRING_LIST: Final[dict[str, Any]] = {"type": "array", "items": {"type": "string"}}

RULE_SCHEMA: Final[dict[str, Any]] = {
    "type": "object",
    "properties": {
        "template": {"oneOf": [{"type": "string"}, _STRING_LIST]},
        "insert": {"enum": [mode.value for mode in InsertMode]},
        "action": {"enum": [action.value for action in RuleAction]},
        "detect": {"type": "array", "items": {"type": "object"}},
        "filenames": _STRING_LIST,
        "extensions": _STRING_LIST,
    },
}

CONFIG_SCHEMA: Final[dict[str, Any]] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["default"],
    "properties": {
        "default": {"$ref": "#/$defs/rule"},
        "rules": {"type": "array", "items": {"$ref": "#/$defs/rule"}},
    },
    "$defs": {"rule": RULE_SCHEMA},
}
