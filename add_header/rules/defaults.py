"""Starter configuration written by ``add-header init``."""

from typing import Any, Final


DEFAULT_RULE_CONFIG: Final[dict[str, Any]] = {
    "default": {"action": "skip"},
    "rules": [
        {"extensions": [".ts", ".tsx", ".js", ".jsx"], "template": "// {path}\n"},
        {"extensions": [".yaml", ".yml"], "template": "# {path}\n"},
        {
            "extensions": [".md"],
            "template": "<!-- {path} -->\n\n",
            "detect": [{"type": "startsWith", "value": "<!-- {path} -->"}],
        },
        {
            "extensions": [".mdc"],
            "template": [
                "---",
                "description: |",
                "  `// {path}`",
                "",
                "globs: ['*']",
                "alwaysApply: true",
                "---",
                "",
                "",
            ],
            "detect": [
                {"type": "startsWith", "value": "---"},
                {"type": "includes", "value": "`// {path}`"},
            ],
        },
        {"filenames": ["Makefile"], "template": "# {path}\n"},
        {
            "extensions": [".sh", ".bash", ".zsh"],
            "template": "# {path}\n",
            "insert": "afterShebang",
            "detect": [{"type": "withinFirstLines", "value": "# {path}", "lines": 2}],
        },
    ],
}
