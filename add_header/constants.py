from typing import Final


IGNORE_FILENAME: Final[str] = ".addheaderignore"
LEGACY_IGNORE_FILENAME: Final[str] = ".addheader"
IGNORE_FILENAMES: Final[tuple[str, ...]] = (IGNORE_FILENAME, LEGACY_IGNORE_FILENAME)

RULES_FILENAME: Final[str] = ".addheaderrc.json"

PATH_PLACEHOLDER: Final[str] = "{path}"
HEADER_PLACEHOLDER: Final[str] = "{header}"
SHEBANG_PREFIX: Final[str] = "#!"

DEFAULT_WITHIN_FIRST_LINES: Final[int] = 2

DEFAULT_BASE_REF: Final[str] = "origin/HEAD~1"
DEFAULT_HEAD_REF: Final[str] = "HEAD"
CHANGED_DIFF_FILTER: Final[str] = "ACMRT"

EXCLUDED_DIR_PARTS: Final[tuple[str, ...]] = ("node_modules",)
EXCLUDED_PREFIXES: Final[tuple[str, ...]] = (".git/",)
EXCLUDED_SUFFIXES: Final[tuple[str, ...]] = (
    ".png",
    ".jpg",
    ".jpeg",
    ".svg",
    ".ico",
    ".gif",
    ".pdf",
    ".map",
    ".lock",
)

OPENROUTER_BASE_URL: Final[str] = "https://openrouter.ai/api/v1"
OPENROUTER_MODEL: Final[str] = "deepseek/deepseek-coder"
OPENROUTER_TIMEOUT_S: Final[float] = 60.0
OPENROUTER_REFERER: Final[str] = "https://github.com/"
OPENROUTER_TITLE: Final[str] = "add-header-pr"

TRUTHY_VALUES: Final[tuple[str, ...]] = ("1", "true", "yes", "on")
