"""Load header rule configuration from a repository root."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from add_header.constants import RULES_FILENAME
from add_header.errors import InvalidJsonFormatError, MissingConfigFileError
from add_header.rules.defaults import DEFAULT_RULE_CONFIG
from add_header.rules.models import HeaderRuleConfig
from add_header.rules.parser import parse_config
from add_header.utils import read_json, write_json


class RuleConfigRepository:
    def __init__(self, root: Path, config_path: Optional[Path] = None) -> None:
        self._root = root
        self._config_path = config_path or root / RULES_FILENAME

    @property
    def config_path(self) -> Path:
        return self._config_path

    def load_payload(self) -> Any:
        if not self._config_path.exists():
            raise MissingConfigFileError(self._config_path)
        try:
            return read_json(self._config_path)
        except json.JSONDecodeError as exc:
            raise InvalidJsonFormatError(self._config_path, str(exc)) from exc

    def load(self) -> HeaderRuleConfig:
        return parse_config(self.load_payload(), self._config_path)

    def write_default(self, force: bool = False) -> bool:
        if self._config_path.exists() and not force:
            return False
        write_json(self._config_path, DEFAULT_RULE_CONFIG)
        return True


class RuleConfigCache:
    """Per-process cache of parsed configs, keyed by resolved config path."""

    def __init__(self) -> None:
        self._entries: dict[Path, HeaderRuleConfig] = {}

    def load(self, repository: RuleConfigRepository) -> HeaderRuleConfig:
        key = repository.config_path.resolve()
        cached = self._entries.get(key)
        if cached is None:
            cached = repository.load()
            self._entries[key] = cached
        return cached

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
