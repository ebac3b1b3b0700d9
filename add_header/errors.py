from pathlib import Path


class HeaderAppError(Exception):
    """Base user-facing application error."""


class HeaderFileError(HeaderAppError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class ConfigurationError(HeaderAppError):
    """Header rule configuration cannot be loaded or resolved."""


class MissingConfigFileError(HeaderFileError, ConfigurationError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing required config file")


class InvalidJsonFormatError(HeaderFileError, ConfigurationError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid JSON format ({detail})")


class InvalidConfigSchemaError(HeaderFileError, ConfigurationError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class UnknownDetectionError(HeaderFileError, ConfigurationError):
    def __init__(self, path: Path, kind: str) -> None:
        self.kind = kind
        super().__init__(path=path, message=f"Unknown detection type '{kind}'")


class MissingTemplateError(ConfigurationError):
    def __init__(self, rel_path: str) -> None:
        self.rel_path = rel_path
        super().__init__(f"No header template resolves for: {rel_path}")


class InvalidPatternError(ConfigurationError):
    def __init__(self, pattern: str, detail: str) -> None:
        self.pattern = pattern
        self.detail = detail
        super().__init__(f"Invalid detection regex ({detail}): {pattern}")


class MissingWorkingCopyError(HeaderFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Working copy not found")


class GitCommandError(HeaderAppError):
    def __init__(self, args: list[str], returncode: int, stderr: str) -> None:
        self.args_list = args
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or f"exit status {returncode}"
        super().__init__(f"git {' '.join(args)} failed ({detail})")
