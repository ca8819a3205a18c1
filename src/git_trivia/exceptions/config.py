"""Configuration exceptions: settings and the contributor document."""

from pathlib import Path
from typing import Any

from .base import GitTriviaError


class ConfigurationError(GitTriviaError):
    """Base class for configuration-related errors."""

    pass


class ConfigNotFoundError(ConfigurationError):
    """Raised when the contributor document does not exist."""

    def __init__(self, path: Path):
        super().__init__(
            f"Contributor file not found: {path}",
            details={"path": str(path), "hint": "run 'git-trivia init' first"},
        )
        self.path = path


class ConfigExistsError(ConfigurationError):
    """Raised when init would overwrite an existing contributor document."""

    def __init__(self, path: Path):
        super().__init__(
            f"Contributor file already exists: {path}",
            details={"path": str(path), "hint": "use --force to overwrite"},
        )
        self.path = path


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value!r}",
            details={"key": key, "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
