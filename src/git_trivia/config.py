"""Settings loading for git-trivia.

Settings sources are merged in priority order:
    1. Defaults (defined in TriviaSettings)
    2. Global settings (~/.git-trivia.toml)
    3. Project settings (./git-trivia.toml)
    4. Explicit settings file
    5. Environment variables (TRIVIA_* prefix)
    6. CLI overrides (passed as kwargs)

These are tool settings. Who-is-who lives in the contributor document,
see ``git_trivia.configuration``.

Example:
    >>> settings = load_settings(output_format="json")
    >>> settings.output_format
    'json'
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, get_args, get_type_hints

from .configuration import DEFAULT_FILENAME
from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["console", "json"]

_ENV_PREFIX = "TRIVIA_"


@dataclass(frozen=True)
class TriviaSettings:
    """Tool settings.

    Attributes:
        config_filename: Name of the contributor document inside the git directory
        output_format: Renderer for ownership reports
        show_progress: Show a progress bar while blaming
        max_commits: Newest commits read by init (0 = whole history); update always
            reads every commit since the checkpoint
        git_timeout_seconds: Timeout for each git subprocess
        verbosity: Logging verbosity level
    """

    config_filename: str = DEFAULT_FILENAME
    output_format: OutputFormat = "console"
    show_progress: bool = True
    max_commits: int = 0
    git_timeout_seconds: int = 120
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        if not self.config_filename or "/" in self.config_filename:
            raise InvalidConfigError(
                "config_filename", self.config_filename, "must be a plain file name"
            )
        if self.output_format not in get_args(OutputFormat):
            raise InvalidConfigError(
                "output_format", self.output_format, "must be 'console' or 'json'"
            )
        if self.verbosity not in get_args(Verbosity):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "must be 'quiet', 'normal' or 'verbose'"
            )
        if self.max_commits < 0:
            raise InvalidConfigError("max_commits", self.max_commits, "must be non-negative")
        if self.git_timeout_seconds < 1:
            raise InvalidConfigError(
                "git_timeout_seconds", self.git_timeout_seconds, "must be at least 1"
            )


def load_settings(config_file: Path | None = None, **overrides: Any) -> TriviaSettings:
    """Load settings with auto-discovery and merging.

    Args:
        config_file: Optional explicit settings file
        **overrides: Direct overrides (typically from CLI flags). ``verbose``
            and ``quiet`` booleans are folded into ``verbosity``.

    Returns:
        Validated TriviaSettings instance

    Raises:
        ConfigurationError: If a settings file is unreadable or holds unknown keys
        InvalidConfigError: If a value is out of range
    """
    merged: dict[str, Any] = {}

    global_file = Path.home() / ".git-trivia.toml"
    if global_file.exists():
        merged.update(_load_toml_file(global_file))

    project_file = Path.cwd() / "git-trivia.toml"
    if project_file.exists():
        merged.update(_load_toml_file(project_file))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Settings file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return TriviaSettings(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid settings: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Read TRIVIA_<FIELD> environment variables, e.g. TRIVIA_OUTPUT_FORMAT=json."""
    type_hints = get_type_hints(TriviaSettings)
    result: dict[str, Any] = {}

    for f in fields(TriviaSettings):
        env_key = f"{_ENV_PREFIX}{f.name.upper()}"
        value = os.environ.get(env_key)
        if value is None:
            continue
        try:
            result[f.name] = _parse_env_value(value, type_hints[f.name])
        except ValueError as e:
            raise InvalidConfigError(env_key, value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")
    if type_hint is int:
        return int(value)
    return value


def _load_toml_file(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid settings file '{path}': {e}")
