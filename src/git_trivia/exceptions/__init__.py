"""Exception hierarchy for git-trivia."""

from .backend import (
    BackendError,
    GitCommandError,
    NotARepositoryError,
    RevisionNotFoundError,
)
from .base import GitTriviaError
from .config import (
    ConfigExistsError,
    ConfigNotFoundError,
    ConfigurationError,
    InvalidConfigError,
)
from .identity import (
    ConflictingAliasError,
    DuplicatePersonError,
    IdentityError,
    NoCommitsError,
    UnknownAliasError,
)

__all__ = [
    "GitTriviaError",
    "IdentityError",
    "ConflictingAliasError",
    "UnknownAliasError",
    "DuplicatePersonError",
    "NoCommitsError",
    "BackendError",
    "GitCommandError",
    "NotARepositoryError",
    "RevisionNotFoundError",
    "ConfigurationError",
    "ConfigNotFoundError",
    "ConfigExistsError",
    "InvalidConfigError",
]
