"""Version-control backend exceptions."""

from pathlib import Path
from typing import Sequence

from .base import GitTriviaError


class BackendError(GitTriviaError):
    """Base class for errors raised by a version-control backend."""

    pass


class GitCommandError(BackendError):
    """Raised when a git subprocess exits non-zero or times out."""

    def __init__(self, command: Sequence[str], reason: str):
        super().__init__(
            f"git command failed: {' '.join(command)}",
            details={"reason": reason.strip() or "unknown"},
        )
        self.command = list(command)
        self.reason = reason


class NotARepositoryError(BackendError):
    """Raised when the given path is not inside a git repository."""

    def __init__(self, path: Path):
        super().__init__(f"Not a git repository: {path}", details={"path": str(path)})
        self.path = path


class RevisionNotFoundError(BackendError):
    """Raised when a revision does not name a commit."""

    def __init__(self, revision: str):
        super().__init__(f"Unknown revision: {revision}", details={"revision": revision})
        self.revision = revision
