"""Record types and the protocol every version-control backend implements."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Protocol, Sequence

from ..people.models import Authorship


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class CommitRecord:
    id: str
    author: Authorship


@dataclass(frozen=True)
class TreeRecord:
    """One entry of a tree object, as stored (not recursive)."""

    name: str
    kind: EntryKind
    object_id: str


@dataclass(frozen=True)
class BlobInfo:
    object_id: str
    size: int
    is_binary: bool


@dataclass(frozen=True)
class BlameHunk:
    """A contiguous run of lines last touched by one commit."""

    author: Authorship
    lines: int
    commit_id: str = ""


class VersionControlBackend(Protocol):
    """Everything the ownership pass needs from a repository."""

    def commits(
        self, newest: str = "HEAD", oldest: Optional[str] = None, max_count: int = 0
    ) -> Iterator[CommitRecord]:
        """Commits reachable from ``newest`` but not from ``oldest``, newest first."""
        ...

    def commit_tree(self, revision: str) -> str: ...

    def tree_entries(self, tree_id: str) -> Sequence[TreeRecord]: ...

    def blob(self, object_id: str) -> BlobInfo: ...

    def blame(
        self, path: str, newest: str, oldest: Optional[str] = None
    ) -> Iterator[BlameHunk]:
        """Hunks of ``path`` as of ``newest``, leaving out lines already present at ``oldest``."""
        ...
