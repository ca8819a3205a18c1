"""Version-control backends."""

from .git import GitBackend
from .protocols import (
    BlameHunk,
    BlobInfo,
    CommitRecord,
    EntryKind,
    TreeRecord,
    VersionControlBackend,
)

__all__ = [
    "GitBackend",
    "VersionControlBackend",
    "BlameHunk",
    "BlobInfo",
    "CommitRecord",
    "EntryKind",
    "TreeRecord",
]
