"""Pre-order traversal of a repository tree without recursion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from .backend.protocols import BlobInfo, EntryKind, TreeRecord, VersionControlBackend


@dataclass(frozen=True)
class Entry:
    """A file or directory reached by the walker.

    ``path`` is relative to the walked tree and always uses ``/``.
    """

    object_id: str
    path: str
    kind: EntryKind

    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def blob(self, backend: VersionControlBackend) -> Optional[BlobInfo]:
        """Fetch the blob behind a file entry. Directories have none."""
        if self.kind is not EntryKind.FILE:
            return None
        return backend.blob(self.object_id)


class TreeWalker:
    """Iterate every entry of a tree, a directory before its children.

    Entries come out in the order the backend lists them at each level.
    State lives on an explicit stack of ``[entries, next_index]`` frames
    with a parallel stack of path segments, so depth is bounded by memory
    rather than by the interpreter's recursion limit.

    A walker is single use; build a new one to walk the same tree again.

    Example:
        >>> for entry in TreeWalker(backend, backend.commit_tree("HEAD")):
        ...     print(entry.kind.value, entry.path)
    """

    def __init__(self, backend: VersionControlBackend, tree_id: str):
        self._backend = backend
        self._frames: list[list] = [[backend.tree_entries(tree_id), 0]]
        self._segments: list[str] = []

    def __iter__(self) -> Iterator[Entry]:
        return self

    def __next__(self) -> Entry:
        while self._frames:
            frame = self._frames[-1]
            entries: Sequence[TreeRecord] = frame[0]
            index: int = frame[1]

            if index >= len(entries):
                self._frames.pop()
                if self._segments:
                    self._segments.pop()
                continue

            frame[1] = index + 1
            record = entries[index]
            entry = Entry(
                object_id=record.object_id,
                path="/".join([*self._segments, record.name]),
                kind=record.kind,
            )

            if record.kind is EntryKind.DIRECTORY:
                self._segments.append(record.name)
                self._frames.append([self._backend.tree_entries(record.object_id), 0])

            return entry

        raise StopIteration
