"""Repository access through the git executable."""

import re
import subprocess
from pathlib import Path
from typing import Iterator, Optional

from ..exceptions import GitCommandError, NotARepositoryError, RevisionNotFoundError
from ..logging_config import get_logger
from ..people.models import Authorship
from .protocols import BlameHunk, BlobInfo, CommitRecord, EntryKind, TreeRecord

logger = get_logger(__name__)

# git treats a blob as binary when a NUL byte shows up in its first 8000 bytes
_BINARY_SNIFF_BYTES = 8000

_TREE_KINDS = {"blob": EntryKind.FILE, "tree": EntryKind.DIRECTORY}

# "<oid> <orig-line> <final-line> <group-size>" opens a new hunk in porcelain output;
# lines without the group size continue the previous one.
_BLAME_HEADER_RE = re.compile(r"^((?:[0-9a-f]{64}|[0-9a-f]{40})) \d+ \d+(?: (\d+))?$")


class GitBackend:
    """Run git subcommands against one repository.

    Every method is a blocking subprocess call. Non-zero exits and timeouts
    raise ``GitCommandError``; nothing is retried.
    """

    def __init__(self, repo_path: str, timeout: int = 120):
        self.repo_path = str(Path(repo_path).resolve())
        self.timeout = timeout

    def _run(self, *args: str) -> str:
        return self._run_bytes(*args).decode("utf-8", errors="replace")

    def _run_bytes(self, *args: str) -> bytes:
        cmd = ["git", "-C", self.repo_path, *args]
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, capture_output=True, timeout=self.timeout)
        except FileNotFoundError as e:
            raise GitCommandError(cmd, f"git executable not found: {e}") from e
        except subprocess.TimeoutExpired as e:
            raise GitCommandError(cmd, f"timed out after {self.timeout}s") from e
        if result.returncode != 0:
            raise GitCommandError(cmd, result.stderr.decode("utf-8", errors="replace"))
        return result.stdout

    def is_repository(self) -> bool:
        try:
            self._run("rev-parse", "--git-dir")
        except GitCommandError:
            return False
        return True

    def ensure_repository(self) -> None:
        if not self.is_repository():
            raise NotARepositoryError(Path(self.repo_path))

    def git_dir(self) -> Path:
        """Absolute path of the repository's .git directory."""
        return Path(self._run("rev-parse", "--absolute-git-dir").strip())

    def resolve(self, revision: str) -> str:
        """Full commit id for ``revision``."""
        try:
            return self._run("rev-parse", "--verify", "--quiet", f"{revision}^{{commit}}").strip()
        except GitCommandError as e:
            raise RevisionNotFoundError(revision) from e

    def commits(
        self, newest: str = "HEAD", oldest: Optional[str] = None, max_count: int = 0
    ) -> Iterator[CommitRecord]:
        revision_range = f"{oldest}..{newest}" if oldest else newest
        # %aN/%aE apply .mailmap, as blame does for author/author-mail
        args = ["log", "--format=%H%x00%aN%x00%aE", revision_range]
        if max_count > 0:
            args.insert(1, f"-n{max_count}")
        yield from parse_log(self._run(*args))

    def commit_tree(self, revision: str) -> str:
        try:
            return self._run("rev-parse", "--verify", "--quiet", f"{revision}^{{tree}}").strip()
        except GitCommandError as e:
            raise RevisionNotFoundError(revision) from e

    def tree_entries(self, tree_id: str) -> list[TreeRecord]:
        return parse_ls_tree(self._run("ls-tree", "-z", tree_id))

    def blob(self, object_id: str) -> BlobInfo:
        content = self._run_bytes("cat-file", "blob", object_id)
        return BlobInfo(
            object_id=object_id,
            size=len(content),
            is_binary=b"\0" in content[:_BINARY_SNIFF_BYTES],
        )

    def blame(
        self, path: str, newest: str, oldest: Optional[str] = None
    ) -> Iterator[BlameHunk]:
        revision = f"{oldest}..{newest}" if oldest else newest
        output = self._run("blame", "--porcelain", revision, "--", path)
        yield from parse_blame_porcelain(output, skip_boundary=oldest is not None)


def parse_log(raw: str) -> Iterator[CommitRecord]:
    """Parse ``git log --format=%H%x00%aN%x00%aE`` output."""
    for line in raw.splitlines():
        if not line.strip():
            continue
        parts = line.split("\0")
        if len(parts) != 3:
            logger.warning("Skipping malformed log line: %r", line)
            continue
        sha, name, email = parts
        yield CommitRecord(id=sha, author=Authorship(name=name or None, alias=email or None))


def parse_ls_tree(raw: str) -> list[TreeRecord]:
    """Parse ``git ls-tree -z`` output, keeping blobs and trees in stored order."""
    records = []
    for item in raw.split("\0"):
        if not item:
            continue
        meta, _, name = item.partition("\t")
        fields = meta.split()
        if len(fields) != 3:
            logger.warning("Skipping malformed tree entry: %r", item)
            continue
        _mode, object_type, object_id = fields
        kind = _TREE_KINDS.get(object_type)
        if kind is None:
            # gitlinks (submodules) point at commits in another repository
            logger.debug("Skipping %s entry %s", object_type, name)
            continue
        records.append(TreeRecord(name=name, kind=kind, object_id=object_id))
    return records


def parse_blame_porcelain(raw: str, skip_boundary: bool = False) -> list[BlameHunk]:
    """Turn ``git blame --porcelain`` output into hunks.

    Commit metadata (``author``, ``author-mail``, ``boundary``) is printed
    only the first time a commit appears, so it is remembered per sha.

    Args:
        raw: Porcelain output.
        skip_boundary: Drop hunks from boundary commits, i.e. lines that
            already existed at the lower end of a revision range.
    """
    authors: dict[str, list[Optional[str]]] = {}
    boundary: set[str] = set()
    groups: list[tuple[str, int]] = []
    current: Optional[str] = None

    for line in raw.split("\n"):
        if line.startswith("\t"):
            continue
        match = _BLAME_HEADER_RE.match(line)
        if match:
            current = match.group(1)
            authors.setdefault(current, [None, None])
            if match.group(2) is not None:
                groups.append((current, int(match.group(2))))
            continue
        if current is None:
            continue
        key, _, value = line.partition(" ")
        if key == "author":
            authors[current][0] = value
        elif key == "author-mail":
            authors[current][1] = value.strip().removeprefix("<").removesuffix(">")
        elif key == "boundary":
            boundary.add(current)

    hunks = []
    for sha, size in groups:
        if skip_boundary and sha in boundary:
            continue
        name, alias = authors[sha]
        author = Authorship(name=name or None, alias=alias or None)
        hunks.append(BlameHunk(author=author, lines=size, commit_id=sha))
    return hunks
