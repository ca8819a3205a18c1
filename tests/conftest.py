"""Shared test fixtures for git-trivia tests."""

import os
import shutil
import subprocess
from pathlib import Path

import pytest

from git_trivia.backend.protocols import (
    BlameHunk,
    BlobInfo,
    CommitRecord,
    EntryKind,
    TreeRecord,
)
from git_trivia.people.models import Authorship, Person
from git_trivia.people.registry import IdentityRegistry


class FakeBackend:
    """In-memory backend built from a nested dict.

    Keys are entry names in stored order. A dict value is a directory, a
    list of ``(alias, lines)`` pairs is a text file with those blame hunks,
    and a ``bytes`` value is a binary file.
    """

    def __init__(self, tree, commits=()):
        self._trees = {}
        self._blobs = {}
        self._blames = {}
        self._commits = list(commits)
        self.blame_calls = []
        self.blob_calls = []
        self.root = self._add_tree(tree, "")

    def _add_tree(self, spec, prefix):
        records = []
        for name, value in spec.items():
            path = f"{prefix}{name}"
            if isinstance(value, dict):
                object_id = self._add_tree(value, f"{path}/")
                records.append(TreeRecord(name, EntryKind.DIRECTORY, object_id))
            else:
                object_id = f"blob:{path}"
                if isinstance(value, bytes):
                    self._blobs[object_id] = BlobInfo(object_id, len(value), True)
                else:
                    self._blobs[object_id] = BlobInfo(object_id, 0, False)
                    self._blames[path] = list(value)
                records.append(TreeRecord(name, EntryKind.FILE, object_id))
        tree_id = f"tree:{prefix or '/'}"
        self._trees[tree_id] = records
        return tree_id

    def commits(self, newest="HEAD", oldest=None, max_count=0):
        for commit in self._commits:
            if commit.id == oldest:
                return
            yield commit

    def commit_tree(self, revision):
        return self.root

    def tree_entries(self, tree_id):
        return self._trees[tree_id]

    def blob(self, object_id):
        self.blob_calls.append(object_id)
        return self._blobs[object_id]

    def blame(self, path, newest, oldest=None):
        self.blame_calls.append((path, newest, oldest))
        for alias, lines in self._blames[path]:
            yield BlameHunk(author=Authorship(name=None, alias=alias), lines=lines)


@pytest.fixture
def make_backend():
    """Factory for in-memory backends: ``make_backend({"a.txt": [("a@x", 3)]})``."""
    return FakeBackend


@pytest.fixture
def commit_records():
    """Factory turning ``(sha, name, email)`` tuples into commit records."""

    def _make(*data):
        return [CommitRecord(id=sha, author=Authorship(name, email)) for sha, name, email in data]

    return _make


@pytest.fixture
def jane():
    return Person("Jane Doe", ("jane@x.com", "jane2@x.com"), team="Platform")


@pytest.fixture
def john():
    return Person("John Doe", ("john@x.com",))


@pytest.fixture
def registry(jane, john):
    """Jane (team Platform, two aliases) and John (no team)."""
    return IdentityRegistry([jane, john], checkpoint_revision="c" * 40)


# ---------------------------------------------------------------------------
# Real git repositories
# ---------------------------------------------------------------------------


class GitRepo:
    """Throwaway repository with deterministic authorship."""

    def __init__(self, path: Path):
        self.path = path
        self.path.mkdir(parents=True, exist_ok=True)
        self.git("init", "-q")

    def git(self, *args, author=("Test User", "test@example.com")):
        name, email = author
        env = {
            **os.environ,
            "GIT_AUTHOR_NAME": name,
            "GIT_AUTHOR_EMAIL": email,
            "GIT_COMMITTER_NAME": name,
            "GIT_COMMITTER_EMAIL": email,
            "GIT_CONFIG_NOSYSTEM": "1",
        }
        result = subprocess.run(
            ["git", "-c", "commit.gpgsign=false", "-C", str(self.path), *args],
            capture_output=True,
            text=True,
            env=env,
            check=True,
        )
        return result.stdout.strip()

    def commit(self, files, author=("Test User", "test@example.com"), message="change"):
        """Write ``files`` (path -> str or bytes) and commit them as ``author``."""
        for rel, content in files.items():
            target = self.path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_text(content)
        self.git("add", "-A")
        self.git("commit", "-q", "-m", message, author=author)
        return self.git("rev-parse", "HEAD")


@pytest.fixture
def git_repo(tmp_path):
    """Empty git repository; skipped when git is not installed."""
    if shutil.which("git") is None:
        pytest.skip("git executable not available")
    return GitRepo(tmp_path / "repo")
