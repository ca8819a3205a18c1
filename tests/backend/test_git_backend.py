"""Tests for GitBackend against real repositories."""

import pytest

from git_trivia.backend.git import GitBackend
from git_trivia.backend.protocols import EntryKind
from git_trivia.exceptions import GitCommandError, NotARepositoryError, RevisionNotFoundError
from git_trivia.tree_walker import TreeWalker

JANE = ("Jane Doe", "jane@x.com")
JOHN = ("John Doe", "john@x.com")


@pytest.fixture
def history(git_repo):
    """Two commits: Jane creates files, John appends a line."""
    first = git_repo.commit(
        {"hello.txt": "one\ntwo\n", "src/main.c": "int main;\n", "logo.png": b"\x89PNG\0\0data"},
        author=JANE,
        message="initial",
    )
    second = git_repo.commit({"hello.txt": "one\ntwo\nthree\n"}, author=JOHN, message="append")
    return git_repo, first, second


class TestRepository:
    """Test repository detection and revision lookup."""

    def test_detects_repository(self, git_repo):
        backend = GitBackend(git_repo.path)
        assert backend.is_repository()
        backend.ensure_repository()
        assert backend.git_dir() == (git_repo.path / ".git").resolve()

    def test_not_a_repository(self, tmp_path, monkeypatch):
        plain = tmp_path / "plain"
        plain.mkdir()
        monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))

        backend = GitBackend(plain)

        assert not backend.is_repository()
        with pytest.raises(NotARepositoryError):
            backend.ensure_repository()

    def test_resolve(self, history):
        repo, _, second = history
        assert GitBackend(repo.path).resolve("HEAD") == second

    def test_resolve_unknown_revision(self, history):
        repo, _, _ = history
        with pytest.raises(RevisionNotFoundError) as excinfo:
            GitBackend(repo.path).resolve("no-such-branch")
        assert excinfo.value.revision == "no-such-branch"

    def test_failing_command_raises(self, history):
        repo, _, _ = history
        with pytest.raises(GitCommandError):
            GitBackend(repo.path).tree_entries("0" * 40)


class TestCommits:
    """Test commit history listing."""

    def test_newest_first(self, history):
        repo, first, second = history

        commits = list(GitBackend(repo.path).commits())

        assert [c.id for c in commits] == [second, first]
        assert commits[0].author.name == "John Doe"
        assert commits[0].author.alias == "john@x.com"
        assert commits[1].author.alias == "jane@x.com"

    def test_stops_at_oldest(self, history):
        repo, first, second = history
        assert [c.id for c in GitBackend(repo.path).commits("HEAD", oldest=first)] == [second]

    def test_max_count(self, history):
        repo, _, second = history
        assert [c.id for c in GitBackend(repo.path).commits(max_count=1)] == [second]

    def test_mailmap_matches_blame(self, git_repo):
        """Commit authors and blame authors go through the same .mailmap."""
        git_repo.commit(
            {".mailmap": "Jane Doe <jane@new.com> <jane@old.com>\n", "a.txt": "x\n"},
            author=("jane", "jane@old.com"),
        )
        backend = GitBackend(git_repo.path)

        [commit] = backend.commits()
        [hunk] = backend.blame("a.txt", "HEAD")

        assert commit.author == hunk.author
        assert commit.author.alias == "jane@new.com"
        assert commit.author.name == "Jane Doe"


class TestTrees:
    """Test tree listing and blob inspection."""

    def test_walk_real_tree(self, history):
        repo, _, _ = history
        backend = GitBackend(repo.path)

        entries = list(TreeWalker(backend, backend.commit_tree("HEAD")))

        assert [(e.kind, e.path) for e in entries] == [
            (EntryKind.FILE, "hello.txt"),
            (EntryKind.FILE, "logo.png"),
            (EntryKind.DIRECTORY, "src"),
            (EntryKind.FILE, "src/main.c"),
        ]

    def test_binary_detection(self, history):
        repo, _, _ = history
        backend = GitBackend(repo.path)
        by_name = {r.name: r for r in backend.tree_entries(backend.commit_tree("HEAD"))}

        text = backend.blob(by_name["hello.txt"].object_id)
        image = backend.blob(by_name["logo.png"].object_id)

        assert not text.is_binary
        assert text.size == len("one\ntwo\nthree\n")
        assert image.is_binary

    def test_commit_tree_unknown_revision(self, history):
        repo, _, _ = history
        with pytest.raises(RevisionNotFoundError):
            GitBackend(repo.path).commit_tree("deadbeef" * 5)


class TestBlame:
    """Test blame hunks."""

    def test_full_history(self, history):
        repo, first, second = history

        hunks = list(GitBackend(repo.path).blame("hello.txt", "HEAD"))

        assert [(h.author.alias, h.lines) for h in hunks] == [("jane@x.com", 2), ("john@x.com", 1)]
        assert [h.commit_id for h in hunks] == [first, second]

    def test_range_drops_boundary_lines(self, history):
        """Lines that already existed at the lower end are not attributed."""
        repo, first, _ = history

        hunks = list(GitBackend(repo.path).blame("hello.txt", "HEAD", oldest=first))

        assert [(h.author.alias, h.lines) for h in hunks] == [("john@x.com", 1)]

    def test_nested_path(self, history):
        repo, _, _ = history

        [hunk] = GitBackend(repo.path).blame("src/main.c", "HEAD")

        assert hunk.author.name == "Jane Doe"
        assert hunk.lines == 1
