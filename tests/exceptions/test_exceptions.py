"""Tests for the git-trivia exception hierarchy."""

from pathlib import Path

import pytest

from git_trivia.exceptions import (
    BackendError,
    ConfigExistsError,
    ConfigNotFoundError,
    ConfigurationError,
    ConflictingAliasError,
    DuplicatePersonError,
    GitCommandError,
    GitTriviaError,
    IdentityError,
    InvalidConfigError,
    NoCommitsError,
    NotARepositoryError,
    RevisionNotFoundError,
    UnknownAliasError,
)


class TestHierarchy:
    """Test that every error is catchable by its family and the root."""

    @pytest.mark.parametrize(
        "error, family",
        [
            (ConflictingAliasError("A", "B", "a@x"), IdentityError),
            (UnknownAliasError("a@x"), IdentityError),
            (DuplicatePersonError("A"), IdentityError),
            (NoCommitsError(), IdentityError),
            (GitCommandError(["git", "log"], "boom"), BackendError),
            (NotARepositoryError(Path("/tmp/x")), BackendError),
            (RevisionNotFoundError("v9"), BackendError),
            (ConfigNotFoundError(Path("trivia.yml")), ConfigurationError),
            (ConfigExistsError(Path("trivia.yml")), ConfigurationError),
            (InvalidConfigError("k", 1, "bad"), ConfigurationError),
        ],
    )
    def test_families(self, error, family):
        assert isinstance(error, family)
        assert isinstance(error, GitTriviaError)


class TestMessages:
    """Test messages and details."""

    def test_plain_message(self):
        assert str(GitTriviaError("something broke")) == "something broke"

    def test_details_appended(self):
        error = GitTriviaError("something broke", details={"file": "a.txt", "line": "3"})
        assert str(error) == "something broke (file=a.txt, line=3)"

    def test_conflicting_alias(self):
        error = ConflictingAliasError(existing_owner="Jane", new_owner="John", alias="j@x")

        assert "j@x" in str(error)
        assert "Jane" in str(error)
        assert error.details == {"alias": "j@x", "existing": "Jane", "new": "John"}

    def test_unknown_alias_keeps_alias(self):
        assert UnknownAliasError("who@x").alias == "who@x"

    def test_git_command_failure(self):
        error = GitCommandError(["git", "blame", "x"], "fatal: no such path\n")

        assert error.command == ["git", "blame", "x"]
        assert error.details["reason"] == "fatal: no such path"
        assert "git blame x" in str(error)

    def test_git_command_empty_reason(self):
        assert GitCommandError(["git"], "").details["reason"] == "unknown"

    def test_hints(self):
        assert "git-trivia init" in str(ConfigNotFoundError(Path("trivia.yml")))
        assert "--force" in str(ConfigExistsError(Path("trivia.yml")))
