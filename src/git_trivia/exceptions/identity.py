"""Identity exceptions: alias conflicts, unresolved authors, empty history."""

from .base import GitTriviaError


class IdentityError(GitTriviaError):
    """Base class for errors raised by the people registry and its builder."""

    pass


class ConflictingAliasError(IdentityError):
    """Raised when a new person claims an alias that another person owns."""

    def __init__(self, existing_owner: str, new_owner: str, alias: str):
        super().__init__(
            f"{new_owner!r} cannot use alias {alias!r}: it already belongs to {existing_owner!r}",
            details={"alias": alias, "existing": existing_owner, "new": new_owner},
        )
        self.existing_owner = existing_owner
        self.new_owner = new_owner
        self.alias = alias


class UnknownAliasError(IdentityError):
    """Raised when an alias cannot be resolved to any known person."""

    def __init__(self, alias: str):
        super().__init__(f"Unknown author alias: {alias!r}", details={"alias": alias})
        self.alias = alias


class DuplicatePersonError(IdentityError):
    """Raised when two people with the same display name are registered."""

    def __init__(self, name: str):
        super().__init__(f"Person already registered: {name!r}", details={"name": name})
        self.name = name


class NoCommitsError(IdentityError):
    """Raised when a registry is finalized without a checkpoint revision."""

    def __init__(self) -> None:
        super().__init__("No commits were processed, so there is no checkpoint revision")
