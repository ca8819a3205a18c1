"""Build or extend an identity registry from authorship history."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..backend.protocols import CommitRecord
from ..exceptions import NoCommitsError
from ..logging_config import get_logger
from .models import Authorship, Person
from .registry import IdentityRegistry

logger = get_logger(__name__)


@dataclass
class _Draft:
    aliases: list[str] = field(default_factory=list)
    team: Optional[str] = None


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class RegistryBuilder:
    """Fold authorship records into a registry.

    Named records are grouped by display name. Aliases that only ever
    arrived without a name become people of their own, named after the
    alias, unless a named person already owns them.

    When ``existing`` is given its people, teams and aliases are kept as
    they are; new records only add aliases and people.

    Usage:
        builder = RegistryBuilder(existing=registry)
        builder.add_commits(backend.commits("HEAD", oldest=registry.checkpoint_revision))
        updated = builder.finalize()
    """

    def __init__(self, existing: Optional[IdentityRegistry] = None):
        self._existing: list[Person] = list(existing) if existing is not None else []
        self._seen: set[str] = set()
        self._named: list[tuple[str, str]] = []
        self._anonymous: dict[str, None] = {}
        self._checkpoint: Optional[str] = None

        for person in self._existing:
            self._seen.update(person.aliases)

    @property
    def checkpoint(self) -> Optional[str]:
        return self._checkpoint

    def add_authorship(self, authorship: Authorship) -> None:
        alias = _clean(authorship.alias)
        if alias is None:
            return
        name = _clean(authorship.name)
        if name is None:
            self._anonymous[alias] = None
            return
        if alias in self._seen:
            return
        self._seen.add(alias)
        self._named.append((name, alias))

    def add_commits(self, commits: Iterable[CommitRecord]) -> int:
        """Fold the authors of ``commits`` (newest first) into the builder.

        The first commit seen becomes the checkpoint revision.

        Returns:
            Number of commits consumed.
        """
        count = 0
        for commit in commits:
            if self._checkpoint is None:
                self._checkpoint = commit.id
            self.add_authorship(commit.author)
            count += 1
        logger.debug("Consumed %d commits (%d distinct named aliases)", count, len(self._named))
        return count

    def finalize(self, checkpoint_revision: Optional[str] = None) -> IdentityRegistry:
        """Produce the registry, people sorted by display name.

        Args:
            checkpoint_revision: Revision the registry is current as of.
                Defaults to the newest commit passed to ``add_commits``.

        Raises:
            NoCommitsError: No checkpoint was given and no commits were seen.
        """
        checkpoint = checkpoint_revision or self._checkpoint
        if checkpoint is None:
            raise NoCommitsError()

        drafts: dict[str, _Draft] = {}
        owned: set[str] = set()
        for person in self._existing:
            drafts[person.name] = _Draft(list(person.aliases), person.team)
            owned.update(person.aliases)

        for name, alias in self._named:
            if alias in owned:
                continue
            drafts.setdefault(name, _Draft()).aliases.append(alias)
            owned.add(alias)

        for alias in self._anonymous:
            if alias in owned:
                continue
            drafts.setdefault(alias, _Draft()).aliases.append(alias)
            owned.add(alias)

        registry = IdentityRegistry(checkpoint_revision=checkpoint)
        for name in sorted(drafts):
            draft = drafts[name]
            registry.add(Person(name, tuple(draft.aliases), draft.team))

        logger.info(
            "Registry has %d people (%d new) as of %s",
            len(registry),
            len(registry) - len(self._existing),
            checkpoint,
        )
        return registry
