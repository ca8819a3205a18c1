"""Identity registry: canonical people plus an alias index."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from ..exceptions import ConflictingAliasError, DuplicatePersonError, UnknownAliasError
from .models import Authorship, Person


class IdentityRegistry:
    """Ordered collection of people with an ``alias -> person`` lookup.

    Every alias maps to at most one person. Insertion is all or nothing:
    a person whose aliases collide with the index is rejected before any
    state changes.

    Usage:
        registry = IdentityRegistry(checkpoint_revision="3f2a...")
        registry.add(Person("Jane Doe", ("jane@example.com",)))
        registry.find_by_alias("jane@example.com").name  # "Jane Doe"
    """

    def __init__(
        self,
        people: Iterable[Person] = (),
        checkpoint_revision: Optional[str] = None,
    ):
        self.checkpoint_revision = checkpoint_revision
        self._people: list[Person] = []
        self._lookup: dict[str, int] = {}
        self._names: set[str] = set()
        for person in people:
            self.add(person)

    def add(self, person: Person) -> None:
        """Register ``person`` and index all of its aliases.

        Raises:
            ConflictingAliasError: An alias already belongs to someone else.
            DuplicatePersonError: The display name is already registered.
        """
        for alias in person.aliases:
            index = self._lookup.get(alias)
            if index is not None:
                raise ConflictingAliasError(
                    existing_owner=self._people[index].name,
                    new_owner=person.name,
                    alias=alias,
                )
        if person.name in self._names:
            raise DuplicatePersonError(person.name)

        index = len(self._people)
        self._people.append(person)
        self._names.add(person.name)
        for alias in person.aliases:
            self._lookup[alias] = index

    def has_alias(self, alias: str) -> bool:
        return alias in self._lookup

    def find_by_alias(self, alias: str) -> Person:
        """Return the person owning ``alias``.

        Raises:
            UnknownAliasError: No registered person owns the alias.
        """
        index = self._lookup.get(alias)
        if index is None:
            raise UnknownAliasError(alias)
        return self._people[index]

    def resolve_authorship(self, authorship: Authorship) -> Person:
        """Resolve an authorship record by its alias.

        The reported name is never consulted; aliases are the only join key
        between history and configured people.
        """
        return self.find_by_alias(authorship.alias or "")

    @property
    def people(self) -> tuple[Person, ...]:
        return tuple(self._people)

    def __len__(self) -> int:
        return len(self._people)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._people)

    def __contains__(self, alias: object) -> bool:
        return alias in self._lookup

    def __repr__(self) -> str:
        return (
            f"IdentityRegistry(people={len(self._people)}, "
            f"aliases={len(self._lookup)}, checkpoint={self.checkpoint_revision!r})"
        )
