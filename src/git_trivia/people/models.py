"""Data models for contributors and the authorship records that name them."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Authorship:
    """An author as reported by a commit or a blame hunk.

    Either part may be missing: git allows an empty author name, and some
    importers produce commits without an e-mail address.
    """

    name: Optional[str]
    alias: Optional[str]


@dataclass(frozen=True, order=True)
class Person:
    """A canonical contributor.

    Equality, hashing and ordering use the display name only; the name is
    unique within a registry. ``aliases`` keeps first-seen order and never
    holds duplicates.
    """

    name: str
    aliases: tuple[str, ...] = field(default=(), compare=False)
    team: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "aliases", tuple(dict.fromkeys(self.aliases)))

    def owns(self, alias: str) -> bool:
        return alias in self.aliases
