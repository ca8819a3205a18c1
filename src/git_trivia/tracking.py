"""Per-person and per-team accumulators.

Trackers are generic over the score type: any mutable object built by a
zero-argument factory (usually the score class itself). A slot is created
on first touch and then mutated in place.

    tracking = CombinedTracker(OwnershipScore)
    tracking.track(person, lambda score: score.add_lines(12))
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, Optional, TypeVar

from .people.models import Person

ScoreT = TypeVar("ScoreT")


class PeopleTracker(Generic[ScoreT]):
    """One score per person, keyed on the person's display name."""

    def __init__(self, factory: Callable[[], ScoreT]):
        self._factory = factory
        self._people: dict[str, Person] = {}
        self._scores: dict[str, ScoreT] = {}

    def for_person(self, person: Person) -> ScoreT:
        """Return the person's score, inserting a fresh one first if needed."""
        score = self._scores.get(person.name)
        if score is None:
            score = self._factory()
            self._scores[person.name] = score
            self._people[person.name] = person
        return score

    def total_people(self) -> int:
        return len(self._scores)

    def __iter__(self) -> Iterator[tuple[Person, ScoreT]]:
        for name, score in self._scores.items():
            yield self._people[name], score

    def __len__(self) -> int:
        return len(self._scores)


class TeamTracker(Generic[ScoreT]):
    """One score per team plus an always-present unaffiliated slot.

    Iteration yields named teams in first-touch order and then the
    unaffiliated slot as ``(None, score)``.
    """

    def __init__(self, factory: Callable[[], ScoreT]):
        self._factory = factory
        self._teams: dict[str, ScoreT] = {}
        self._unaffiliated: ScoreT = factory()

    def for_team(self, team: Optional[str]) -> ScoreT:
        if team is None:
            return self._unaffiliated
        score = self._teams.get(team)
        if score is None:
            score = self._factory()
            self._teams[team] = score
        return score

    def for_person(self, person: Person) -> ScoreT:
        return self.for_team(person.team)

    def total_teams(self) -> int:
        """Number of named teams; the unaffiliated slot is not counted."""
        return len(self._teams)

    def __iter__(self) -> Iterator[tuple[Optional[str], ScoreT]]:
        yield from self._teams.items()
        yield None, self._unaffiliated

    def __len__(self) -> int:
        return len(self._teams) + 1


class CombinedTracker(Generic[ScoreT]):
    """Track people and teams together.

    Every ``track`` call updates exactly one person slot and exactly one
    team-level slot with the same mutation.
    """

    def __init__(self, factory: Callable[[], ScoreT]):
        self._people: PeopleTracker[ScoreT] = PeopleTracker(factory)
        self._teams: TeamTracker[ScoreT] = TeamTracker(factory)

    def track(self, person: Person, mutate: Callable[[ScoreT], None]) -> None:
        mutate(self._people.for_person(person))
        mutate(self._teams.for_person(person))

    @property
    def people(self) -> PeopleTracker[ScoreT]:
        return self._people

    @property
    def teams(self) -> TeamTracker[ScoreT]:
        return self._teams
