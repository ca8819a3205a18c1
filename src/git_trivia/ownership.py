"""Line ownership: one blame pass over a tree, ranked per person and team.

The pass walks the tree of ``newest``, blames every non-binary file and
credits each hunk to the person owning its author alias. Line counts are
summed per person and per team; ``OwnershipStatistics`` turns the totals
into ranked shares.

Ranking policy:
    - Entries are ordered by lines owned, descending.
    - Equal counts are ordered by name, ascending. The unaffiliated team
      row comes after named teams with the same count.
    - When the total is zero (empty or all-binary tree) every fraction is
      0.0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .backend.protocols import BlameHunk, VersionControlBackend
from .logging_config import get_logger
from .people.models import Person
from .people.registry import IdentityRegistry
from .tracking import CombinedTracker
from .tree_walker import TreeWalker

logger = get_logger(__name__)

ProgressCallback = Optional[Callable[[int, int], None]]


@dataclass
class OwnershipScore:
    """Mutable line counter used as the tracker score."""

    total_lines_owned: int = 0

    def add_lines(self, lines: int) -> None:
        self.total_lines_owned += lines

    def add_hunk(self, hunk: BlameHunk) -> None:
        self.add_lines(hunk.lines)


@dataclass(frozen=True)
class OwnershipShare:
    total_lines_owned: int
    fraction: float

    @property
    def percent_owned(self) -> float:
        return self.fraction * 100.0


def _share(lines: int, total: int) -> OwnershipShare:
    fraction = lines / total if total > 0 else 0.0
    return OwnershipShare(total_lines_owned=lines, fraction=fraction)


class OwnershipStatistics:
    """Ranked ownership computed once from a finished tracker.

    All accessors are read-only and return fresh lists.
    """

    def __init__(self, tracking: CombinedTracker[OwnershipScore]):
        # Team rows are never summed: people without a team already feed
        # the unaffiliated row.
        self._total = sum(score.total_lines_owned for _, score in tracking.people)

        people = [
            (person, _share(score.total_lines_owned, self._total))
            for person, score in tracking.people
        ]
        people.sort(key=lambda item: (-item[1].total_lines_owned, item[0].name))
        self._people = people

        teams = [
            (team, _share(score.total_lines_owned, self._total))
            for team, score in tracking.teams
        ]
        teams.sort(
            key=lambda item: (-item[1].total_lines_owned, item[0] is None, item[0] or "")
        )
        self._teams = teams

    def total_lines(self) -> int:
        return self._total

    def people_toplist(self) -> list[tuple[Person, OwnershipShare]]:
        return list(self._people)

    def teams_toplist(self) -> list[tuple[Optional[str], OwnershipShare]]:
        return list(self._teams)


def calculate(
    backend: VersionControlBackend,
    registry: IdentityRegistry,
    newest: str,
    oldest: Optional[str] = None,
    on_progress: ProgressCallback = None,
) -> OwnershipStatistics:
    """Compute line ownership of the tree at ``newest``.

    Args:
        backend: Repository access (tree listing, blobs, blame).
        registry: Resolves hunk authors to people; read-only here.
        newest: Commit whose tree is measured.
        oldest: Optional commit already accounted for. Lines that were
            already present at ``oldest`` are left out of the blame.
        on_progress: Called as ``on_progress(processed, total)`` after
            every tree entry.

    Returns:
        OwnershipStatistics for the whole tree.

    Raises:
        UnknownAliasError: A hunk author is not in the registry. The pass
            stops at the first such hunk.
    """
    tree_id = backend.commit_tree(newest)

    total_entries = 0
    if on_progress is not None:
        total_entries = sum(1 for _ in TreeWalker(backend, tree_id))

    tracking: CombinedTracker[OwnershipScore] = CombinedTracker(OwnershipScore)
    processed = 0
    blamed = 0

    for entry in TreeWalker(backend, tree_id):
        if entry.is_file():
            blob = entry.blob(backend)
            if blob is not None and blob.is_binary:
                logger.debug("Skipping binary file %s", entry.path)
            else:
                for hunk in backend.blame(entry.path, newest, oldest):
                    person = registry.resolve_authorship(hunk.author)
                    tracking.track(person, lambda score, h=hunk: score.add_hunk(h))
                blamed += 1

        processed += 1
        if on_progress is not None:
            on_progress(processed, total_entries)

    logger.info("Blamed %d files out of %d tree entries", blamed, processed)
    return OwnershipStatistics(tracking)
