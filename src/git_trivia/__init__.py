"""
git-trivia - who owns which lines of a Git repository

Blames every file of a tree, maps each author e-mail to a configured person
and team, and ranks people and teams by the lines they own.
"""

__version__ = "0.3.0"

from .ownership import OwnershipStatistics, calculate
from .people import Authorship, IdentityRegistry, Person, RegistryBuilder
from .tracking import CombinedTracker, PeopleTracker, TeamTracker
from .tree_walker import Entry, TreeWalker

__all__ = [
    "calculate",  # Main entry point
    "OwnershipStatistics",
    "Authorship",
    "Person",
    "IdentityRegistry",
    "RegistryBuilder",
    "CombinedTracker",
    "PeopleTracker",
    "TeamTracker",
    "Entry",
    "TreeWalker",
]
