"""People: contributors, their aliases, and the registry that resolves them."""

from .builder import RegistryBuilder
from .models import Authorship, Person
from .registry import IdentityRegistry

__all__ = [
    "Authorship",
    "Person",
    "IdentityRegistry",
    "RegistryBuilder",
]
