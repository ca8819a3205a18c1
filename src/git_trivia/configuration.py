"""The contributor document (``trivia.yml``).

The document lives in the repository's git directory and records who is
who, plus the commit the list is current as of:

    checkpoint_revision: 3f2a9c...
    people:
      - name: Jane Doe
        emails:
          - jane@example.com
          - jane.doe@example.com
        team: Platform
      - name: John Doe
        emails:
          - john@example.com
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from .exceptions import ConfigNotFoundError, InvalidConfigError
from .logging_config import get_logger
from .people.models import Person
from .people.registry import IdentityRegistry

logger = get_logger(__name__)

DEFAULT_FILENAME = "trivia.yml"


def config_file_path(git_dir: Path, filename: str = DEFAULT_FILENAME) -> Path:
    return Path(git_dir) / filename


def _person_from_dict(index: int, data: Any) -> Person:
    key = f"people[{index}]"
    if not isinstance(data, dict):
        raise InvalidConfigError(key, data, "expected a mapping")

    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        raise InvalidConfigError(f"{key}.name", name, "expected a non-empty string")

    emails = data.get("emails") or []
    if not isinstance(emails, list) or not all(isinstance(e, str) for e in emails):
        raise InvalidConfigError(f"{key}.emails", emails, "expected a list of strings")

    team = data.get("team")
    if team is not None and not isinstance(team, str):
        raise InvalidConfigError(f"{key}.team", team, "expected a string")

    return Person(name=name.strip(), aliases=tuple(e.strip() for e in emails), team=team)


@dataclass
class Configuration:
    checkpoint_revision: Optional[str] = None
    people: list[Person] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Configuration:
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise InvalidConfigError("document", data, "expected a mapping at the top level")

        checkpoint = data.get("checkpoint_revision")
        if checkpoint is not None and not isinstance(checkpoint, str):
            raise InvalidConfigError("checkpoint_revision", checkpoint, "expected a string")

        people = data.get("people") or []
        if not isinstance(people, list):
            raise InvalidConfigError("people", people, "expected a list")

        return cls(
            checkpoint_revision=checkpoint,
            people=[_person_from_dict(i, p) for i, p in enumerate(people)],
        )

    @classmethod
    def from_registry(cls, registry: IdentityRegistry) -> Configuration:
        return cls(checkpoint_revision=registry.checkpoint_revision, people=list(registry))

    def to_dict(self) -> dict[str, Any]:
        people = []
        for person in self.people:
            entry: dict[str, Any] = {"name": person.name, "emails": list(person.aliases)}
            if person.team is not None:
                entry["team"] = person.team
            people.append(entry)
        return {"checkpoint_revision": self.checkpoint_revision, "people": people}

    def people_db(self) -> IdentityRegistry:
        """Build the identity registry described by this document.

        Raises:
            ConflictingAliasError: Two people list the same e-mail.
            DuplicatePersonError: Two people share a name.
        """
        return IdentityRegistry(self.people, checkpoint_revision=self.checkpoint_revision)


def load_configuration(path: Path) -> Configuration:
    path = Path(path)
    if not path.exists():
        raise ConfigNotFoundError(path)
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidConfigError("document", str(path), f"not valid YAML: {e}") from e
    configuration = Configuration.from_dict(data)
    logger.debug("Loaded %d people from %s", len(configuration.people), path)
    return configuration


def dump_configuration(configuration: Configuration) -> str:
    return yaml.safe_dump(
        configuration.to_dict(), sort_keys=False, allow_unicode=True, default_flow_style=False
    )


def save_configuration(configuration: Configuration, path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_configuration(configuration), encoding="utf-8")
    logger.info("Wrote %d people to %s", len(configuration.people), path)
