"""Everything one invocation needs: repository, contributor document, registry."""

from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import Optional

from .backend.git import GitBackend
from .config import TriviaSettings
from .configuration import Configuration, config_file_path, load_configuration
from .people.registry import IdentityRegistry


class Context:
    def __init__(
        self,
        backend: GitBackend,
        configuration: Configuration,
        settings: Optional[TriviaSettings] = None,
    ):
        self.backend = backend
        self.configuration = configuration
        self.settings = settings or TriviaSettings()

    @classmethod
    def open_backend(cls, path: Path, settings: TriviaSettings) -> GitBackend:
        backend = GitBackend(str(path), timeout=settings.git_timeout_seconds)
        backend.ensure_repository()
        return backend

    @classmethod
    def load(cls, path: Path, settings: Optional[TriviaSettings] = None) -> Context:
        """Open the repository at ``path`` and read its contributor document.

        Raises:
            NotARepositoryError: ``path`` is not inside a git repository.
            ConfigNotFoundError: ``init`` has not been run yet.
        """
        settings = settings or TriviaSettings()
        backend = cls.open_backend(path, settings)
        configuration = load_configuration(cls.config_path_for(backend, settings))
        return cls(backend, configuration, settings)

    @staticmethod
    def config_path_for(backend: GitBackend, settings: TriviaSettings) -> Path:
        return config_file_path(backend.git_dir(), settings.config_filename)

    @property
    def config_path(self) -> Path:
        return self.config_path_for(self.backend, self.settings)

    @cached_property
    def people_db(self) -> IdentityRegistry:
        """Registry built once per invocation, read-only afterwards."""
        return self.configuration.people_db()

    def head_commit(self) -> str:
        return self.backend.resolve("HEAD")
