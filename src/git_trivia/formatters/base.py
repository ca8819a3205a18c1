"""Base formatter interface for ownership reports."""

from abc import ABC, abstractmethod

from ..ownership import OwnershipStatistics

UNAFFILIATED_LABEL = "(Others)"


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, statistics: OwnershipStatistics) -> None:
        """Write the report to stdout."""

    @abstractmethod
    def format(self, statistics: OwnershipStatistics) -> str:
        """Return the report as a string."""
