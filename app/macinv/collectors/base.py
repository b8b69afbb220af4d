"""Abstract base class for inventory collectors.

This module defines the Collector interface that every inventory
source (Spotlight, application directories, Homebrew) implements.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from macinv.models.export import InventoryCategory


class Collector(ABC):
    """Abstract base class for all inventory collectors.

    A collector runs exactly one external command (or reads one directory)
    and returns its normalized, sorted output as an InventoryCategory.

    Example:
        >>> collector = SpotlightCollector()
        >>> category = collector.collect()
        >>> print(f"{category.title}: {category.count}")
    """

    @property
    @abstractmethod
    def title(self) -> str:
        """Return the report label for this category."""

    @property
    @abstractmethod
    def command(self) -> str:
        """Return a human-readable description of the producing command."""

    @abstractmethod
    def collect(self) -> InventoryCategory:
        """Collect the category's lines.

        Returns:
            InventoryCategory with normalized, sorted lines.

        Raises:
            CommandFailedError: If the underlying command or read fails.
        """

    def _category(self, lines: Iterable[str]) -> InventoryCategory:
        return InventoryCategory(
            title=self.title,
            command=self.command,
            lines=tuple(sort_lines(lines)),
        )


def sort_lines(lines: Iterable[str]) -> list[str]:
    """Sort lines ascending by code point (case-sensitive)."""
    return sorted(lines)
