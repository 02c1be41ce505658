"""Tracked entry model.

A TrackedEntry pairs a filesystem path with the strategy that will remove
it once the associated marker is reclaimed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from filereaper.strategies.base import DeleteStrategy


@dataclass(frozen=True, slots=True)
class TrackedEntry:
    """Path and delete strategy for one marker registration.

    Entries are created when a marker is registered and are never mutated;
    the tracker discards them once the reaper has processed them.

    Attributes:
        path: Filesystem path to delete when the marker is reclaimed.
        strategy: Strategy used to delete the path.
    """

    path: str
    strategy: DeleteStrategy

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)

    def delete(self) -> None:
        """Delete the tracked path with the entry's strategy.

        Raises:
            DeleteFailedError: If the path could not be removed.
        """
        self.strategy.delete(self.path)
