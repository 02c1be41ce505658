"""Unit tests for TrackedEntry."""

import dataclasses
from pathlib import Path

import pytest

from filereaper.core.errors import DeleteFailedError
from filereaper.models import TrackedEntry
from filereaper.strategies import FORCE, NORMAL


class TestTrackedEntry:
    """Tests for TrackedEntry."""

    def test_fields(self) -> None:
        """TrackedEntry keeps path and strategy."""
        entry = TrackedEntry(path="/tmp/x", strategy=FORCE)

        assert entry.path == "/tmp/x"
        assert entry.strategy is FORCE

    def test_immutable(self) -> None:
        """TrackedEntry is frozen."""
        entry = TrackedEntry(path="/tmp/x", strategy=NORMAL)

        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.strategy = FORCE  # type: ignore[misc]

    def test_empty_path_rejected(self) -> None:
        """An empty path is invalid."""
        with pytest.raises(ValueError):
            TrackedEntry(path="", strategy=NORMAL)

    def test_delete_uses_strategy(self, non_empty_dir: Path) -> None:
        """delete() applies the entry's own strategy."""
        with pytest.raises(DeleteFailedError):
            TrackedEntry(path=str(non_empty_dir), strategy=NORMAL).delete()
        assert non_empty_dir.exists()

        TrackedEntry(path=str(non_empty_dir), strategy=FORCE).delete()
        assert not non_empty_dir.exists()
