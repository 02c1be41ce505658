"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import gc
import time
import uuid
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from filereaper.core.settings import ReaperSettings
from filereaper.core.tracker import FileCleaningTracker


def wait_for_track_count(
    tracker: FileCleaningTracker,
    expected: int = 0,
    timeout: float = 10.0,
) -> bool:
    """Collect garbage until the tracker reaches the expected count.

    Args:
        tracker: Tracker to poll.
        expected: Track count to wait for.
        timeout: Maximum time in seconds to wait.

    Returns:
        True if the count was reached before the timeout.
    """
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        gc.collect()
        if tracker.get_track_count() == expected:
            return True
        time.sleep(0.02)
    return tracker.get_track_count() == expected


@pytest.fixture
def reaper_settings() -> ReaperSettings:
    """Settings with a unique reaper thread name for this test."""
    return ReaperSettings(thread_name=f"Test Reaper {uuid.uuid4().hex[:8]}")


@pytest.fixture
def tracker(reaper_settings: ReaperSettings) -> Iterator[FileCleaningTracker]:
    """A fresh tracker that is told to finish when the test ends."""
    instance = FileCleaningTracker(reaper_settings)
    yield instance
    instance.exit_when_finished()
    instance.wait_until_stopped(timeout=2.0)


@pytest.fixture
def reclaim() -> Callable[..., bool]:
    """Force reclamation and wait until the tracker's count drops."""
    return wait_for_track_count


@pytest.fixture
def non_empty_dir(tmp_path: Path) -> Path:
    """A directory containing one file and one nested directory with a file."""
    target = tmp_path / "populated"
    target.mkdir()
    (target / "a.txt").write_text("a" * 16)
    nested = target / "nested"
    nested.mkdir()
    (nested / "b.txt").write_text("b" * 16)
    return target
