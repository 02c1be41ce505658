"""Data models for filereaper.

This package contains the records exchanged between the tracker, the
reaper and the delete strategies.
"""

from filereaper.models.entry import TrackedEntry
from filereaper.models.failure import DeleteFailure, DeleteFailureLog
from filereaper.models.state import TrackerState

__all__ = ["DeleteFailure", "DeleteFailureLog", "TrackedEntry", "TrackerState"]
