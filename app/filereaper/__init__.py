"""filereaper - delete files and directories once nothing references them.

Register a path together with a marker object; when the marker is garbage
collected, a background reaper thread deletes the path.
"""

from filereaper.core.errors import (
    AggregateDeleteError,
    CleanupError,
    DeleteFailedError,
    IllegalStateError,
    InvalidArgumentError,
    SettingsError,
    SettingsNotFoundError,
    SettingsParseError,
)
from filereaper.core.settings import ReaperSettings, load_settings, load_settings_or_default
from filereaper.core.tracker import FileCleaningTracker
from filereaper.models import DeleteFailure, DeleteFailureLog, TrackedEntry, TrackerState
from filereaper.strategies import FORCE, NOOP, NORMAL, DeleteStrategy, get_strategy

__version__ = "0.1.0"

__all__ = [
    "FORCE",
    "NOOP",
    "NORMAL",
    "AggregateDeleteError",
    "CleanupError",
    "DeleteFailedError",
    "DeleteFailure",
    "DeleteFailureLog",
    "DeleteStrategy",
    "FileCleaningTracker",
    "IllegalStateError",
    "InvalidArgumentError",
    "ReaperSettings",
    "SettingsError",
    "SettingsNotFoundError",
    "SettingsParseError",
    "TrackedEntry",
    "TrackerState",
    "__version__",
    "get_strategy",
    "load_settings",
    "load_settings_or_default",
]
