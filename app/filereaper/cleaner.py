"""Process-wide default tracker.

Module-level convenience functions that share one FileCleaningTracker per
process. The tracker is created on first use from the user's settings file
(or defaults when there is none). There is no teardown beyond
exit_when_finished(); once that has been called the default tracker stays
stopped until reset_instance() is used.
"""

import logging
import threading

from filereaper.core.settings import load_settings_or_default
from filereaper.core.tracker import FileCleaningTracker
from filereaper.models.failure import DeleteFailureLog
from filereaper.strategies.base import DeleteStrategy, PathArg

logger = logging.getLogger(__name__)

_instance: FileCleaningTracker | None = None
_instance_lock = threading.Lock()


def get_instance() -> FileCleaningTracker:
    """Get the process-wide tracker, creating it on first use.

    Returns:
        The shared FileCleaningTracker.

    Raises:
        SettingsParseError: If the settings file exists but is not valid TOML.
        SettingsError: If the settings file content is invalid.
    """
    global _instance

    with _instance_lock:
        if _instance is None:
            _instance = FileCleaningTracker(load_settings_or_default())
            logger.debug("Created default tracker")
        return _instance


def reset_instance() -> None:
    """Forget the current process-wide tracker.

    The next call to any function in this module creates a new tracker.
    The previous tracker keeps running until it is drained (if it was
    told to exit) or until the process ends.
    """
    global _instance

    with _instance_lock:
        _instance = None


def track(path: PathArg, marker: object, strategy: DeleteStrategy | None = None) -> None:
    """Delete a path once marker is garbage collected, using the default tracker.

    See FileCleaningTracker.track().
    """
    get_instance().track(path, marker, strategy)


def get_track_count() -> int:
    """Return the default tracker's number of pending registrations."""
    return get_instance().get_track_count()


def get_delete_failures() -> DeleteFailureLog:
    """Return the default tracker's deletion failure log."""
    return get_instance().get_delete_failures()


def exit_when_finished() -> None:
    """Let the default tracker's reaper exit once all entries are processed."""
    get_instance().exit_when_finished()
