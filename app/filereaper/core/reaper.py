"""Background reaper thread.

The reaper is the sole consumer of a tracker's reclamation queue. It blocks
until a marker is reclaimed, deletes the associated path, records any
failure, and exits once the tracker has been told to finish and has no
entries left.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from filereaper.core.tracker import FileCleaningTracker

logger = logging.getLogger(__name__)


class Reaper(threading.Thread):
    """Worker thread that deletes paths as their markers are reclaimed.

    One reaper runs per tracker. It is started lazily by the first
    registration and never restarted once it exits.
    """

    def __init__(self, tracker: FileCleaningTracker, *, name: str, daemon: bool) -> None:
        """Initialize the reaper.

        Args:
            tracker: Tracker whose queue this reaper drains.
            name: Thread name.
            daemon: Whether the thread is a daemon thread.
        """
        super().__init__(name=name, daemon=daemon)
        self._tracker = tracker

    def run(self) -> None:
        logger.debug("Reaper %s started", self.name)
        tracker = self._tracker
        while not tracker._finish_if_drained(self):
            item = tracker._next_notification()
            if item is None:
                # Shutdown signal: loop back to the drained check
                continue
            tracker._reclaim(item)
        logger.debug("Reaper %s stopped", self.name)
