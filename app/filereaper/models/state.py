"""Lifecycle states of a FileCleaningTracker."""

from enum import Enum


class TrackerState(str, Enum):
    """Lifecycle state of a tracker.

    Attributes:
        IDLE: Nothing registered yet and no reaper started.
        RUNNING: Reaper active and accepting registrations.
        DRAINING: exit_when_finished() called; reaper still processing
            pending entries, no new registrations accepted.
        STOPPED: Terminal. Reaper gone (or never started).
    """

    IDLE = "idle"
    RUNNING = "running"
    DRAINING = "draining"
    STOPPED = "stopped"

    @property
    def accepts_registrations(self) -> bool:
        """Check if track() is allowed in this state."""
        return self in (TrackerState.IDLE, TrackerState.RUNNING)
