"""Deferred filesystem cleanup driven by object reachability.

A FileCleaningTracker ties the lifetime of a marker object to the deletion
of a path. The tracker only holds a weak reference to each marker; when
the marker is garbage collected, the weak reference's callback posts it
onto the reclamation queue and the reaper thread deletes the path.

Example:
    >>> tracker = FileCleaningTracker()
    >>> handle = open(tmp_file, "w")
    >>> tracker.track(tmp_file, handle)
    >>> del handle  # tmp_file is removed once the handle is collected
"""

import itertools
import logging
import queue
import threading
import weakref
from typing import Any

from filereaper.core.errors import (
    CleanupError,
    DeleteFailedError,
    IllegalStateError,
    InvalidArgumentError,
)
from filereaper.core.reaper import Reaper
from filereaper.core.settings import ReaperSettings, get_default_settings
from filereaper.models.entry import TrackedEntry
from filereaper.models.failure import DeleteFailure, DeleteFailureLog
from filereaper.models.state import TrackerState
from filereaper.strategies.base import DeleteStrategy, PathArg, coerce_path

logger = logging.getLogger(__name__)


class _MarkerRef(weakref.ref):  # type: ignore[type-arg]
    """Weak reference to a marker that carries its registration.

    The callback passed in is the reclamation queue's put(), so the
    reference itself is the notification once the marker is collected.
    """

    def __init__(
        self,
        marker: Any,
        callback: Any,
        /,
        *,
        token: int,
        entry: TrackedEntry,
    ) -> None:
        super().__init__(marker, callback)
        self.token = token
        self.entry = entry


class FileCleaningTracker:
    """Registry that deletes paths once their markers become unreachable.

    All public methods are safe to call from any thread. Deletion happens
    on a single background reaper thread; deletion failures are never
    raised to callers but recorded in the failure log returned by
    get_delete_failures().

    Lifecycle: IDLE -> RUNNING on the first track(); RUNNING -> DRAINING on
    exit_when_finished() while entries remain; -> STOPPED once drained.
    IDLE -> STOPPED directly if exit_when_finished() comes first. STOPPED
    is terminal.
    """

    def __init__(self, settings: ReaperSettings | None = None) -> None:
        """Initialize the tracker.

        Args:
            settings: Reaper settings. If None, built-in defaults are used.
        """
        self._settings = settings if settings is not None else get_default_settings()
        self._lock = threading.Lock()
        # None is the shutdown signal
        self._queue: queue.SimpleQueue[_MarkerRef | None] = queue.SimpleQueue()
        self._live: dict[int, _MarkerRef] = {}
        self._tokens = itertools.count()
        self._failures = DeleteFailureLog()
        self._exit_when_finished = False
        self._state = TrackerState.IDLE
        self._reaper: Reaper | None = None
        self._stopped = threading.Event()

    @property
    def settings(self) -> ReaperSettings:
        """Settings this tracker was created with."""
        return self._settings

    @property
    def state(self) -> TrackerState:
        """Current lifecycle state."""
        with self._lock:
            return self._state

    @property
    def reaper(self) -> Reaper | None:
        """The running reaper thread, or None if not started or finished."""
        with self._lock:
            return self._reaper

    @property
    def exit_requested(self) -> bool:
        """Check if exit_when_finished() has been called."""
        with self._lock:
            return self._exit_when_finished

    def track(
        self,
        path: PathArg,
        marker: object,
        strategy: DeleteStrategy | None = None,
    ) -> None:
        """Delete a path once the marker object is garbage collected.

        The tracker keeps only a weak reference to the marker, so tracking
        does not extend its lifetime.

        Args:
            path: Path to delete, as str or os.PathLike.
            marker: Object whose reclamation triggers the deletion. Must
                support weak references.
            strategy: Strategy used to delete the path. If None, the
                settings' default strategy is used.

        Raises:
            InvalidArgumentError: If path or marker is None, the path is
                empty or not path-like, or the marker cannot be weakly
                referenced.
            IllegalStateError: If exit_when_finished() has been called.
        """
        target = coerce_path(path)
        if marker is None:
            msg = "Marker must not be None"
            raise InvalidArgumentError(msg)
        entry = TrackedEntry(
            path=target,
            strategy=strategy if strategy is not None else self._settings.effective_strategy,
        )

        with self._lock:
            if not self._state.accepts_registrations:
                msg = "No new trackers can be added once exit_when_finished() is called"
                raise IllegalStateError(msg)
            token = next(self._tokens)
            try:
                ref = _MarkerRef(marker, self._queue.put, token=token, entry=entry)
            except TypeError as e:
                msg = f"Marker of type {type(marker).__name__} cannot be weakly referenced"
                raise InvalidArgumentError(msg) from e
            self._live[token] = ref
            if self._reaper is None:
                try:
                    self._start_reaper()
                except RuntimeError:
                    del self._live[token]
                    raise
            count = len(self._live)

        logger.debug("Tracking %s with %s (%d tracked)", target, entry.strategy, count)

    def get_track_count(self) -> int:
        """Return the number of registrations not yet processed by the reaper."""
        with self._lock:
            return len(self._live)

    def get_delete_failures(self) -> DeleteFailureLog:
        """Return the live, append-only log of deletion failures."""
        return self._failures

    def exit_when_finished(self) -> None:
        """Stop the reaper once every pending entry has been processed.

        Pending entries are not cancelled: their paths are still deleted
        when their markers are reclaimed. After this call track() raises
        IllegalStateError. Calling it again has no further effect.
        """
        with self._lock:
            if self._exit_when_finished:
                return
            self._exit_when_finished = True
            if self._reaper is None:
                # Never started: go straight to the terminal state
                self._state = TrackerState.STOPPED
                self._stopped.set()
                logger.debug("Tracker stopped before any registration")
                return
            self._state = TrackerState.DRAINING
            pending = len(self._live)
        logger.debug("Exit requested; draining %d pending entries", pending)
        # Wake the reaper so it re-checks whether it is drained
        self._queue.put(None)

    def wait_until_stopped(self, timeout: float | None = None) -> bool:
        """Block until the tracker reaches the STOPPED state.

        Args:
            timeout: Maximum time in seconds to wait. None waits forever.

        Returns:
            True if the tracker is stopped, False if the timeout expired.
        """
        return self._stopped.wait(timeout)

    # === Reaper-facing internals ===

    def _start_reaper(self) -> None:
        """Start the reaper thread. Caller must hold the lock.

        Raises:
            RuntimeError: If the thread cannot be started. The tracker is
                left without a reaper, so the next track() tries again.
        """
        reaper = Reaper(self, name=self._settings.thread_name, daemon=self._settings.daemon)
        reaper.start()
        self._reaper = reaper
        self._state = TrackerState.RUNNING

    def _next_notification(self) -> _MarkerRef | None:
        """Block until a marker is reclaimed or a shutdown signal arrives."""
        return self._queue.get()

    def _finish_if_drained(self, reaper: Reaper) -> bool:
        """Move to STOPPED if exit was requested and nothing is pending.

        Args:
            reaper: The reaper asking.

        Returns:
            True if the reaper should exit.
        """
        with self._lock:
            if not (self._exit_when_finished and not self._live):
                return False
            if self._reaper is reaper:
                self._reaper = None
            self._state = TrackerState.STOPPED
            self._stopped.set()
            return True

    def _reclaim(self, ref: _MarkerRef) -> None:
        """Delete the path of a reclaimed marker and drop its registration.

        The entry leaves the live set whether or not deletion succeeds.
        """
        entry = ref.entry
        try:
            entry.delete()
        except DeleteFailedError as e:
            self._record_failure(entry, e.cause)
        except (CleanupError, OSError) as e:
            self._record_failure(entry, str(e))
        except Exception as e:
            logger.exception("Unexpected error deleting %s", entry.path)
            self._record_failure(entry, f"{type(e).__name__}: {e}")
        else:
            logger.debug("Reclaimed %s", entry.path)
        finally:
            with self._lock:
                self._live.pop(ref.token, None)

    def _record_failure(self, entry: TrackedEntry, cause: str) -> None:
        self._failures.record(DeleteFailure(path=entry.path, cause=cause))
        if self._settings.log_failures:
            logger.warning("Failed to delete %s: %s", entry.path, cause)

    def __repr__(self) -> str:
        return (
            f"FileCleaningTracker(state={self.state.value}, "
            f"tracked={self.get_track_count()}, failures={len(self._failures)})"
        )
