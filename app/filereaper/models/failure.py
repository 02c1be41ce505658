"""Deletion failure records.

This module defines the record stored for each path the reaper could not
remove, and the append-only log that collects them.
"""

import threading
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import overload


@dataclass(frozen=True, slots=True)
class DeleteFailure:
    """A path that could not be removed.

    Attributes:
        path: Filesystem path that was left behind.
        cause: Human-readable reason for the failure.
    """

    path: str
    cause: str

    def __post_init__(self) -> None:
        """Validate failure data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)


class DeleteFailureLog(Sequence[DeleteFailure]):
    """Thread-safe, append-only sequence of deletion failures.

    The log is a live view: readers holding a reference see failures
    recorded after they obtained it. Reads and appends may happen
    concurrently from any thread.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._failures: list[DeleteFailure] = []

    def record(self, failure: DeleteFailure) -> None:
        """Append a failure to the log.

        Args:
            failure: The failure to record.
        """
        with self._lock:
            self._failures.append(failure)

    def snapshot(self) -> tuple[DeleteFailure, ...]:
        """Return an immutable copy of the failures recorded so far."""
        with self._lock:
            return tuple(self._failures)

    @property
    def paths(self) -> list[str]:
        """Paths of all recorded failures, in recording order."""
        return [failure.path for failure in self.snapshot()]

    @overload
    def __getitem__(self, index: int) -> DeleteFailure: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[DeleteFailure]: ...

    def __getitem__(self, index: int | slice) -> DeleteFailure | Sequence[DeleteFailure]:
        with self._lock:
            if isinstance(index, slice):
                return tuple(self._failures[index])
            return self._failures[index]

    def __len__(self) -> int:
        with self._lock:
            return len(self._failures)

    def __iter__(self) -> Iterator[DeleteFailure]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"DeleteFailureLog({list(self.snapshot())!r})"
