"""Exception hierarchy for filereaper.

Argument and state errors are raised synchronously at the call site.
Deletion errors raised by strategies are caught by the reaper and
recorded in the tracker's failure log instead of propagating.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from filereaper.models.failure import DeleteFailure


class CleanupError(Exception):
    """Base exception for all filereaper errors."""


class InvalidArgumentError(CleanupError, ValueError):
    """Raised when a path or marker argument is missing or unusable."""


class IllegalStateError(CleanupError, RuntimeError):
    """Raised when tracking is attempted after exit_when_finished()."""


class DeleteFailedError(CleanupError):
    """Raised when a path could not be removed.

    Attributes:
        path: Path that could not be removed.
        cause: Human-readable reason for the failure.
    """

    def __init__(self, path: str, cause: str) -> None:
        super().__init__(f"Cannot delete {path}: {cause}")
        self.path = path
        self.cause = cause


class AggregateDeleteError(DeleteFailedError):
    """Raised when a recursive delete leaves one or more paths behind.

    Removal continues past individual failures, so every path that could
    not be removed is listed in ``failures``.

    Attributes:
        failures: One DeleteFailure per path left behind, in the order
            they were encountered.
    """

    def __init__(self, path: str, failures: list[DeleteFailure]) -> None:
        details = "; ".join(f"{f.path} ({f.cause})" for f in failures)
        super().__init__(path, f"{len(failures)} path(s) could not be removed: {details}")
        self.failures = tuple(failures)


class SettingsError(CleanupError):
    """Base exception for settings errors."""


class SettingsNotFoundError(SettingsError):
    """Raised when the settings file is not found."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""
