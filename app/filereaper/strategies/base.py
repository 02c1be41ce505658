"""Abstract base class for delete strategies.

This module defines the DeleteStrategy interface shared by the NORMAL,
FORCE and NOOP strategies.
"""

import logging
import os
from abc import ABC, abstractmethod

from filereaper.core.errors import CleanupError, InvalidArgumentError

logger = logging.getLogger(__name__)

PathArg = str | os.PathLike[str]


def coerce_path(path: object) -> str:
    """Normalise a path argument to a non-empty string.

    Args:
        path: A str or os.PathLike.

    Returns:
        The path as a string.

    Raises:
        InvalidArgumentError: If the path is None, empty, or not path-like.
    """
    if path is None:
        msg = "Path must not be None"
        raise InvalidArgumentError(msg)
    try:
        result = os.fspath(path)  # type: ignore[call-overload]
    except TypeError as e:
        msg = f"Path must be str or os.PathLike, got {type(path).__name__}"
        raise InvalidArgumentError(msg) from e
    if isinstance(result, bytes):
        result = os.fsdecode(result)
    if not result:
        msg = "Path must not be empty"
        raise InvalidArgumentError(msg)
    return result


class DeleteStrategy(ABC):
    """Abstract base class for all delete strategies.

    A strategy removes a single filesystem path. Deleting a path that does
    not exist is always a successful no-op. Strategies are stateless and
    shared, so one instance serves every registration.

    Example:
        >>> FORCE.delete("/tmp/build-cache")
        >>> NORMAL.delete_quietly("/tmp/not-empty-dir")
        False
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the display name of this strategy (e.g. "Normal")."""

    @abstractmethod
    def _do_delete(self, path: str) -> None:
        """Remove an existing path.

        Called only after the path has been found to exist.

        Args:
            path: Path to remove.

        Raises:
            DeleteFailedError: If the path could not be removed.
        """

    def delete(self, path: PathArg) -> None:
        """Delete a path, raising on failure.

        Args:
            path: Path to delete.

        Raises:
            InvalidArgumentError: If path is None, empty, or not path-like.
            DeleteFailedError: If the path exists and could not be removed.
        """
        target = coerce_path(path)
        if not os.path.lexists(target):
            logger.debug("Nothing to delete at %s", target)
            return
        self._do_delete(target)

    def delete_quietly(self, path: PathArg | None) -> bool:
        """Delete a path, never raising.

        Args:
            path: Path to delete. None is accepted and treated as already gone.

        Returns:
            True if the path is absent after the attempt, False otherwise.
        """
        if path is None:
            return True
        try:
            self.delete(path)
        except (CleanupError, OSError) as e:
            logger.debug("Quiet delete with %s failed: %s", self, e)
        except Exception:
            logger.debug("Unexpected error in quiet delete with %s", self, exc_info=True)
        try:
            return not os.path.lexists(os.fspath(path))
        except TypeError:
            return False

    def __str__(self) -> str:
        return f"DeleteStrategy[{self.name}]"

    def __repr__(self) -> str:
        return str(self)
