"""Force delete strategy.

Removes directories recursively, depth first. Removal does not stop at the
first failure: every path that could not be removed is collected and
reported together once the walk is complete.
"""

import logging
import os
import shutil
import sys
from typing import Any

from filereaper.core.errors import AggregateDeleteError, DeleteFailedError
from filereaper.models.failure import DeleteFailure
from filereaper.strategies.base import DeleteStrategy

logger = logging.getLogger(__name__)


def remove_tree(path: str) -> list[DeleteFailure]:
    """Recursively remove a directory, continuing past failures.

    Symlinks inside the tree are unlinked, never followed.

    Args:
        path: Directory to remove.

    Returns:
        One DeleteFailure per path that could not be removed. Empty when
        the whole tree, including ``path`` itself, is gone.
    """
    failures: list[DeleteFailure] = []

    def _collect(func: Any, failed_path: str, exc: Any) -> None:
        # onerror passes sys.exc_info(), onexc passes the exception
        error = exc[1] if isinstance(exc, tuple) else exc
        if isinstance(error, FileNotFoundError):
            return
        cause = error.strerror if isinstance(error, OSError) and error.strerror else str(error)
        failures.append(DeleteFailure(path=os.fspath(failed_path), cause=cause))

    if sys.version_info >= (3, 12):
        shutil.rmtree(path, onexc=_collect)
    else:
        shutil.rmtree(path, onerror=_collect)
    return failures


class ForceDeleteStrategy(DeleteStrategy):
    """Delete a file, or a directory together with all of its contents."""

    @property
    def name(self) -> str:
        return "Force"

    def _do_delete(self, path: str) -> None:
        if os.path.isdir(path) and not os.path.islink(path):
            failures = remove_tree(path)
            if failures:
                raise AggregateDeleteError(path, failures)
            logger.debug("Deleted tree %s", path)
            return

        try:
            os.unlink(path)
        except FileNotFoundError:
            return
        except OSError as e:
            raise DeleteFailedError(path, e.strerror or str(e)) from e
        logger.debug("Deleted %s", path)
