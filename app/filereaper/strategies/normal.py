"""Normal delete strategy.

Removes files, symlinks and empty directories. A directory that still has
contents is left untouched and reported as a failure.
"""

import errno
import logging
import os

from filereaper.core.errors import DeleteFailedError
from filereaper.strategies.base import DeleteStrategy

logger = logging.getLogger(__name__)


class NormalDeleteStrategy(DeleteStrategy):
    """Delete a file or an empty directory; fail on non-empty directories."""

    @property
    def name(self) -> str:
        return "Normal"

    def _do_delete(self, path: str) -> None:
        try:
            # Directories (but not symlinks to directories)
            if os.path.isdir(path) and not os.path.islink(path):
                os.rmdir(path)
            else:
                os.unlink(path)
        except FileNotFoundError:
            return
        except OSError as e:
            if e.errno in (errno.ENOTEMPTY, errno.EEXIST):
                raise DeleteFailedError(path, "Directory not empty") from e
            raise DeleteFailedError(path, e.strerror or str(e)) from e
        logger.debug("Deleted %s", path)
