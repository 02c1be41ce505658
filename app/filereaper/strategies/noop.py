"""No-op delete strategy.

Used when a caller wants a registration tracked (and counted) without the
path ever being removed.
"""

import logging

from filereaper.strategies.base import DeleteStrategy

logger = logging.getLogger(__name__)


class NoopDeleteStrategy(DeleteStrategy):
    """Leave the path in place and report success."""

    @property
    def name(self) -> str:
        return "Noop"

    def _do_delete(self, path: str) -> None:
        logger.debug("Keeping %s (no-op strategy)", path)
