"""Delete strategies.

This module provides the abstract DeleteStrategy and the shared NORMAL,
FORCE and NOOP instances, plus lookup by name.
"""

from filereaper.core.errors import InvalidArgumentError
from filereaper.strategies.base import DeleteStrategy, coerce_path
from filereaper.strategies.force import ForceDeleteStrategy, remove_tree
from filereaper.strategies.noop import NoopDeleteStrategy
from filereaper.strategies.normal import NormalDeleteStrategy

NORMAL: DeleteStrategy = NormalDeleteStrategy()
FORCE: DeleteStrategy = ForceDeleteStrategy()
NOOP: DeleteStrategy = NoopDeleteStrategy()

STRATEGIES: dict[str, DeleteStrategy] = {
    "normal": NORMAL,
    "force": FORCE,
    "noop": NOOP,
}


def get_strategy(name: str) -> DeleteStrategy:
    """Look up a shared strategy instance by name.

    Args:
        name: Strategy name ("normal", "force" or "noop"), case-insensitive.

    Returns:
        The matching DeleteStrategy.

    Raises:
        InvalidArgumentError: If no strategy has that name.
    """
    try:
        return STRATEGIES[name.strip().lower()]
    except KeyError:
        valid = ", ".join(sorted(STRATEGIES))
        msg = f"Unknown delete strategy '{name}' (expected one of: {valid})"
        raise InvalidArgumentError(msg) from None


__all__ = [
    "FORCE",
    "NOOP",
    "NORMAL",
    "STRATEGIES",
    "DeleteStrategy",
    "ForceDeleteStrategy",
    "NoopDeleteStrategy",
    "NormalDeleteStrategy",
    "coerce_path",
    "get_strategy",
    "remove_tree",
]
