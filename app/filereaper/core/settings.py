"""Reaper settings.

This module provides the settings model and loader for trackers. Settings
control how the reaper thread is created, which strategy applies when a
registration does not name one, and whether failures are logged.

Settings are read from ~/.config/filereaper/reaper.toml
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from filereaper.core.errors import SettingsError, SettingsNotFoundError, SettingsParseError
from filereaper.core.paths import get_settings_path
from filereaper.strategies import DeleteStrategy, get_strategy

logger = logging.getLogger(__name__)

# Strategy name type alias
StrategyName = Literal["normal", "force", "noop"]

DEFAULT_THREAD_NAME = "File Reaper"


class ReaperSettings(BaseModel):
    """Settings for a FileCleaningTracker and its reaper.

    Attributes:
        thread_name: Name given to the reaper thread.
        daemon: Run the reaper as a daemon thread so it never blocks
            interpreter exit.
        default_strategy: Strategy used when track() is given none.
        log_failures: Log a warning for every deletion failure recorded.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    thread_name: Annotated[
        str,
        Field(min_length=1, description="Reaper thread name"),
    ] = DEFAULT_THREAD_NAME
    daemon: Annotated[
        bool,
        Field(description="Run the reaper as a daemon thread"),
    ] = True
    default_strategy: Annotated[
        StrategyName,
        Field(description="Strategy used when track() is given none"),
    ] = "normal"
    log_failures: Annotated[
        bool,
        Field(description="Log a warning for each recorded deletion failure"),
    ] = True

    @property
    def effective_strategy(self) -> DeleteStrategy:
        """Resolve default_strategy to its shared strategy instance."""
        return get_strategy(self.default_strategy)


def load_settings(path: Path | None = None) -> ReaperSettings:
    """Load reaper settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default settings path.

    Returns:
        Validated ReaperSettings object.

    Raises:
        SettingsNotFoundError: If the settings file doesn't exist.
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        raise SettingsNotFoundError(f"Reaper settings not found: {settings_path}")

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read reaper settings: {e}") from e

    # Settings may live at the top level or under a [reaper] table
    section = data.get("reaper", data)
    if not isinstance(section, dict):
        raise SettingsError(f"Invalid 'reaper' section in {settings_path}")

    try:
        settings = ReaperSettings.model_validate(section)
    except (ValueError, ValidationError) as e:
        raise SettingsError(f"Invalid reaper settings content: {e}") from e

    logger.debug("Loaded reaper settings from %s", settings_path)
    return settings


def load_settings_or_default(path: Path | None = None) -> ReaperSettings:
    """Load reaper settings, falling back to defaults if the file is missing.

    Parse and schema errors still propagate so a broken file is not
    silently ignored.

    Args:
        path: Path to the settings file. If None, uses the default settings path.

    Returns:
        Loaded settings, or defaults when no file exists.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    try:
        return load_settings(path)
    except SettingsNotFoundError:
        return get_default_settings()


def get_default_settings() -> ReaperSettings:
    """Create default ReaperSettings.

    Returns:
        ReaperSettings with default values.
    """
    return ReaperSettings()
