"""User settings for dirlist.

Default listing options can be stored in ~/.config/dirlist/config.toml
under a ``[defaults]`` table, for example::

    [defaults]
    color = true
    classify = true

Command-line flags switch options on in addition to these defaults.
"""

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from dirlist.core.paths import get_settings_path

logger = logging.getLogger(__name__)


class ListingDefaults(BaseModel):
    """Options enabled by default for every listing.

    Attributes:
        all: Show every entry including '.' and '..'.
        almost_all: Show dot files except '.' and '..'.
        color: Colorize names (only honored on a terminal).
        classify: Append type indicator characters.
        long_format: Show detailed metadata columns.
        recursive: Descend into subdirectories.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    all: bool = False
    almost_all: bool = False
    color: bool = False
    classify: bool = False
    long_format: bool = False
    recursive: bool = False


class Settings(BaseModel):
    """Top-level structure of the settings file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    defaults: ListingDefaults = ListingDefaults()


class SettingsError(Exception):
    """Raised when the settings file exists but cannot be used."""


def load_settings(path: Path | None = None) -> Settings:
    """Load user settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated Settings. A missing file yields default settings.

    Raises:
        SettingsError: If the file cannot be read, parsed or validated.
    """
    settings_path = path or get_settings_path()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        logger.debug("No settings file at %s", settings_path)
        return Settings()
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read {settings_path}: {e}") from e

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e

    logger.debug("Loaded settings from %s", settings_path)
    return settings
