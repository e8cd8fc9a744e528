"""Core configuration for dirlist.

This module provides the resolved listing configuration, the user
settings loader and XDG path helpers.
"""

from dirlist.core.config import ListingConfig, resolve_hidden_policy
from dirlist.core.paths import get_config_dir, get_settings_path
from dirlist.core.settings import ListingDefaults, Settings, SettingsError, load_settings

__all__ = [
    "ListingConfig",
    "ListingDefaults",
    "Settings",
    "SettingsError",
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "resolve_hidden_policy",
]
