"""Config – 12-factor settings and loaders."""

from commandbus.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from commandbus.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
