"""Config settings – 12-factor env-based configuration."""
from commandbus.config.settings.base import Settings
from commandbus.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
