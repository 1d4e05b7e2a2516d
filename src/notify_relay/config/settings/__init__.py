"""Config settings – 12-factor env-based configuration."""
from notify_relay.config.settings.base import Settings
from notify_relay.config.settings.factory import SettingsFactory
from notify_relay.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from notify_relay.config.settings.relay import RelaySettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "RelaySettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
