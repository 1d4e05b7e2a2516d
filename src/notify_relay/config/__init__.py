"""Config – 12-factor settings and loaders."""

from notify_relay.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    RelaySettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from notify_relay.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RelaySettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
