"""Config validation errors – raised before the relay starts serving."""
from notify_relay.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """The relay cannot start with the configuration it was given."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable is unset."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"{setting_name} must be set in the environment or the .env file",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """An environment variable is set but unusable.

    Only ``reason`` goes into the message; the raw value is kept on the
    instance and left out so a malformed token is never logged.
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name} is invalid: {reason}",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
