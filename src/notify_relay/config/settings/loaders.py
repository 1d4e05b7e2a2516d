"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from dotenv import load_dotenv

from notify_relay.config.settings.base import Settings
from notify_relay.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)


def env_key(settings_class: type[Settings], field_name: str) -> str:
    """Environment variable name for *field_name* of *settings_class*."""
    prefix = settings_class.env_prefix()
    return f"{prefix}_{field_name}".upper().lstrip("_")


def is_required(field: dataclasses.Field) -> bool:  # type: ignore[type-arg]
    return (
        field.default is dataclasses.MISSING
        and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
    )


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source.

    Subclasses implement :meth:`load_values`, returning only the fields the
    source actually provides; :meth:`load` builds a full instance from them.
    """

    @abc.abstractmethod
    def load_values(self, settings_class: type[Settings]) -> dict[str, Any]: ...

    def load(self, settings_class: type[T]) -> T:
        values = self.load_values(settings_class)
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            if field.name not in values and is_required(field):
                raise MissingRequiredSettingError(env_key(settings_class, field.name))
        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}") from exc


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables."""

    def load_values(self, settings_class: type[Settings]) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            key = env_key(settings_class, field.name)
            raw = os.environ.get(key)
            if raw is None:
                continue
            values[field.name] = self._coerce(key, raw, field.type)
        return values

    def _coerce(self, key: str, value: str, type_hint: Any) -> Any:
        try:
            if type_hint is bool or type_hint == "bool":
                return value.strip().lower() in ("1", "true", "yes", "on")
            if type_hint is int or type_hint == "int":
                return int(value)
            if type_hint is float or type_hint == "float":
                return float(value)
        except ValueError as exc:
            raise InvalidSettingValueError(key, value, f"expected {getattr(type_hint, '__name__', type_hint)}") from exc
        return value


class DotenvSettingsLoader(EnvSettingsLoader):
    """Load a ``.env`` file into the environment, then read it like ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load_values(self, settings_class: type[Settings]) -> dict[str, Any]:
        load_dotenv(self._env_file, override=self._override)
        return super().load_values(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "env_key"]
