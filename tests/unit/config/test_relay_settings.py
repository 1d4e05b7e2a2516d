"""Unit tests for RelaySettings, loaders and SettingsFactory."""

import dataclasses
from dataclasses import dataclass
from typing import ClassVar

import pytest

from notify_relay.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    RelaySettings,
    Settings,
    SettingsFactory,
)
from notify_relay.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

ENV_KEYS = (
    "TELEGRAM_BOT_TOKEN",
    "TELEGRAM_CHAT_ID",
    "TELEGRAM_PARSE_MODE",
    "TELEGRAM_API_URL",
    "TELEGRAM_TIMEOUT",
    "HOST",
    "PORT",
    "LOG_LEVEL",
    "LOG_JSON",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so monkeypatch restores the original state even when
    # load_dotenv writes to os.environ behind its back
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "placeholder")
        monkeypatch.delenv(key)


@pytest.fixture
def required_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
    monkeypatch.setenv("TELEGRAM_CHAT_ID", "-1001")


@dataclass
class PrefixedSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    name: str = "relay"
    retries: int = 0


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults(self, required_env: None) -> None:
        settings = EnvSettingsLoader().load(RelaySettings)
        assert settings.telegram_bot_token == "123:abc"
        assert settings.telegram_chat_id == "-1001"
        assert settings.telegram_parse_mode == ""
        assert settings.host == "127.0.0.1"
        assert settings.port == 10000
        assert settings.log_level == "INFO"
        assert settings.log_json is False

    def test_coerces_types(self, required_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("TELEGRAM_TIMEOUT", "2.5")
        monkeypatch.setenv("LOG_JSON", "yes")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        settings = EnvSettingsLoader().load(RelaySettings)
        assert settings.port == 8080
        assert settings.telegram_timeout == 2.5
        assert settings.log_json is True
        assert settings.log_level == "DEBUG"
        assert settings.log_level_value == 10

    def test_missing_token(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TELEGRAM_CHAT_ID", "1")
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(RelaySettings)
        assert exc_info.value.setting_name == "TELEGRAM_BOT_TOKEN"

    def test_non_numeric_port(self, required_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "http")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(RelaySettings)
        assert exc_info.value.setting_name == "PORT"

    def test_prefix_applied(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_RETRIES", "3")
        settings = EnvSettingsLoader().load(PrefixedSettings)
        assert settings.retries == 3
        assert settings.name == "relay"


# ---------------------------------------------------------------------------
# RelaySettings validation
# ---------------------------------------------------------------------------


class TestRelaySettingsValidation:
    def test_valid(self) -> None:
        settings = RelaySettings(telegram_bot_token="t", telegram_chat_id="1", telegram_parse_mode="HTML")
        assert settings.telegram_parse_mode == "HTML"

    @pytest.mark.parametrize(
        ("overrides", "setting"),
        [
            ({"telegram_bot_token": "  "}, "TELEGRAM_BOT_TOKEN"),
            ({"telegram_chat_id": ""}, "TELEGRAM_CHAT_ID"),
            ({"telegram_parse_mode": "markdown"}, "TELEGRAM_PARSE_MODE"),
            ({"telegram_timeout": 0}, "TELEGRAM_TIMEOUT"),
            ({"port": 70000}, "PORT"),
            ({"log_level": "LOUD"}, "LOG_LEVEL"),
        ],
    )
    def test_invalid(self, overrides: dict, setting: str) -> None:
        values = {"telegram_bot_token": "t", "telegram_chat_id": "1", **overrides}
        with pytest.raises(InvalidSettingValueError) as exc_info:
            RelaySettings(**values)
        assert exc_info.value.setting_name == setting

    def test_invalid_is_config_error(self) -> None:
        with pytest.raises(ConfigError):
            RelaySettings(telegram_bot_token="t", telegram_chat_id="1", port=0)

    def test_token_not_in_error_message(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            RelaySettings(telegram_bot_token="   ", telegram_chat_id="1")
        assert exc_info.value.value == ""


# ---------------------------------------------------------------------------
# DotenvSettingsLoader
# ---------------------------------------------------------------------------


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("TELEGRAM_BOT_TOKEN=from-file\nTELEGRAM_CHAT_ID=42\nPORT=9999\n")
        settings = DotenvSettingsLoader(str(env_file)).load(RelaySettings)
        assert settings.telegram_bot_token == "from-file"
        assert settings.telegram_chat_id == "42"
        assert settings.port == 9999

    def test_environment_wins_without_override(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TELEGRAM_CHAT_ID", "from-env")
        env_file = tmp_path / ".env"
        env_file.write_text("TELEGRAM_BOT_TOKEN=t\nTELEGRAM_CHAT_ID=from-file\n")
        settings = DotenvSettingsLoader(str(env_file)).load(RelaySettings)
        assert settings.telegram_chat_id == "from-env"

    def test_missing_file_falls_back_to_env(self, tmp_path, required_env: None) -> None:
        settings = DotenvSettingsLoader(str(tmp_path / "absent.env")).load(RelaySettings)
        assert settings.telegram_bot_token == "123:abc"


# ---------------------------------------------------------------------------
# SettingsFactory
# ---------------------------------------------------------------------------


class TestSettingsFactory:
    def test_overrides_fill_required(self) -> None:
        settings = SettingsFactory.create(
            RelaySettings,
            loaders=[EnvSettingsLoader()],
            overrides={"telegram_bot_token": "t", "telegram_chat_id": "1"},
        )
        assert settings.telegram_bot_token == "t"

    def test_env_and_overrides_merge(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8081")
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "env-token")
        settings = SettingsFactory.create(
            RelaySettings,
            loaders=[EnvSettingsLoader()],
            overrides={"telegram_chat_id": "1"},
        )
        assert settings.port == 8081
        assert settings.telegram_bot_token == "env-token"

    def test_missing_required_after_merge(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            SettingsFactory.create(RelaySettings, loaders=[EnvSettingsLoader()], overrides={"telegram_bot_token": "t"})
        assert exc_info.value.setting_name == "TELEGRAM_CHAT_ID"

    def test_invalid_value_propagates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "not-a-port")
        with pytest.raises(InvalidSettingValueError):
            SettingsFactory.create(RelaySettings, loaders=[EnvSettingsLoader()])

    def test_unknown_override_is_config_error(self) -> None:
        with pytest.raises(ConfigError):
            SettingsFactory.create(
                RelaySettings,
                overrides={"telegram_bot_token": "t", "telegram_chat_id": "1", "bogus": True},
            )

    def test_builds_from_env_file(self, tmp_path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("TELEGRAM_BOT_TOKEN=123:abc\nTELEGRAM_CHAT_ID=-1001\nPORT=10002\n")
        settings = SettingsFactory.create(RelaySettings, loaders=[DotenvSettingsLoader(str(env_file))])
        assert isinstance(settings, RelaySettings)
        assert settings.port == 10002
        assert settings.telegram_chat_id == "-1001"


# ---------------------------------------------------------------------------
# Settings base
# ---------------------------------------------------------------------------


class TestSettingsBase:
    def test_prefix_is_not_a_field(self) -> None:
        names = [f.name for f in dataclasses.fields(RelaySettings)]
        assert "_prefix" not in names
        assert names[:2] == ["telegram_bot_token", "telegram_chat_id"]

    def test_env_prefix(self) -> None:
        assert RelaySettings.env_prefix() == ""
        assert PrefixedSettings.env_prefix() == "APP"

    def test_invalid_value_kept_out_of_message(self) -> None:
        err = InvalidSettingValueError("TELEGRAM_BOT_TOKEN", "123:leaky", "must not be empty")
        assert "123:leaky" not in err.message
        assert err.detail == {"setting": "TELEGRAM_BOT_TOKEN"}

    def test_non_numeric_value_kept_out_of_message(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TELEGRAM_TIMEOUT", "soon-ish")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load_values(RelaySettings)
        assert "soon-ish" not in exc_info.value.message
        assert exc_info.value.reason == "expected float"
