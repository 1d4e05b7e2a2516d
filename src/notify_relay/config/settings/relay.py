"""Config settings – RelaySettings for the notification relay process."""
from __future__ import annotations

import dataclasses
import logging

from notify_relay.config.settings.base import Settings
from notify_relay.config.validation import InvalidSettingValueError

PARSE_MODES: frozenset[str] = frozenset({"", "Markdown", "MarkdownV2", "HTML"})


@dataclasses.dataclass
class RelaySettings(Settings):
    """Process configuration, read once at startup.

    Environment variables carry no prefix: ``telegram_bot_token`` is read
    from ``TELEGRAM_BOT_TOKEN``, ``port`` from ``PORT`` and so on.
    """

    telegram_bot_token: str
    telegram_chat_id: str
    telegram_parse_mode: str = ""
    telegram_api_url: str = "https://api.telegram.org"
    telegram_timeout: float = 10.0
    host: str = "127.0.0.1"
    port: int = 10000
    log_level: str = "INFO"
    log_json: bool = False

    def _validate(self) -> None:
        if not self.telegram_bot_token.strip():
            raise InvalidSettingValueError("TELEGRAM_BOT_TOKEN", "", "must not be empty")
        if not str(self.telegram_chat_id).strip():
            raise InvalidSettingValueError("TELEGRAM_CHAT_ID", self.telegram_chat_id, "must not be empty")
        if self.telegram_parse_mode not in PARSE_MODES:
            raise InvalidSettingValueError(
                "TELEGRAM_PARSE_MODE",
                self.telegram_parse_mode,
                f"expected one of {sorted(PARSE_MODES)}",
            )
        if self.telegram_timeout <= 0:
            raise InvalidSettingValueError("TELEGRAM_TIMEOUT", self.telegram_timeout, "must be positive")
        if not 1 <= self.port <= 65535:
            raise InvalidSettingValueError("PORT", self.port, "must be within 1..65535")
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise InvalidSettingValueError("LOG_LEVEL", self.log_level, "unknown log level")

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["PARSE_MODES", "RelaySettings"]
