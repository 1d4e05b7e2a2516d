"""Application notifications – TelegramSender (Bot API over httpx)."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from notify_relay.adapters.http import HttpxHttpClient
from notify_relay.application.notifications.sender import SendResult
from notify_relay.kernel.errors import DeliveryError, ExternalServiceError, InfrastructureError

if TYPE_CHECKING:
    from notify_relay.config.settings import RelaySettings

__all__ = ["MAX_MESSAGE_LENGTH", "TelegramConfig", "TelegramSender", "split_message"]

MAX_MESSAGE_LENGTH = 4096


@dataclass
class TelegramConfig:
    bot_token: str
    chat_id: str
    parse_mode: str = ""  # "", "Markdown", "MarkdownV2" or "HTML"
    api_url: str = "https://api.telegram.org"
    timeout: float = 10.0

    @classmethod
    def from_settings(cls, settings: "RelaySettings") -> "TelegramConfig":
        return cls(
            bot_token=settings.telegram_bot_token,
            chat_id=settings.telegram_chat_id,
            parse_mode=settings.telegram_parse_mode,
            api_url=settings.telegram_api_url,
            timeout=settings.telegram_timeout,
        )


def split_message(text: str, limit: int = MAX_MESSAGE_LENGTH) -> list[str]:
    """Split *text* into chunks of at most *limit* characters.

    Breaks fall on line boundaries where possible; a single line longer
    than *limit* is cut hard.
    """
    if len(text) <= limit:
        return [text]
    chunks: list[str] = []
    current = ""
    for line in text.splitlines(keepends=True):
        while len(line) > limit:
            if current:
                chunks.append(current)
                current = ""
            chunks.append(line[:limit])
            line = line[limit:]
        if len(current) + len(line) > limit:
            chunks.append(current)
            current = ""
        current += line
    if current:
        chunks.append(current)
    # a lone separator can end up as its own chunk; Telegram rejects blank text
    return [chunk.strip("\n") for chunk in chunks if chunk.strip()]


class TelegramSender:
    """NotificationSender that posts to one chat via ``sendMessage``.

    The bot token is part of the request path, so it never appears in
    errors or results produced here.
    """

    def __init__(self, config: TelegramConfig, client: HttpxHttpClient | None = None) -> None:
        self._config = config
        self._client = client or HttpxHttpClient(
            base_url=config.api_url,
            timeout=config.timeout,
            service="telegram",
        )

    def _build_payload(self, text: str) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "chat_id": self._config.chat_id,
            "text": text,
            "disable_web_page_preview": True,
        }
        if self._config.parse_mode:
            payload["parse_mode"] = self._config.parse_mode
        return payload

    async def send(self, text: str) -> SendResult:
        message_ids: list[str] = []
        for chunk in split_message(text):
            try:
                message_ids.append(await self._send_chunk(chunk))
            except DeliveryError as exc:
                return SendResult(success=False, message_ids=tuple(message_ids), error=exc.message)
        return SendResult(success=True, message_ids=tuple(message_ids))

    async def _send_chunk(self, text: str) -> str:
        path = f"/bot{self._config.bot_token}/sendMessage"
        try:
            response = await self._client.post(path, json=self._build_payload(text))
        except ExternalServiceError as exc:
            raise DeliveryError(
                "telegram",
                f"Telegram rejected the message: {_describe(exc)}",
                status_code=exc.status_code,
                cause=exc,
            ) from exc
        except InfrastructureError as exc:
            raise DeliveryError("telegram", exc.message, cause=exc) from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise DeliveryError("telegram", "Telegram returned a non-JSON response", cause=exc) from exc
        if not isinstance(body, dict) or not body.get("ok"):
            body = body if isinstance(body, dict) else {}
            raise DeliveryError(
                "telegram",
                f"Telegram rejected the message: {body.get('description', 'unknown error')}",
                status_code=response.status_code,
            )
        return str(body.get("result", {}).get("message_id", ""))

    async def aclose(self) -> None:
        await self._client.aclose()


def _describe(exc: ExternalServiceError) -> str:
    """Prefer the Bot API ``description`` over the bare status line."""
    try:
        body = json.loads(exc.detail.get("body", ""))
    except ValueError:
        return exc.message
    if isinstance(body, dict) and body.get("description"):
        return str(body["description"])
    return exc.message
