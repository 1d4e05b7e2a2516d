"""Application notifications – sender protocol and in-memory fake."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

__all__ = [
    "InMemorySender",
    "NotificationSender",
    "SendResult",
]


@dataclass(frozen=True)
class SendResult:
    """Outcome of delivering one composed message."""

    success: bool
    message_ids: tuple[str, ...] = ()
    error: str | None = None


@runtime_checkable
class NotificationSender(Protocol):
    """Port: deliver one composed text to a single fixed destination."""

    async def send(self, text: str) -> SendResult: ...

    async def aclose(self) -> None: ...


class InMemorySender:
    """Fake NotificationSender that captures sent texts.

    ``fail`` makes every send report failure without recording the text.
    """

    def __init__(self, *, fail: bool = False) -> None:
        self.sent: list[str] = []
        self.fail = fail
        self.closed = False

    async def send(self, text: str) -> SendResult:
        if self.fail:
            return SendResult(success=False, error="in-memory sender set to fail")
        self.sent.append(text)
        return SendResult(success=True, message_ids=(f"mem-{len(self.sent)}",))

    async def aclose(self) -> None:
        self.closed = True
