"""Application notifications – coalescing relay core and senders."""
from notify_relay.application.notifications.coalescer import (
    DEFAULT_DELAY,
    BatchCoalescer,
    CoalescerStats,
)
from notify_relay.application.notifications.item import NotificationItem, render_batch, render_item
from notify_relay.application.notifications.sender import InMemorySender, NotificationSender, SendResult
from notify_relay.application.notifications.telegram import TelegramConfig, TelegramSender

__all__ = [
    "DEFAULT_DELAY",
    "BatchCoalescer",
    "CoalescerStats",
    "InMemorySender",
    "NotificationItem",
    "NotificationSender",
    "SendResult",
    "TelegramConfig",
    "TelegramSender",
    "render_batch",
    "render_item",
]
