"""Application notifications – inbound notification item and rendering."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Iterable

__all__ = ["BATCH_SEPARATOR", "NotificationItem", "render_batch", "render_item"]

BATCH_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class NotificationItem:
    """One inbound notification."""

    text: str
    origin: str | None = None  # sender identifier, display only
    level: str | None = None  # severity tag, e.g. "error"
    received_at: datetime = field(default_factory=lambda: datetime.now(UTC), compare=False)


def render_item(item: NotificationItem) -> str:
    """``From {origin}: [{level}] {text}`` with absent parts left out."""
    line = item.text
    if item.level:
        line = f"[{item.level}] {line}"
    if item.origin:
        line = f"From {item.origin}: {line}"
    return line


def render_batch(items: Iterable[NotificationItem]) -> str:
    """Render items in order, separated by one blank line."""
    return BATCH_SEPARATOR.join(render_item(item) for item in items)
