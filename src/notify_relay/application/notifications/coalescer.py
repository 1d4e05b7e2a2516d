"""Application notifications – BatchCoalescer.

Bursts of notifications arriving within one window are merged into a single
outbound message::

    Idle --enqueue--> WindowOpen --enqueue--> WindowOpen
    WindowOpen --(delay elapses, flush)--> Idle

A window opens on the first enqueue while idle and schedules exactly one
delayed flush.  The flush takes the whole batch, sends it outside the lock,
then releases the window.
"""
from __future__ import annotations

import asyncio
import contextlib
import contextvars
from dataclasses import dataclass
from datetime import UTC, datetime

from notify_relay.application.notifications.item import NotificationItem, render_batch
from notify_relay.application.notifications.sender import NotificationSender
from notify_relay.observability.logging import get_logger

__all__ = ["DEFAULT_DELAY", "BatchCoalescer", "CoalescerStats"]

DEFAULT_DELAY = 5.0

_log = get_logger(__name__)


@dataclass
class CoalescerStats:
    """Running counters for one coalescer."""

    enqueued: int = 0
    windows_opened: int = 0
    flushes: int = 0
    sent: int = 0
    failed: int = 0
    dropped: int = 0


class BatchCoalescer:
    """Buffer notifications and deliver each window's batch exactly once.

    Parameters
    ----------
    sender:
        Destination for composed messages.
    delay:
        Seconds between a window opening and its flush.  Fixed for the
        lifetime of the coalescer.
    """

    def __init__(self, sender: NotificationSender, *, delay: float = DEFAULT_DELAY) -> None:
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self._sender = sender
        self._delay = delay
        # guards _batch, _window_open and _flush_task; never held across a send
        self._lock = asyncio.Lock()
        # serialises flush bodies so at most one send is in flight
        self._flush_lock = asyncio.Lock()
        self._batch: list[NotificationItem] = []
        self._window_open = False
        self._flush_task: asyncio.Task[None] | None = None
        self._closed = False
        self.stats = CoalescerStats()

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def window_open(self) -> bool:
        return self._window_open

    @property
    def pending(self) -> int:
        """Number of buffered items not yet taken by a flush."""
        return len(self._batch)

    @property
    def closed(self) -> bool:
        return self._closed

    async def enqueue(self, item: NotificationItem) -> None:
        """Append *item* to the current batch, opening a window if none is open."""
        async with self._lock:
            if self._closed:
                self.stats.dropped += 1
                _log.warning("notification.dropped", reason="coalescer closed", origin=item.origin)
                return
            self._batch.append(item)
            self.stats.enqueued += 1
            opened = not self._window_open
            if opened:
                self._open_window()
            pending = len(self._batch)
        _log.debug("notification.enqueued", origin=item.origin, pending=pending, window_opened=opened)

    def _open_window(self) -> None:
        # caller holds self._lock
        self._window_open = True
        self.stats.windows_opened += 1
        # a fresh context keeps the opening request's log bindings out of the flush
        self._flush_task = asyncio.create_task(
            self._flush_later(),
            name="batch-coalescer-flush",
            context=contextvars.Context(),
        )
        _log.debug("window.opened", delay=self._delay)

    async def _flush_later(self) -> None:
        await asyncio.sleep(self._delay)
        await self.flush()

    async def flush(self) -> None:
        """Drain the batch, send it as one message, then release the window.

        Runs from the task scheduled when the window opened.  Delivery
        failures are logged and the batch is dropped.
        """
        scheduled = asyncio.current_task() is self._flush_task
        async with self._flush_lock:
            async with self._lock:
                batch, self._batch = self._batch, []
            try:
                if batch:
                    await self._deliver(batch)
            finally:
                async with self._lock:
                    self.stats.flushes += 1
                    if scheduled:
                        self._release_window()

    def _release_window(self) -> None:
        # caller holds self._lock
        self._flush_task = None
        if self._batch and not self._closed:
            # items arrived during the send; they get their own window
            self._open_window()
        else:
            self._window_open = False

    async def _deliver(self, batch: list[NotificationItem]) -> None:
        text = render_batch(batch)
        # seconds the oldest item spent buffered
        waited = round((datetime.now(UTC) - batch[0].received_at).total_seconds(), 3)
        try:
            result = await self._sender.send(text)
        except Exception as exc:  # noqa: BLE001
            self.stats.failed += 1
            _log.error("batch.send_failed", items=len(batch), waited=waited, error=repr(exc))
            return
        if result.success:
            self.stats.sent += 1
            _log.info(
                "batch.sent",
                items=len(batch),
                chars=len(text),
                waited=waited,
                message_ids=list(result.message_ids),
            )
        else:
            self.stats.failed += 1
            _log.error("batch.send_failed", items=len(batch), waited=waited, error=result.error)

    async def join(self) -> None:
        """Wait until no flush is scheduled or running."""
        while (task := self._flush_task) is not None:
            await asyncio.wait({task})
            if self._flush_task is task:
                break

    async def close(self) -> None:
        """Cancel a pending flush and discard anything still buffered."""
        async with self._lock:
            if self._closed:
                return
            self._closed = True
            task, self._flush_task = self._flush_task, None
            dropped = len(self._batch)
            self._batch = []
            self._window_open = False
            self.stats.dropped += dropped
        if task is not None and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
        _log.info("coalescer.closed", dropped=dropped)
