"""FastAPI adapter – application factory."""
from __future__ import annotations

import dataclasses
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from notify_relay import __version__
from notify_relay.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from notify_relay.adapters.fastapi.middleware import CorrelationIdMiddleware
from notify_relay.adapters.fastapi.routers import HealthRouter, IngestRouter
from notify_relay.application.notifications import (
    DEFAULT_DELAY,
    BatchCoalescer,
    NotificationSender,
    TelegramConfig,
    TelegramSender,
)
from notify_relay.config.settings import RelaySettings
from notify_relay.observability.logging import get_logger

_log = get_logger(__name__)


def create_app(
    settings: RelaySettings | None = None,
    *,
    sender: NotificationSender | None = None,
    delay: float = DEFAULT_DELAY,
) -> FastAPI:
    """Build the relay app around one :class:`BatchCoalescer`.

    *sender* defaults to a :class:`TelegramSender` configured from
    *settings*; one of the two is required.
    """
    if sender is None:
        if settings is None:
            raise ValueError("create_app() needs settings or an explicit sender")
        sender = TelegramSender(TelegramConfig.from_settings(settings))
    coalescer = BatchCoalescer(sender, delay=delay)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:  # noqa: ARG001
        _log.info("relay.started", delay=delay, sender=type(sender).__name__)
        try:
            yield
        finally:
            await coalescer.close()
            await sender.aclose()
            _log.info("relay.stopped", **dataclasses.asdict(coalescer.stats))

    async def coalescer_accepting() -> bool:
        return not coalescer.closed

    app = FastAPI(title="notify-relay", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.coalescer = coalescer
    app.state.sender = sender

    app.add_middleware(CorrelationIdMiddleware)
    FastAPIExceptionMapper().register(app)
    app.include_router(IngestRouter(coalescer))
    app.include_router(HealthRouter(readiness_checks=[coalescer_accepting]))
    return app


__all__ = ["create_app"]
