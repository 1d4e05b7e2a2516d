"""Observability – LoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from notify_relay.observability.logging.filters import SensitiveFieldsFilter
from notify_relay.observability.logging.processors import CorrelationProcessor


class LoggerFactory:
    """Configure structlog on top of the stdlib root logger.

    ``json=True`` renders one JSON object per line; otherwise a
    human-readable console line is produced.  Records emitted by
    third-party libraries through :mod:`logging` (uvicorn, httpx) go
    through the same formatter.
    """

    @staticmethod
    def configure(
        level: int = logging.INFO,
        *,
        json: bool = False,
        sensitive_fields: frozenset[str] | None = None,
    ) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            CorrelationProcessor(),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            SensitiveFieldsFilter(sensitive_fields),
        ]

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        final_processors: list[Any] = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
        if json:
            final_processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
        else:
            final_processors.append(structlog.dev.ConsoleRenderer(colors=False))
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=final_processors,
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)
        # httpx logs request URLs at INFO, and the Telegram URL embeds the bot token
        logging.getLogger("httpx").setLevel(max(level, logging.WARNING))


__all__ = ["LoggerFactory"]
