"""Observability – correlation context and structured logging."""

from notify_relay.observability.correlation import CorrelationContext, RequestContext
from notify_relay.observability.logging import LoggerFactory, SensitiveFieldsFilter, get_logger

__all__ = [
    "CorrelationContext",
    "LoggerFactory",
    "RequestContext",
    "SensitiveFieldsFilter",
    "get_logger",
]
