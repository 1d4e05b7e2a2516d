"""Observability – structured logging helpers."""
from notify_relay.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from notify_relay.observability.logging.factory import LoggerFactory
from notify_relay.observability.logging.processors import CorrelationProcessor, get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "CorrelationProcessor",
    "LoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
