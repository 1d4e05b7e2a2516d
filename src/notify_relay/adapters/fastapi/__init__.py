"""FastAPI adapter – ingest surface, middleware, exception mapper, app factory."""
from notify_relay.adapters.fastapi.app import create_app
from notify_relay.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from notify_relay.adapters.fastapi.middleware import CorrelationIdMiddleware
from notify_relay.adapters.fastapi.routers import HealthRouter, IngestRouter, parse_notification

__all__ = [
    "CorrelationIdMiddleware",
    "FastAPIExceptionMapper",
    "HealthRouter",
    "IngestRouter",
    "create_app",
    "parse_notification",
]
