"""Observability – RequestContext, CorrelationContext."""
from __future__ import annotations

import dataclasses
from contextvars import ContextVar
from uuid import uuid4


@dataclasses.dataclass(frozen=True)
class RequestContext:
    """Ambient context for a single ingest request."""
    correlation_id: str
    trace_id: str | None = None


_CTX_VAR: ContextVar[RequestContext | None] = ContextVar("_relay_request_ctx", default=None)


class CorrelationContext:
    """Ambient correlation context stored in a ``ContextVar``."""

    @staticmethod
    def set(ctx: RequestContext) -> None:
        _CTX_VAR.set(ctx)

    @staticmethod
    def get() -> RequestContext | None:
        return _CTX_VAR.get()

    @staticmethod
    def clear() -> None:
        _CTX_VAR.set(None)

    @staticmethod
    def set_from_headers(headers: dict[str, str]) -> RequestContext:
        """Extract correlation context from HTTP headers and store it.

        Priority order for correlation ID:
        ``X-Correlation-ID`` → ``X-Request-ID`` → trace-id of a W3C
        ``traceparent`` → generated UUID.

        All header names are matched case-insensitively.
        """
        norm: dict[str, str] = {k.lower(): v.strip() for k, v in headers.items()}

        # W3C traceparent: 00-{trace-id}-{parent-id}-{flags}
        trace_id: str | None = None
        traceparent = norm.get("traceparent")
        if traceparent:
            parts = traceparent.split("-")
            if len(parts) >= 2 and parts[1]:
                trace_id = parts[1]

        correlation_id = (
            norm.get("x-correlation-id")
            or norm.get("x-request-id")
            or trace_id
            or str(uuid4())
        )

        ctx = RequestContext(correlation_id=correlation_id, trace_id=trace_id)
        _CTX_VAR.set(ctx)
        return ctx


__all__ = ["CorrelationContext", "RequestContext"]
