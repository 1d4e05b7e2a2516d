"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from notify_relay.kernel.errors import (
    BaseError,
    DomainError,
    InfrastructureError,
    TimeoutError,
    ValidationError,
)
from notify_relay.observability.correlation import CorrelationContext
from notify_relay.observability.logging import get_logger

_log = get_logger(__name__)


class FastAPIExceptionMapper:
    """Register error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "validation_error", "message": "...", "detail": {}, "correlation_id": "..."}

    Mappings
    --------
    ``ValidationError``     → 400
    ``DomainError``         → 422
    ``TimeoutError``        → 504
    ``InfrastructureError`` → 503
    """

    def __init__(self) -> None:
        # ORDER MATTERS: more-specific subtypes first
        self._map: list[tuple[type[Exception], int]] = [
            (ValidationError, 400),
            (DomainError, 422),
            (TimeoutError, 504),
            (InfrastructureError, 503),
        ]

    def status_for(self, exc: Exception) -> int:
        for exc_type, status in self._map:
            if isinstance(exc, exc_type):
                return status
        return 500

    def register(self, app: FastAPI) -> None:
        """Register all error handlers on *app*."""
        for exc_type, status in self._map:
            app.add_exception_handler(exc_type, self._make_handler(status))

    @staticmethod
    def _make_handler(code: int) -> Callable[[Request, Exception], Any]:
        async def handler(request: Request, exc: Exception) -> JSONResponse:
            ctx = CorrelationContext.get()
            if isinstance(exc, BaseError):
                body = exc.to_dict(include_cause=False)
            else:
                body = {"code": "error", "message": str(exc)}
            body["correlation_id"] = ctx.correlation_id if ctx is not None else None
            _log.warning("request.rejected", path=request.url.path, status=code, code=body["code"])
            return JSONResponse(status_code=code, content=body)

        return handler


__all__ = ["FastAPIExceptionMapper"]
