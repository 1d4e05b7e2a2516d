"""FastAPI adapter – ingest and health routers."""
import dataclasses
from typing import Any, Awaitable, Callable

import pydantic
from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from notify_relay.application.notifications import BatchCoalescer, NotificationItem
from notify_relay.kernel.errors import ValidationError
from notify_relay.observability.logging import get_logger

_log = get_logger(__name__)

ReadinessCheck = Callable[[], Awaitable[bool]]


class NotificationIn(pydantic.BaseModel):
    """JSON body accepted by the ingest endpoint."""

    text: str
    sender_id: str | None = None
    level: str | None = None


def parse_notification(
    body: bytes,
    content_type: str,
    *,
    sender_id: str | None = None,
    level: str | None = None,
) -> NotificationItem:
    """Build an item from a raw request body.

    ``application/json`` bodies follow :class:`NotificationIn`; anything
    else is taken as the UTF-8 text itself.  Query values win over body
    values.  Raises :class:`ValidationError` for missing or blank text.
    """
    if "json" in content_type.lower():
        try:
            payload = NotificationIn.model_validate_json(body or b"{}")
        except pydantic.ValidationError as exc:
            raise ValidationError(
                "Invalid notification body",
                errors=[
                    {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
                    for err in exc.errors()
                ],
            ) from exc
        text = payload.text
        sender_id = sender_id or payload.sender_id
        level = level or payload.level
    else:
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValidationError(
                "Notification body must be UTF-8 text",
                errors=[{"loc": ["body"], "msg": str(exc), "type": "unicode_decode"}],
            ) from exc

    if not text.strip():
        raise ValidationError(
            "Empty or invalid message body received",
            errors=[{"loc": ["body", "text"], "msg": "text must not be empty", "type": "value_error"}],
        )
    return NotificationItem(text=text, origin=sender_id or None, level=level or None)


def IngestRouter(coalescer: BatchCoalescer, path: str = "/notification") -> APIRouter:
    """Return the router feeding ``POST {path}`` into *coalescer*.

    Also exposes ``GET {path}/stats`` with the coalescer counters.
    """
    router = APIRouter(tags=["notifications"])

    @router.post(path, status_code=202)
    async def receive_notification(
        request: Request,
        sender_id: str | None = Query(default=None, description="Sender shown as 'From ...'"),
        sender: str | None = Query(default=None, include_in_schema=False),
        level: str | None = Query(default=None, description="Severity tag, e.g. 'error'"),
    ) -> dict[str, Any]:
        item = parse_notification(
            await request.body(),
            request.headers.get("content-type", ""),
            sender_id=sender_id or sender,
            level=level,
        )
        await coalescer.enqueue(item)
        _log.info("notification.accepted", origin=item.origin, chars=len(item.text))
        return {"status": "accepted", "pending": coalescer.pending}

    @router.get(f"{path}/stats")
    async def stats() -> dict[str, Any]:
        return {
            "window_open": coalescer.window_open,
            "pending": coalescer.pending,
            "delay": coalescer.delay,
            **dataclasses.asdict(coalescer.stats),
        }

    return router


def HealthRouter(
    path: str = "/health",
    readiness_checks: list[ReadinessCheck] | None = None,
) -> APIRouter:
    """Return a liveness + readiness health-check router.

    Liveness is at ``{path}/live``, readiness at ``{path}/ready``.  Every
    readiness check must return ``True`` for a 200; otherwise 503.
    """
    router = APIRouter(tags=["ops"])
    checks = readiness_checks or []

    @router.get(f"{path}/live")
    async def liveness() -> dict[str, str]:
        return {"status": "ok"}

    @router.get(f"{path}/ready")
    async def readiness() -> JSONResponse:
        results: dict[str, bool] = {}
        all_ok = True
        for check in checks:
            name = getattr(check, "__name__", repr(check))
            try:
                ok = await check()
            except Exception:  # noqa: BLE001
                _log.warning("readiness.check_failed", check=name, exc_info=True)
                ok = False
            results[name] = ok
            all_ok = all_ok and ok

        return JSONResponse(
            status_code=200 if all_ok else 503,
            content={"status": "ok" if all_ok else "degraded", "checks": results},
        )

    return router


__all__ = ["HealthRouter", "IngestRouter", "NotificationIn", "ReadinessCheck", "parse_notification"]
