"""Infrastructure errors – I/O failures, the notification channel."""

from __future__ import annotations

from typing import Any

from notify_relay.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class TimeoutError(InfrastructureError):  # noqa: A001
    """An I/O operation exceeded its deadline."""

    default_code = "timeout"


class ExternalServiceError(InfrastructureError):
    """An external service returned an unexpected response."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


class DeliveryError(ExternalServiceError):
    """The notification channel refused or failed to deliver a message."""

    default_code = "delivery_error"

    def __init__(
        self,
        channel: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(channel, message or f"Delivery via '{channel}' failed", **kwargs)
        self.channel = channel


__all__ = [
    "DeliveryError",
    "ExternalServiceError",
    "InfrastructureError",
    "TimeoutError",
]
