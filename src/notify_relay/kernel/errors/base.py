"""Kernel errors – BaseError, root of the relay's error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """An error the relay knows how to report.

    Every subclass has a stable ``code`` slug that ends up in log events and
    in HTTP error bodies, so clients can branch on it without parsing the
    message.

    Args:
        message: Human-readable description.  Must never contain the bot
            token or a request URL.
        code: Overrides ``default_code``.
        detail: Extra JSON-serialisable context.
        cause: The lower-level exception being wrapped, kept as ``__cause__``.
    """

    default_code: str = "relay_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self, *, include_cause: bool = True) -> dict[str, Any]:
        """Serialise for logs, or with ``include_cause=False`` for HTTP bodies.

        The cause's repr may quote a request URL, so it stays out of
        anything sent to a client.
        """
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if include_cause and self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
