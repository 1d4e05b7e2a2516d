"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from notify_relay.kernel.errors import ExternalServiceError, TimeoutError as AppTimeoutError


class HttpxHttpClient:
    """Thin async httpx wrapper with structured error mapping.

    ``service`` names the remote side in raised errors; request URLs are
    never copied into error messages because they may carry credentials.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        *,
        service: str = "http",
        **kwargs: Any,
    ) -> None:
        self._service = service
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)

    async def aclose(self) -> None:
        await self._client.aclose()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("POST", url, **kwargs)

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.TimeoutException as exc:
            raise AppTimeoutError(f"HTTP request to {self._service} timed out: {method}") from exc
        except httpx.HTTPStatusError as exc:
            raise ExternalServiceError(
                service=self._service,
                message=f"HTTP {exc.response.status_code} from {self._service}",
                status_code=exc.response.status_code,
                detail={"body": exc.response.text[:500]},
            ) from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(
                service=self._service,
                message=f"{type(exc).__name__} while calling {self._service}",
            ) from exc


__all__ = ["HttpxHttpClient"]
