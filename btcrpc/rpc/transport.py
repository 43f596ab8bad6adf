"""HTTP transport for JSON-RPC calls."""

from __future__ import annotations

import asyncio
import contextlib
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import httpx
from loguru import logger

from btcrpc.utils.exceptions import TransportError

if TYPE_CHECKING:
    from btcrpc.config.schema import ClientConfig

CONTENT_TYPE = "text/plain"


@dataclass(frozen=True)
class RawResponse:
    """Status plus the fully assembled body of one HTTP exchange."""
    status_code: int
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)


@runtime_checkable
class Transport(Protocol):
    """Send one request body, get back the complete response."""

    async def send(
        self,
        payload: bytes,
        config: "ClientConfig",
        *,
        method: str = "",
        abort: asyncio.Event | None = None,
    ) -> RawResponse:
        ...


class HttpTransport:
    """
    One authenticated POST per call over httpx.

    Each call opens and closes its own AsyncClient, so nothing is pooled
    or shared between concurrent calls. The response body is read to the
    end before returning; classification never sees a partial body.
    """

    def __init__(self, *, transport: httpx.AsyncBaseTransport | None = None):
        self._transport = transport

    def _timeout(self, config: "ClientConfig") -> httpx.Timeout:
        return httpx.Timeout(config.timeout)

    async def send(
        self,
        payload: bytes,
        config: "ClientConfig",
        *,
        method: str = "",
        abort: asyncio.Event | None = None,
    ) -> RawResponse:
        if abort is None:
            return await self._exchange(payload, config, method)
        if abort.is_set():
            raise TransportError(method, "aborted by caller", aborted=True)

        exchange = asyncio.ensure_future(self._exchange(payload, config, method))
        aborted = asyncio.ensure_future(abort.wait())
        try:
            await asyncio.wait({exchange, aborted}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            aborted.cancel()
            if not exchange.done():
                exchange.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await exchange
        if exchange.cancelled():
            logger.debug("RPC {} aborted by caller", method)
            raise TransportError(method, "aborted by caller", aborted=True)
        return exchange.result()

    async def _exchange(self, payload: bytes, config: "ClientConfig", method: str) -> RawResponse:
        auth = httpx.BasicAuth(config.user, config.password.get_secret_value())
        headers = {"Content-Type": CONTENT_TYPE}
        try:
            async with httpx.AsyncClient(
                auth=auth,
                timeout=self._timeout(config),
                transport=self._transport,
            ) as client:
                async with client.stream("POST", config.endpoint, content=payload, headers=headers) as resp:
                    chunks = [chunk async for chunk in resp.aiter_bytes()]
                    return RawResponse(
                        status_code=resp.status_code,
                        body=b"".join(chunks),
                        headers=dict(resp.headers),
                    )
        except httpx.TimeoutException as exc:
            raise TransportError(method, f"timeout talking to {config.endpoint}: {exc}", timeout=True) from exc
        except httpx.RequestError as exc:
            raise TransportError(method, f"network error talking to {config.endpoint}: {exc}") from exc
