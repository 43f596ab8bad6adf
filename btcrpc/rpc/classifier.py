"""Map an HTTP exchange onto a call result or a typed failure."""

from __future__ import annotations

from typing import Any

from loguru import logger

from btcrpc.rpc.codec import ResponseEnvelope, decode_response
from btcrpc.rpc.transport import RawResponse
from btcrpc.utils.exceptions import ApplicationError, ClientError, DecodeError, ServerError


def _embedded_rpc_error(body: bytes) -> dict[str, Any] | None:
    """bitcoind often explains a 4xx/5xx with a regular envelope; keep it if present."""
    try:
        envelope = decode_response(body)
    except ValueError:
        return None
    return envelope.error


def classify_response(method: str, response: RawResponse) -> Any:
    """
    Return the `result` of a successful call, or raise.

    - 400..499 -> ClientError
    - 500..599 -> ServerError
    - anything else is decoded: invalid JSON -> DecodeError, non-null
      `error` -> ApplicationError, otherwise `result` is returned.
    """
    status = response.status_code
    logger.debug("RPC {} <- status={} bytes={}", method, status, len(response.body))

    if 400 <= status < 500:
        raise ClientError(method, status, _embedded_rpc_error(response.body))
    if 500 <= status < 600:
        raise ServerError(method, status, _embedded_rpc_error(response.body))

    try:
        envelope: ResponseEnvelope = decode_response(response.body)
    except ValueError as exc:
        raise DecodeError(method, response.body, reason=str(exc) or type(exc).__name__) from exc

    if envelope.failed:
        error = envelope.error or {}
        code = error.get("code")
        raise ApplicationError(
            method,
            code if isinstance(code, int) else None,
            str(error.get("message") or "unknown error"),
            data=error.get("data"),
        )
    return envelope.result
