"""JSON-RPC 1.0 request/response envelopes as spoken by bitcoind."""

from __future__ import annotations

import itertools
import json
import secrets
import threading
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Sequence

JSONRPC_VERSION = "1.0"


@dataclass(frozen=True)
class Invocation:
    """One method call: name plus ordered positional params."""
    method: str
    params: tuple[Any, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, method: str, params: Sequence[Any] = ()) -> "Invocation":
        return cls(method=method, params=tuple(params))


@dataclass(frozen=True)
class RequestEnvelope:
    id: str
    method: str
    params: tuple[Any, ...]
    jsonrpc: str = JSONRPC_VERSION

    def to_dict(self) -> dict[str, Any]:
        return {"jsonrpc": self.jsonrpc, "id": self.id, "method": self.method, "params": list(self.params)}


@dataclass(frozen=True)
class ResponseEnvelope:
    result: Any = None
    error: dict[str, Any] | None = None
    id: Any = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class RequestIdGenerator:
    """Monotonically increasing request ids, rendered as strings."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            return str(next(self._counter))


default_request_ids = RequestIdGenerator()


def _mark_decimals(value: Any, marker: str, literals: dict[str, str]) -> Any:
    """Swap Decimals for unique string markers, remembering their exact literal."""
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Decimal {value} is not JSON compliant")
        token = f"{marker}{len(literals)}"
        literals[json.dumps(token)] = format(value, "f")
        return token
    if isinstance(value, dict):
        return {key: _mark_decimals(item, marker, literals) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_mark_decimals(item, marker, literals) for item in value]
    return value


def encode_request(invocation: Invocation, request_id: str) -> bytes:
    """
    Serialize an invocation as a compact JSON-RPC request body.

    Params go out in the order supplied, unmodified. Decimal values are
    written as exact JSON numbers (amounts never pass through float).
    Raises TypeError or ValueError for values JSON cannot represent
    (including NaN/Infinity).
    """
    envelope = RequestEnvelope(id=request_id, method=invocation.method, params=invocation.params)
    literals: dict[str, str] = {}
    data = _mark_decimals(envelope.to_dict(), f"decimal:{secrets.token_hex(8)}:", literals)
    body = json.dumps(data, separators=(",", ":"), allow_nan=False)
    for quoted, literal in literals.items():
        body = body.replace(quoted, literal)
    return body.encode("utf-8")


def decode_request(body: bytes | str) -> tuple[RequestEnvelope, Invocation]:
    """Inverse of encode_request; used by mock servers and tests."""
    data = json.loads(body)
    if not isinstance(data, dict) or not isinstance(data.get("method"), str):
        raise ValueError("not a JSON-RPC request object")
    params = data.get("params")
    if params is None:
        params = []
    if not isinstance(params, list):
        raise ValueError("JSON-RPC params must be an array")
    envelope = RequestEnvelope(
        id=data.get("id"),
        method=data["method"],
        params=tuple(params),
        jsonrpc=data.get("jsonrpc", JSONRPC_VERSION),
    )
    return envelope, Invocation(method=envelope.method, params=envelope.params)


def decode_response(body: bytes | str) -> ResponseEnvelope:
    """Parse a response body. Raises ValueError when it is not a JSON object."""
    try:
        data = json.loads(body)
    except RecursionError as exc:
        raise ValueError("response nests too deeply to decode") from exc
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    error = data.get("error")
    if error is not None and not isinstance(error, dict):
        error = {"code": None, "message": str(error)}
    return ResponseEnvelope(result=data.get("result"), error=error, id=data.get("id"))


def encode_response(result: Any = None, error: dict[str, Any] | None = None, request_id: Any = None) -> bytes:
    """Build a bitcoind-style response body; the counterpart used by stub servers."""
    return json.dumps({"result": result, "error": error, "id": request_id}).encode("utf-8")
