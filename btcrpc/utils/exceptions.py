"""
Exception hierarchy and error handling utilities for btcrpc.

Provides:
- One exception class per failure kind of a remote call
- Error categorization (validation, http, decode, application, transport)
- Safe error message formatting (credentials never leak)
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Error categories for classification."""
    VALIDATION = "validation"
    CLIENT = "client"
    SERVER = "server"
    DECODE = "decode"
    APPLICATION = "application"
    TRANSPORT = "transport"
    TIMEOUT = "timeout"


_RETRYABLE_CATEGORIES = (ErrorCategory.SERVER, ErrorCategory.TRANSPORT, ErrorCategory.TIMEOUT)


class BitcoinRpcError(Exception):
    """Base exception for all btcrpc errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.TRANSPORT,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    @property
    def retryable(self) -> bool:
        """Advisory only; the client itself never retries."""
        return self.category in _RETRYABLE_CATEGORIES

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class UnknownMethodError(BitcoinRpcError):
    """Method name is not in the registry. Raised before any I/O."""

    def __init__(self, method: str):
        super().__init__(
            f"unknown method '{method}'",
            code="UNKNOWN_METHOD",
            category=ErrorCategory.VALIDATION,
            details={"method": method},
        )
        self.method = method


class InvalidArgumentsError(BitcoinRpcError):
    """Arguments do not fit the method's declared parameters."""

    def __init__(self, method: str, reason: str):
        super().__init__(
            f"invalid args for method '{method}': {reason}",
            code="INVALID_ARGUMENTS",
            category=ErrorCategory.VALIDATION,
            details={"method": method, "reason": reason},
        )
        self.method = method
        self.reason = reason


class HttpStatusError(BitcoinRpcError):
    """HTTP 4xx/5xx answer. `rpc_error` is set when the body was still an envelope."""

    label = "HTTP error"

    def __init__(
        self,
        method: str,
        status_code: int,
        *,
        code: str,
        category: ErrorCategory,
        rpc_error: dict[str, Any] | None = None,
    ):
        message = f"[{self.label}] Failed to request method '{method}' with status code '{status_code}'"
        if rpc_error and rpc_error.get("message"):
            message += f": {rpc_error['message']}"
        super().__init__(
            message,
            code=code,
            category=category,
            details={"method": method, "status_code": status_code, "rpc_error": rpc_error},
        )
        self.method = method
        self.status_code = status_code
        self.rpc_error = rpc_error


class ClientError(HttpStatusError):
    label = "Client error"

    def __init__(self, method: str, status_code: int, rpc_error: dict[str, Any] | None = None):
        super().__init__(
            method,
            status_code,
            code="HTTP_CLIENT_ERROR",
            category=ErrorCategory.CLIENT,
            rpc_error=rpc_error,
        )


class ServerError(HttpStatusError):
    label = "Server error"

    def __init__(self, method: str, status_code: int, rpc_error: dict[str, Any] | None = None):
        super().__init__(
            method,
            status_code,
            code="HTTP_SERVER_ERROR",
            category=ErrorCategory.SERVER,
            rpc_error=rpc_error,
        )


class DecodeError(BitcoinRpcError):
    """Response body could not be decoded as a JSON-RPC envelope."""

    PREVIEW_CHARS = 200

    def __init__(self, method: str, body: bytes, reason: str = "invalid JSON"):
        preview = body[: self.PREVIEW_CHARS].decode("utf-8", errors="replace")
        super().__init__(
            f"failed to parse response for method '{method}' ({reason}): '{preview}'",
            code="DECODE_ERROR",
            category=ErrorCategory.DECODE,
            details={"method": method, "reason": reason, "body_size": len(body)},
        )
        self.method = method
        self.body = body
        self.reason = reason


class ApplicationError(BitcoinRpcError):
    """The node answered with a non-null JSON-RPC `error` object."""

    def __init__(self, method: str, rpc_code: int | None, rpc_message: str, data: Any = None):
        super().__init__(
            f"method '{method}' failed with RPC error {rpc_code}: {rpc_message}",
            code="APPLICATION_ERROR",
            category=ErrorCategory.APPLICATION,
            details={"method": method, "rpc_code": rpc_code, "rpc_message": rpc_message, "data": data},
        )
        self.method = method
        self.rpc_code = rpc_code
        self.rpc_message = rpc_message
        self.data = data


class TransportError(BitcoinRpcError):
    """Connection-level failure: refused, reset, DNS, timeout or caller abort."""

    def __init__(self, method: str, reason: str, *, timeout: bool = False, aborted: bool = False):
        if aborted:
            code = "TRANSPORT_ABORTED"
        elif timeout:
            code = "TRANSPORT_TIMEOUT"
        else:
            code = "TRANSPORT_ERROR"
        reason = sanitize_error_message(reason)
        super().__init__(
            f"request for method '{method}' failed: {reason}",
            code=code,
            category=ErrorCategory.TIMEOUT if timeout else ErrorCategory.TRANSPORT,
            details={"method": method, "reason": reason},
        )
        self.method = method
        self.reason = reason
        self.aborted = aborted


_SENSITIVE_PATTERNS = [
    (re.compile(r"(://)[^/\s:@]+:[^/\s@]+@"), r"\1[REDACTED]@"),
    (re.compile(r"(basic\s+)[a-zA-Z0-9+/]+=*", re.IGNORECASE), r"\1[REDACTED]"),
    (re.compile(r"((?:rpc)?password|auth)([=:]\s*)['\"]?[^\s'\",}]+['\"]?", re.IGNORECASE), r"\1\2[REDACTED]"),
]


def sanitize_error_message(message: str) -> str:
    """Remove credentials from error messages."""
    sanitized = message
    for pattern, replacement in _SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)
    return sanitized


def is_retryable(exc: BaseException) -> bool:
    """Whether a caller-side retry policy may reasonably retry `exc`."""
    return isinstance(exc, BitcoinRpcError) and exc.retryable
