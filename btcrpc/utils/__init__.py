"""Utility functions for btcrpc."""

from btcrpc.utils.exceptions import (
    ApplicationError,
    BitcoinRpcError,
    ClientError,
    DecodeError,
    ErrorCategory,
    HttpStatusError,
    InvalidArgumentsError,
    ServerError,
    TransportError,
    UnknownMethodError,
    is_retryable,
    sanitize_error_message,
)

__all__ = [
    "ApplicationError",
    "BitcoinRpcError",
    "ClientError",
    "DecodeError",
    "ErrorCategory",
    "HttpStatusError",
    "InvalidArgumentsError",
    "ServerError",
    "TransportError",
    "UnknownMethodError",
    "is_retryable",
    "sanitize_error_message",
]
