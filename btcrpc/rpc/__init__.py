"""Wire layer: request codec, HTTP transport and response classification."""

from btcrpc.rpc.classifier import classify_response
from btcrpc.rpc.codec import (
    JSONRPC_VERSION,
    Invocation,
    RequestEnvelope,
    RequestIdGenerator,
    ResponseEnvelope,
    decode_request,
    decode_response,
    default_request_ids,
    encode_request,
    encode_response,
)
from btcrpc.rpc.transport import HttpTransport, RawResponse, Transport

__all__ = [
    "HttpTransport",
    "Invocation",
    "JSONRPC_VERSION",
    "RawResponse",
    "RequestEnvelope",
    "RequestIdGenerator",
    "ResponseEnvelope",
    "Transport",
    "classify_response",
    "decode_request",
    "decode_response",
    "default_request_ids",
    "encode_request",
    "encode_response",
]
