"""
btcrpc - async client for the Bitcoin Core JSON-RPC interface.
"""

__version__ = "0.1.0"

from btcrpc.client import BitcoinClient, RemoteMethod
from btcrpc.config import ClientConfig, load_config
from btcrpc.registry import DEFAULT_REGISTRY, MethodGroup, MethodRegistry
from btcrpc.utils.exceptions import (
    ApplicationError,
    BitcoinRpcError,
    ClientError,
    DecodeError,
    InvalidArgumentsError,
    ServerError,
    TransportError,
    UnknownMethodError,
)

__all__ = [
    "ApplicationError",
    "BitcoinClient",
    "BitcoinRpcError",
    "ClientConfig",
    "ClientError",
    "DEFAULT_REGISTRY",
    "DecodeError",
    "InvalidArgumentsError",
    "MethodGroup",
    "MethodRegistry",
    "RemoteMethod",
    "ServerError",
    "TransportError",
    "UnknownMethodError",
    "load_config",
]
