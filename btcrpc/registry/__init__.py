"""Registry of known Bitcoin Core remote procedures."""

from btcrpc.registry.catalog import BITCOIN_CORE_METHODS
from btcrpc.registry.registry import DEFAULT_REGISTRY, MethodRegistry
from btcrpc.registry.schema import NO_DEFAULT, ArgumentSpec, MethodDescriptor, MethodGroup

__all__ = [
    "ArgumentSpec",
    "BITCOIN_CORE_METHODS",
    "DEFAULT_REGISTRY",
    "MethodDescriptor",
    "MethodGroup",
    "MethodRegistry",
    "NO_DEFAULT",
]
