"""Read-only lookup over a method catalog."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterator, Mapping, Sequence

from btcrpc.registry.catalog import BITCOIN_CORE_METHODS
from btcrpc.registry.schema import MethodDescriptor, MethodGroup
from btcrpc.utils.exceptions import UnknownMethodError


class MethodRegistry:
    """
    Exact, case-sensitive lookup of remote method names.

    The table is frozen at construction; no call ever mutates it, so one
    registry can be shared by any number of clients and concurrent calls.
    """

    def __init__(self, methods: Mapping[str, MethodDescriptor] | None = None):
        source = BITCOIN_CORE_METHODS if methods is None else methods
        self._methods: Mapping[str, MethodDescriptor] = MappingProxyType(dict(source))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._methods

    def __iter__(self) -> Iterator[str]:
        return iter(self._methods)

    def __len__(self) -> int:
        return len(self._methods)

    def exists(self, name: str) -> bool:
        return name in self

    def describe(self, name: str) -> MethodDescriptor | None:
        return self._methods.get(name)

    def arg_count(self, name: str) -> int | None:
        """Declared parameter count, or None for an unknown method."""
        descriptor = self.describe(name)
        return descriptor.max_args if descriptor is not None else None

    def require(self, name: str) -> MethodDescriptor:
        descriptor = self.describe(name)
        if descriptor is None:
            raise UnknownMethodError(name)
        return descriptor

    def check_arity(self, name: str, params: Sequence[Any]) -> None:
        self.require(name).check_arity(params)

    def names(self) -> list[str]:
        return sorted(self._methods)

    def by_group(self, group: MethodGroup) -> list[MethodDescriptor]:
        return [descriptor for descriptor in self._methods.values() if descriptor.group is group]


DEFAULT_REGISTRY = MethodRegistry()
