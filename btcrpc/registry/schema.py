"""Method metadata types for the RPC registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Sequence

from btcrpc.utils.exceptions import InvalidArgumentsError


class MethodGroup(Enum):
    """Help groups as published by `bitcoin-cli help`."""
    BLOCKCHAIN = "blockchain"
    CONTROL = "control"
    GENERATING = "generating"
    MINING = "mining"
    NETWORK = "network"
    RAWTRANSACTIONS = "rawtransactions"
    UTIL = "util"
    WALLET = "wallet"


class _NoDefault:
    def __repr__(self) -> str:
        return "NO_DEFAULT"


NO_DEFAULT: Any = _NoDefault()


@dataclass(frozen=True)
class ArgumentSpec:
    """One positional parameter of a remote method."""
    name: str
    required: bool = False
    default: Any = NO_DEFAULT
    valid_values: str | tuple[Any, ...] | None = None  # hint only, never enforced

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT


@dataclass(frozen=True)
class MethodDescriptor:
    """Registry entry: name, group, description and ordered parameters."""
    name: str
    group: MethodGroup
    description: str = ""
    args: tuple[ArgumentSpec, ...] = field(default_factory=tuple)

    @property
    def max_args(self) -> int:
        return len(self.args)

    @property
    def min_args(self) -> int:
        """Position of the last required argument + 1 (earlier optionals must be sent as null)."""
        required = [index for index, spec in enumerate(self.args) if spec.required]
        return required[-1] + 1 if required else 0

    @property
    def arg_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.args)

    def check_arity(self, params: Sequence[Any]) -> None:
        count = len(params)
        if count < self.min_args or count > self.max_args:
            if self.min_args == self.max_args:
                expected = str(self.max_args)
            else:
                expected = f"{self.min_args}..{self.max_args}"
            raise InvalidArgumentsError(self.name, f"expected {expected} params, got {count}")

    def bind(self, args: Sequence[Any], kwargs: Mapping[str, Any] | None = None) -> list[Any]:
        """
        Map a Python call onto the positional wire list.

        Gaps before the last supplied argument get the declared default, or
        null when there is none. Trailing unsupplied optionals are omitted.
        """
        kwargs = dict(kwargs or {})
        if len(args) > self.max_args:
            raise InvalidArgumentsError(
                self.name, f"takes at most {self.max_args} params, got {len(args)}"
            )
        unknown = [key for key in kwargs if key not in self.arg_names]
        if unknown:
            raise InvalidArgumentsError(self.name, f"unexpected keyword argument '{unknown[0]}'")

        slots: list[Any] = list(args) + [NO_DEFAULT] * (self.max_args - len(args))
        for index, spec in enumerate(self.args):
            if spec.name not in kwargs:
                continue
            if index < len(args):
                raise InvalidArgumentsError(self.name, f"got multiple values for argument '{spec.name}'")
            slots[index] = kwargs[spec.name]

        supplied = [index for index, value in enumerate(slots) if value is not NO_DEFAULT]
        last = supplied[-1] if supplied else -1
        for index, spec in enumerate(self.args):
            if spec.required and slots[index] is NO_DEFAULT:
                raise InvalidArgumentsError(self.name, f"missing required argument '{spec.name}'")
            if index < last and slots[index] is NO_DEFAULT:
                slots[index] = spec.default if spec.has_default else None
        return slots[: last + 1]
