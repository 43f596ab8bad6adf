"""Async client for the Bitcoin Core JSON-RPC interface."""

from __future__ import annotations

import asyncio
from typing import Any

from loguru import logger

from btcrpc.config.schema import ClientConfig
from btcrpc.registry.registry import DEFAULT_REGISTRY, MethodRegistry
from btcrpc.registry.schema import MethodDescriptor
from btcrpc.rpc.classifier import classify_response
from btcrpc.rpc.codec import Invocation, RequestIdGenerator, default_request_ids, encode_request
from btcrpc.rpc.transport import HttpTransport, Transport
from btcrpc.utils.exceptions import (
    ApplicationError,
    BitcoinRpcError,
    InvalidArgumentsError,
    UnknownMethodError,
)


class RemoteMethod:
    """A registry method bound to a client: `await client.getblock(blockhash, verbosity=2)`."""

    def __init__(self, client: "BitcoinClient", descriptor: MethodDescriptor):
        self._client = client
        self.descriptor = descriptor
        self.__name__ = descriptor.name
        self.__doc__ = descriptor.description

    async def __call__(self, *args: Any, abort: asyncio.Event | None = None, **kwargs: Any) -> Any:
        params = self.descriptor.bind(args, kwargs)
        return await self._client.call(self.descriptor.name, params, abort=abort)

    def __repr__(self) -> str:
        return f"<RemoteMethod {self.descriptor.name}({', '.join(self.descriptor.arg_names)})>"


class BitcoinClient:
    """
    Single entry point for every remote call.

    A call is validated against the registry, encoded, sent with exactly one
    HTTP round trip and classified; it either returns the node's `result`
    or raises one BitcoinRpcError subclass. Nothing is retried. The only state
    shared between calls is the immutable config and registry, so calls may
    run concurrently without locking.

    Any registry method is also available as an attribute:

        async with BitcoinClient(host="127.0.0.1", port=8332, user="u", password="p") as node:
            height = await node.getblockcount()
            block = await node.getblock(await node.getblockhash(height), verbosity=2)
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        registry: MethodRegistry | None = None,
        transport: Transport | None = None,
        request_ids: RequestIdGenerator | None = None,
        **settings: Any,
    ):
        if config is None:
            config = ClientConfig(**settings)
        elif settings:
            raise TypeError("pass either a ClientConfig or individual settings, not both")
        self.config = config
        self.registry = registry if registry is not None else DEFAULT_REGISTRY
        self.transport: Transport = transport or HttpTransport()
        self._request_ids = request_ids or default_request_ids

    async def __aenter__(self) -> "BitcoinClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        # Connections are per call and already released.
        return None

    def __getattr__(self, name: str) -> RemoteMethod:
        registry = self.__dict__.get("registry")
        if name.startswith("_") or registry is None:
            raise AttributeError(name)
        descriptor = registry.describe(name)
        if descriptor is None:
            raise AttributeError(f"{type(self).__name__!r} has no attribute or RPC method {name!r}")
        return RemoteMethod(self, descriptor)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self.registry))

    def for_wallet(self, wallet: str | None) -> "BitcoinClient":
        """Client on a wallet endpoint, sharing registry, transport and id source."""
        return BitcoinClient(
            self.config.with_wallet(wallet),
            registry=self.registry,
            transport=self.transport,
            request_ids=self._request_ids,
        )

    async def call(
        self,
        method: str,
        params: list[Any] | tuple[Any, ...] = (),
        *,
        abort: asyncio.Event | None = None,
    ) -> Any:
        """
        Invoke `method` with positional `params` and return its result.

        Args:
            method: Exact, case-sensitive RPC name.
            params: List or tuple of positional arguments, sent in order and unmodified.
            abort: Optional event; setting it cancels the in-flight request.

        Raises:
            UnknownMethodError: before any I/O when the name is not registered.
            InvalidArgumentsError: before any I/O on arity mismatch (when
                validate_args is on) or when params are not JSON-serializable.
            ClientError, ServerError, DecodeError, ApplicationError, TransportError.
        """
        if not self.registry.exists(method):
            raise UnknownMethodError(method)
        if not isinstance(params, (list, tuple)):
            # mappings would collapse to their keys, sets lose ordering
            raise InvalidArgumentsError(
                method, f"params must be a list or tuple of positional arguments, not {type(params).__name__}"
            )
        params = tuple(params)
        if self.config.validate_args:
            self.registry.check_arity(method, params)

        invocation = Invocation.of(method, params)
        request_id = self._request_ids.next_id()
        try:
            payload = encode_request(invocation, request_id)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentsError(method, f"params are not JSON-serializable: {exc}") from exc

        logger.debug("RPC {} -> id={} params={} endpoint={}", method, request_id, len(invocation.params), self.config.endpoint)
        try:
            response = await self.transport.send(payload, self.config, method=method, abort=abort)
            return classify_response(method, response)
        except ApplicationError as exc:
            logger.debug("RPC {} id={} answered with error {}: {}", method, request_id, exc.rpc_code, exc.rpc_message)
            raise
        except BitcoinRpcError as exc:
            logger.warning("RPC {} id={} failed: {}", method, request_id, exc)
            raise
