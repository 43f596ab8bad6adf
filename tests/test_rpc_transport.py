import asyncio
import base64
import json

import httpx
import pytest

from btcrpc.config.schema import ClientConfig
from btcrpc.rpc.transport import HttpTransport, Transport
from btcrpc.utils.exceptions import ErrorCategory, TransportError


def _config(**overrides) -> ClientConfig:
    values = {"host": "127.0.0.1", "port": 18443, "user": "alice", "password": "s3cret"}
    values.update(overrides)
    return ClientConfig(**values)


def test_http_transport_satisfies_protocol() -> None:
    assert isinstance(HttpTransport(), Transport)


@pytest.mark.asyncio
async def test_send_posts_with_basic_auth_and_text_plain() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=b'{"result": 1, "error": null}')

    transport = HttpTransport(transport=httpx.MockTransport(handler))
    payload = b'{"jsonrpc":"1.0","id":"1","method":"getblockcount","params":[]}'
    resp = await transport.send(payload, _config(), method="getblockcount")

    assert resp.status_code == 200
    assert resp.body == b'{"result": 1, "error": null}'
    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == "http://127.0.0.1:18443/"
    assert request.headers["content-type"] == "text/plain"
    expected = base64.b64encode(b"alice:s3cret").decode()
    assert request.headers["authorization"] == f"Basic {expected}"
    assert request.content == payload


@pytest.mark.asyncio
async def test_send_targets_wallet_endpoint() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=b"{}")

    transport = HttpTransport(transport=httpx.MockTransport(handler))
    await transport.send(b"{}", _config(wallet="my wallet"))
    assert seen[0].url.raw_path == b"/wallet/my%20wallet"


@pytest.mark.asyncio
async def test_multi_chunk_body_is_assembled_before_return() -> None:
    document = json.dumps({"result": {"hash": "00" * 32, "tx": ["a" * 64] * 50}, "error": None}).encode()
    pieces = [document[i : i + 7] for i in range(0, len(document), 7)]

    async def chunks():
        for piece in pieces:
            await asyncio.sleep(0)
            yield piece

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=chunks())

    transport = HttpTransport(transport=httpx.MockTransport(handler))
    resp = await transport.send(b"{}", _config())
    assert len(pieces) > 1
    assert resp.body == document
    assert json.loads(resp.body)["result"]["hash"] == "00" * 32


@pytest.mark.asyncio
async def test_error_status_is_returned_not_raised() -> None:
    transport = HttpTransport(transport=httpx.MockTransport(lambda request: httpx.Response(401)))
    resp = await transport.send(b"{}", _config())
    assert resp.status_code == 401
    assert resp.body == b""


@pytest.mark.asyncio
async def test_connection_refused_is_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("[Errno 111] Connection refused", request=request)

    transport = HttpTransport(transport=httpx.MockTransport(handler))
    with pytest.raises(TransportError) as excinfo:
        await transport.send(b"{}", _config(), method="getblockcount")
    err = excinfo.value
    assert err.code == "TRANSPORT_ERROR"
    assert err.category is ErrorCategory.TRANSPORT
    assert err.method == "getblockcount"
    assert "Connection refused" in err.reason
    assert err.retryable
    assert isinstance(err.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_timeout_is_transport_timeout() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    transport = HttpTransport(transport=httpx.MockTransport(handler))
    with pytest.raises(TransportError) as excinfo:
        await transport.send(b"{}", _config(timeout=0.5))
    assert excinfo.value.code == "TRANSPORT_TIMEOUT"
    assert excinfo.value.category is ErrorCategory.TIMEOUT


@pytest.mark.asyncio
async def test_configured_timeout_reaches_request() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=b"{}")

    transport = HttpTransport(transport=httpx.MockTransport(handler))
    await transport.send(b"{}", _config(timeout=2.5))
    await transport.send(b"{}", _config())
    assert seen[0].extensions["timeout"] == {"connect": 2.5, "read": 2.5, "write": 2.5, "pool": 2.5}
    assert seen[1].extensions["timeout"] == {"connect": None, "read": None, "write": None, "pool": None}


@pytest.mark.asyncio
async def test_abort_cancels_in_flight_exchange() -> None:
    released = asyncio.Event()

    async def handler(request: httpx.Request) -> httpx.Response:
        try:
            await asyncio.sleep(3600)
        finally:
            released.set()
        return httpx.Response(200, content=b"{}")

    transport = HttpTransport(transport=httpx.MockTransport(handler))
    abort = asyncio.Event()
    asyncio.get_running_loop().call_later(0.05, abort.set)

    with pytest.raises(TransportError) as excinfo:
        await asyncio.wait_for(transport.send(b"{}", _config(), method="getblock", abort=abort), timeout=5)
    assert excinfo.value.code == "TRANSPORT_ABORTED"
    assert excinfo.value.aborted
    assert released.is_set()


@pytest.mark.asyncio
async def test_already_set_abort_sends_nothing() -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, content=b"{}")

    transport = HttpTransport(transport=httpx.MockTransport(handler))
    abort = asyncio.Event()
    abort.set()
    with pytest.raises(TransportError):
        await transport.send(b"{}", _config(), abort=abort)
    assert calls == []


@pytest.mark.asyncio
async def test_unused_abort_returns_response() -> None:
    transport = HttpTransport(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, content=b'{"result": 5}'))
    )
    resp = await transport.send(b"{}", _config(), abort=asyncio.Event())
    assert resp.body == b'{"result": 5}'


@pytest.mark.asyncio
async def test_caller_cancellation_releases_exchange() -> None:
    started = asyncio.Event()
    released = asyncio.Event()

    async def handler(request: httpx.Request) -> httpx.Response:
        started.set()
        try:
            await asyncio.sleep(3600)
        finally:
            released.set()
        return httpx.Response(200, content=b"{}")

    transport = HttpTransport(transport=httpx.MockTransport(handler))
    task = asyncio.ensure_future(transport.send(b"{}", _config(), abort=asyncio.Event()))
    await asyncio.wait_for(started.wait(), timeout=5)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert released.is_set()
