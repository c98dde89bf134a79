"""Server tests over a loopback socket."""

import asyncio
import json
import logging
from dataclasses import dataclass

import pytest
from roadresource_core.http.request import Response
from roadresource_core.http.server import Server
from roadresource_core.resources.memory import MemoryResource
from roadresource_core.routing.router import Router
from roadresource_core.utils.config import Config


@dataclass
class Employee:
    name: str


def build_router():
    router = Router()
    router.handle_resource("/employees", MemoryResource(Employee))

    @router.handle_func("/boom")
    def boom(request):
        raise RuntimeError("boom")

    router.handle_func("/health", lambda request: Response.text("ok"))
    router.handle_func(
        "/greeting",
        lambda request: Response.text("hi", headers={"X-Greeting": "\u65e5"}),
    )
    router.handle_func("/silent", lambda request: None)
    return router


async def exchange(server, raw: bytes) -> bytes:
    host, port = server.address
    reader, writer = await asyncio.open_connection(host, port)
    writer.write(raw)
    await writer.drain()
    data = await reader.read()
    writer.close()
    return data


def serve(handler, *requests, **config):
    """Start a server on an ephemeral port and send raw requests in order."""
    config.setdefault("access_log", False)

    async def scenario():
        server = Server(handler, Config(host="127.0.0.1", port=0, **config))
        await server.start()
        try:
            return [await exchange(server, raw) for raw in requests]
        finally:
            await server.close()

    return asyncio.run(scenario())


def status_of(raw: bytes) -> int:
    return int(raw.split(b" ", 2)[1])


def body_of(raw: bytes) -> bytes:
    return raw.split(b"\r\n\r\n", 1)[1]


class TestServer:
    """Test request handling over HTTP."""

    def test_resource_roundtrip(self):
        """Test create then show over the wire."""
        payload = b'{"name": "Ann"}'
        created, shown, listed = serve(
            build_router(),
            b"POST /employees HTTP/1.1\r\nContent-Length: %d\r\n\r\n%s"
            % (len(payload), payload),
            b"GET /employees/1 HTTP/1.1\r\n\r\n",
            b"GET /employees/ HTTP/1.1\r\n\r\n",
        )

        assert status_of(created) == 200
        assert body_of(created) == b"1"
        assert json.loads(body_of(shown)) == {"name": "Ann"}
        assert json.loads(body_of(listed)) == {"1": {"name": "Ann"}}

    def test_connection_close_header(self):
        """Test every response closes the connection."""
        (raw,) = serve(build_router(), b"GET /health HTTP/1.1\r\n\r\n")
        assert b"Connection: close\r\n" in raw
        assert body_of(raw) == b"ok"

    def test_routing_errors(self):
        """Test 404 and 405 reach the client."""
        missing, patched = serve(
            build_router(),
            b"GET /nothing HTTP/1.1\r\n\r\n",
            b"PATCH /employees/1 HTTP/1.1\r\n\r\n",
        )
        assert status_of(missing) == 404
        assert status_of(patched) == 405

    def test_handler_exception(self, caplog):
        """Test handler failures become 500 and are logged."""
        with caplog.at_level(logging.ERROR, logger="roadresource_core.http.server"):
            failed, healthy = serve(
                build_router(),
                b"GET /boom HTTP/1.1\r\n\r\n",
                b"GET /health HTTP/1.1\r\n\r\n",
            )

        assert status_of(failed) == 500
        assert status_of(healthy) == 200
        assert "Handler failed for GET /boom" in caplog.text

    def test_non_ascii_redirect(self):
        """Test unclean non-ASCII paths redirect with an encoded Location."""
        (raw,) = serve(build_router(), b"GET /%E6%97%A5/./ HTTP/1.1\r\n\r\n")
        assert status_of(raw) == 301
        assert b"Location: /%E6%97%A5/\r\n" in raw

    def test_unencodable_response(self, caplog):
        """Test responses that cannot be written become 500."""
        with caplog.at_level(logging.ERROR, logger="roadresource_core.http.server"):
            failed, healthy = serve(
                build_router(),
                b"GET /greeting HTTP/1.1\r\n\r\n",
                b"GET /health HTTP/1.1\r\n\r\n",
            )

        assert status_of(failed) == 500
        assert b"Connection: close\r\n" in failed
        assert status_of(healthy) == 200
        assert "Failed to encode response" in caplog.text

    def test_handler_without_response(self):
        """Test handlers returning None still get an answer."""
        (raw,) = serve(build_router(), b"GET /silent HTTP/1.1\r\n\r\n")
        assert status_of(raw) == 500

    def test_malformed_request(self):
        """Test unparseable request line."""
        (raw,) = serve(build_router(), b"NONSENSE\r\n\r\n")
        assert status_of(raw) == 400

    def test_body_too_large(self):
        """Test bodies above the configured limit."""
        (raw,) = serve(
            build_router(),
            b"POST /employees HTTP/1.1\r\nContent-Length: 100\r\n\r\n",
            max_request_size=10,
        )
        assert status_of(raw) == 413

    def test_read_timeout(self):
        """Test incomplete requests time out."""
        (raw,) = serve(build_router(), b"GET /health HTTP/1.1\r\n", read_timeout=0.2)
        assert status_of(raw) == 408

    def test_access_log(self, caplog):
        """Test one access line per request."""
        with caplog.at_level(logging.INFO, logger="roadresource_core.http.server"):
            serve(build_router(), b"GET /health HTTP/1.1\r\n\r\n", access_log=True)

        assert '"GET /health HTTP/1.1" 200 2' in caplog.text

    def test_address_before_start(self):
        """Test address is unset until bound."""
        server = Server(build_router())
        assert server.address is None
        assert server.running is False
