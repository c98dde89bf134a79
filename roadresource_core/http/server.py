"""HTTP Server - Serves a handler over HTTP/1.1.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import asyncio
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Tuple

from roadresource_core.http.request import Handler, Request, Response
from roadresource_core.utils.config import Config

logger = logging.getLogger(__name__)

ACCESS_LOG_FORMAT = (
    '{remote_addr} - - [{time}] "{method} {path} {protocol}" '
    '{status} {body_bytes} "{referer}" "{user_agent}" {duration_ms:.2f}ms'
)


class Server:
    """HTTP server for a handler.

    Connections are read on the event loop. Handlers are synchronous and run
    on a pool of `config.workers` threads, one request per thread. Every
    response closes its connection.

    Usage:
        router = Router()
        router.handle_resource("/posts", PostResource())
        Server(router, Config(port=8080)).run()
    """

    def __init__(self, handler: Handler, config: Optional[Config] = None):
        self.handler = handler
        self.config = config or Config()
        self._server: Optional[asyncio.AbstractServer] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def running(self) -> bool:
        return self._server is not None and self._server.is_serving()

    @property
    def address(self) -> Optional[Tuple[str, int]]:
        """Bound (host, port), once listening."""
        if self._server is None or not self._server.sockets:
            return None
        host, port = self._server.sockets[0].getsockname()[:2]
        return host, port

    async def start(self) -> None:
        """Bind and start accepting connections."""
        self._loop = asyncio.get_running_loop()
        self._executor = ThreadPoolExecutor(
            max_workers=self.config.workers,
            thread_name_prefix="roadresource-worker",
        )
        self._server = await asyncio.start_server(
            self._handle_connection,
            host=self.config.host,
            port=self.config.port,
            backlog=self.config.backlog,
        )
        host, port = self.address
        logger.info(f"Listening on {host}:{port}")

    async def serve(self) -> None:
        """Start and serve until stopped."""
        await self.start()
        try:
            await self._server.wait_closed()
        finally:
            self._shutdown_executor()

    def run(self) -> None:
        """Serve in the current thread until stopped or interrupted."""
        try:
            asyncio.run(self.serve())
        except KeyboardInterrupt:
            logger.info("Interrupted, shutting down")

    def stop(self) -> None:
        """Stop accepting connections. Safe to call from any thread."""
        if self._server is None or self._loop is None:
            return
        if self._loop.is_closed():
            return
        self._loop.call_soon_threadsafe(self._server.close)
        logger.info("Server stopping")

    async def close(self) -> None:
        """Stop accepting connections and wait for open ones to finish."""
        if self._server is not None:
            self._server.close()
            await self._server.wait_closed()
        self._shutdown_executor()

    def _shutdown_executor(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=False)
            self._executor = None

    async def _handle_connection(
        self,
        reader: asyncio.StreamReader,
        writer: asyncio.StreamWriter,
    ) -> None:
        peer = writer.get_extra_info("peername")
        remote_addr = peer[0] if peer else ""
        start = time.time()

        try:
            request, response = await self._process(reader, remote_addr)
            if request is None and response is None:
                return

            try:
                payload = self._encode(response)
            except Exception:
                logger.exception(f"Failed to encode response for {remote_addr}")
                response = Response.error(500)
                payload = self._encode(response)

            writer.write(payload)
            await writer.drain()

            if self.config.access_log and request is not None:
                self._log_access(request, response, start)
        except ConnectionError as e:
            logger.debug(f"Connection from {remote_addr} dropped: {e}")
        finally:
            writer.close()
            try:
                await writer.wait_closed()
            except ConnectionError:
                pass

    async def _process(
        self,
        reader: asyncio.StreamReader,
        remote_addr: str,
    ) -> Tuple[Optional[Request], Optional[Response]]:
        """Read one request and produce its response.

        Returns (None, None) when the client went away before sending a
        complete request head.
        """
        timeout = self.config.read_timeout

        try:
            head = await asyncio.wait_for(
                reader.readuntil(b"\r\n\r\n"), timeout=timeout
            )
        except asyncio.TimeoutError:
            return None, Response.error(408)
        except asyncio.LimitOverrunError:
            return None, Response.error(413)
        except asyncio.IncompleteReadError:
            return None, None

        try:
            request = Request.from_raw(head)
        except ValueError as e:
            logger.debug(f"Bad request from {remote_addr}: {e}")
            return None, Response.error(400)

        request.remote_addr = remote_addr

        length = request.content_length
        if length > self.config.max_request_size:
            return request, Response.error(413)
        if length > 0:
            try:
                request.body = await asyncio.wait_for(
                    reader.readexactly(length), timeout=timeout
                )
            except asyncio.TimeoutError:
                return request, Response.error(408)
            except asyncio.IncompleteReadError:
                return None, None

        return request, await self._dispatch(request)

    async def _dispatch(self, request: Request) -> Response:
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(
                self._executor, self.handler, request
            )
        except Exception:
            logger.exception(f"Handler failed for {request.method} {request.path}")
            return Response.error(500)

    @staticmethod
    def _encode(response: Response) -> bytes:
        response.set_header("Connection", "close")
        return response.to_bytes()

    def _log_access(self, request: Request, response: Response, start: float) -> None:
        log_data = {
            "remote_addr": request.remote_addr or "-",
            "time": time.strftime("%d/%b/%Y:%H:%M:%S %z"),
            "method": request.method,
            "path": request.path,
            "protocol": request.protocol,
            "status": response.status,
            "body_bytes": len(response.body),
            "referer": request.get_header("Referer", "-"),
            "user_agent": request.get_header("User-Agent", "-"),
            "duration_ms": (time.time() - start) * 1000,
        }
        logger.info(ACCESS_LOG_FORMAT.format(**log_data))


def listen_and_serve(
    handler: Handler,
    host: Optional[str] = None,
    port: Optional[int] = None,
    config: Optional[Config] = None,
) -> None:
    """Serve handler on host:port until interrupted."""
    config = config or Config()
    overrides = {}
    if host is not None:
        overrides["host"] = host
    if port is not None:
        overrides["port"] = port

    Server(handler, config.merge(overrides)).run()


__all__ = [
    "Server",
    "listen_and_serve",
]
