"""Request/Response - HTTP request and response objects.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Optional
from urllib.parse import parse_qsl, unquote, urlsplit


@dataclass
class Request:
    """HTTP Request object.

    Represents an incoming HTTP request with all its components.
    `context` carries request-scoped values attached during dispatch.
    """

    method: str
    path: str
    headers: Dict[str, str] = field(default_factory=dict)
    query: Dict[str, str] = field(default_factory=dict)
    raw_query: str = ""
    body: bytes = b""
    remote_addr: str = ""
    protocol: str = "HTTP/1.1"
    timestamp: float = field(default_factory=time.time)
    context: Dict[Any, Any] = field(default_factory=dict)

    @property
    def content_type(self) -> str:
        """Get Content-Type header."""
        return self.get_header("Content-Type")

    @property
    def content_length(self) -> int:
        """Get Content-Length header."""
        try:
            return int(self.get_header("Content-Length", "0"))
        except ValueError:
            return 0

    def text(self) -> str:
        """Get body as UTF-8 text."""
        return self.body.decode("utf-8")

    def get_header(self, name: str, default: str = "") -> str:
        """Get header value (case-insensitive)."""
        for key, value in self.headers.items():
            if key.lower() == name.lower():
                return value
        return default

    @classmethod
    def from_raw(cls, data: bytes) -> "Request":
        """Parse request from raw HTTP data.

        Raises:
            ValueError: If the request line is malformed
        """
        head, _, body = data.partition(b"\r\n\r\n")
        lines = head.decode("latin-1").split("\r\n")

        parts = lines[0].split(" ")
        if len(parts) != 3 or not parts[0] or not parts[1]:
            raise ValueError(f"Malformed request line: {lines[0]!r}")
        method, target, protocol = parts

        url = urlsplit(target)
        query = dict(parse_qsl(url.query, keep_blank_values=True))

        headers = {}
        for line in lines[1:]:
            if ":" in line:
                key, value = line.split(":", 1)
                headers[key.strip()] = value.strip()

        return cls(
            method=method,
            path=unquote(url.path) or "/",
            headers=headers,
            query=query,
            raw_query=url.query,
            body=body,
            protocol=protocol,
        )


@dataclass
class Response:
    """HTTP Response object.

    Represents an outgoing HTTP response.
    """

    status: int = 200
    body: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)

    # Common status messages
    STATUS_MESSAGES = {
        200: "OK",
        201: "Created",
        204: "No Content",
        301: "Moved Permanently",
        302: "Found",
        304: "Not Modified",
        400: "Bad Request",
        401: "Unauthorized",
        403: "Forbidden",
        404: "Not Found",
        405: "Method Not Allowed",
        408: "Request Timeout",
        413: "Payload Too Large",
        500: "Internal Server Error",
        503: "Service Unavailable",
    }

    @property
    def status_message(self) -> str:
        """Get status message."""
        return self.STATUS_MESSAGES.get(self.status, "Unknown")

    @property
    def is_success(self) -> bool:
        """Check if response is successful (2xx)."""
        return 200 <= self.status < 300

    @property
    def is_redirect(self) -> bool:
        """Check if response is redirect (3xx)."""
        return 300 <= self.status < 400

    @property
    def is_error(self) -> bool:
        """Check if response is error (4xx or 5xx)."""
        return self.status >= 400

    def set_header(self, name: str, value: str) -> "Response":
        """Set header value."""
        self.headers[name] = value
        return self

    def to_bytes(self) -> bytes:
        """Convert to raw HTTP response."""
        lines = [f"HTTP/1.1 {self.status} {self.status_message}"]

        headers = dict(self.headers)
        headers.setdefault("Content-Length", str(len(self.body)))

        for key, value in headers.items():
            lines.append(f"{key}: {value}")

        lines.append("")
        header_bytes = "\r\n".join(lines).encode("latin-1")

        return header_bytes + b"\r\n" + self.body

    @classmethod
    def json(
        cls,
        data: Any,
        status: int = 200,
        headers: Optional[Dict[str, str]] = None,
    ) -> "Response":
        """Create JSON response."""
        body = json.dumps(data).encode()
        resp_headers = dict(headers or {})
        resp_headers["Content-Type"] = "application/json"
        return cls(status=status, body=body, headers=resp_headers)

    @classmethod
    def text(
        cls,
        text: str,
        status: int = 200,
        headers: Optional[Dict[str, str]] = None,
    ) -> "Response":
        """Create text response."""
        body = text.encode()
        resp_headers = dict(headers or {})
        resp_headers["Content-Type"] = "text/plain; charset=utf-8"
        return cls(status=status, body=body, headers=resp_headers)

    @classmethod
    def redirect(
        cls,
        location: str,
        status: int = 302,
    ) -> "Response":
        """Create redirect response."""
        return cls(
            status=status,
            headers={"Location": location},
        )

    @classmethod
    def error(
        cls,
        status: int,
        message: Optional[str] = None,
    ) -> "Response":
        """Create error response."""
        msg = message or cls.STATUS_MESSAGES.get(status, "Error")
        return cls.json({"error": msg}, status=status)


Handler = Callable[[Request], Response]


def not_found() -> Response:
    """Terminal 404 response."""
    return Response.error(404)


def method_not_allowed(allowed: Iterable[str] = ()) -> Response:
    """Terminal 405 response, listing the allowed methods when given."""
    response = Response.error(405)
    allowed = list(allowed)
    if allowed:
        response.set_header("Allow", ", ".join(allowed))
    return response


__all__ = [
    "Handler",
    "Request",
    "Response",
    "not_found",
    "method_not_allowed",
]
