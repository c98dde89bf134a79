"""HTTP module - Request/response objects, JSON helpers and server."""

from roadresource_core.http.request import (
    Handler,
    Request,
    Response,
    method_not_allowed,
    not_found,
)
from roadresource_core.http.codec import DecodeError, read_json, write_json
from roadresource_core.http.server import Server, listen_and_serve

__all__ = [
    "Handler",
    "Request",
    "Response",
    "not_found",
    "method_not_allowed",
    "DecodeError",
    "read_json",
    "write_json",
    "Server",
    "listen_and_serve",
]
