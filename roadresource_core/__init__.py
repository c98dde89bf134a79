"""RoadResource - REST resource routing.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

RoadResource maps conventional REST verb+path combinations onto a fixed
five-method resource interface:
- Path parameter extraction (/posts/:id)
- Resource dispatch (index, create, show, update, destroy)
- Exact and subtree path multiplexing
- JSON body helpers
- Threaded HTTP/1.1 server

Architecture Overview:
┌─────────────────────────────────────────────────────────────────────────────┐
│                            RoadResource                                      │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                              │
│  ┌───────────────────────────────────────────────────────────────────────┐  │
│  │                        Request Flow                                    │  │
│  │  Client ──▶ Server ──▶ Router ──▶ ServeMux ──▶ ResourceHandler ──▶ ... │  │
│  └───────────────────────────────────────────────────────────────────────┘  │
│                                                                              │
│  ┌─────────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐ │
│  │      HTTP       │  │    Routing      │  │        Resources            │ │
│  │                 │  │                 │  │                             │ │
│  │ - Request       │  │ - match()       │  │ - Resource (ABC)            │ │
│  │ - Response      │  │ - Params        │  │ - MemoryResource            │ │
│  │ - JSON codec    │  │ - ServeMux      │  │                             │ │
│  │ - Server        │  │ - Router        │  │                             │ │
│  └─────────────────┘  └─────────────────┘  └─────────────────────────────┘ │
│                                                                              │
└─────────────────────────────────────────────────────────────────────────────┘

Dispatch for a resource mounted at /photos:
    GET     /photos          index
    POST    /photos          create
    GET     /photos/:id      show
    PUT     /photos/:id      update
    DELETE  /photos/:id      destroy
    other                    405 Method Not Allowed

Usage:
    from roadresource_core import MemoryResource, Response, Router, listen_and_serve

    router = Router()
    router.handle_resource("/photos", MemoryResource())
    router.handle_func("/health", lambda request: Response.text("ok"))

    listen_and_serve(router, port=8080)
"""

__version__ = "0.1.0"
__author__ = "BlackRoad OS, Inc."

# HTTP
from roadresource_core.http.request import Handler, Request, Response
from roadresource_core.http.codec import DecodeError, read_json, write_json
from roadresource_core.http.server import Server, listen_and_serve

# Routing
from roadresource_core.routing.matcher import RouteParams, match
from roadresource_core.routing.params import from_context, get_param, new_context
from roadresource_core.routing.resource import Resource, ResourceHandler
from roadresource_core.routing.mux import ServeMux
from roadresource_core.routing.router import Router

# Resources
from roadresource_core.resources.memory import MemoryResource

# Utils
from roadresource_core.utils.config import Config, load_config
from roadresource_core.utils.logs import configure_logging

__all__ = [
    # Version
    "__version__",
    # HTTP
    "Handler",
    "Request",
    "Response",
    "DecodeError",
    "read_json",
    "write_json",
    "Server",
    "listen_and_serve",
    # Routing
    "RouteParams",
    "match",
    "from_context",
    "get_param",
    "new_context",
    "Resource",
    "ResourceHandler",
    "ServeMux",
    "Router",
    # Resources
    "MemoryResource",
    # Utils
    "Config",
    "load_config",
    "configure_logging",
]
