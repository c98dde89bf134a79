"""Router - Resource-aware request router.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from roadresource_core.http.request import Handler, Request, Response
from roadresource_core.routing.mux import ServeMux
from roadresource_core.routing.resource import ResourceHandler
from roadresource_core.utils.helpers import trim_path


class Router:
    """Request Router.

    Drop-in replacement for ServeMux that can also mount resources:

        router = Router()
        router.handle_resource("/posts", PostResource())
        router.handle_func("/health", health)

        response = router(Request(method="GET", path="/posts/1"))

    Matching is done entirely by the underlying mux.
    """

    def __init__(self, mux: Optional[ServeMux] = None):
        self._mux = mux or ServeMux()

    @property
    def mux(self) -> ServeMux:
        return self._mux

    def handle(self, pattern: str, handler: Handler) -> None:
        """Register a handler for a pattern."""
        self._mux.handle(pattern, handler)

    def handle_func(
        self,
        pattern: str,
        fn: Optional[Handler] = None,
    ) -> Callable:
        """Register a handler function for a pattern."""
        return self._mux.handle_func(pattern, fn)

    def handle_resource(self, pattern: str, resource: Any) -> ResourceHandler:
        """Register a resource for a pattern.

        The collection path and its subtree both route to one handler.
        """
        prefix = trim_path(pattern)
        registered = set(self._mux.patterns())
        for p in (prefix, prefix + "/"):
            if p in registered:
                raise ValueError(f"Multiple registrations for {p}")

        handler = ResourceHandler(prefix, resource)
        self._mux.handle(prefix, handler)
        self._mux.handle(prefix + "/", handler)
        return handler

    def __call__(self, request: Request) -> Response:
        return self._mux(request)


__all__ = [
    "Router",
]
