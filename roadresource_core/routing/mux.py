"""ServeMux - Exact and subtree path multiplexer.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple
from urllib.parse import quote

from roadresource_core.http.request import Handler, Request, Response, not_found
from roadresource_core.utils.helpers import clean_path


@dataclass(frozen=True)
class MuxEntry:
    """Registered pattern."""

    pattern: str
    handler: Handler

    @property
    def is_subtree(self) -> bool:
        return self.pattern.endswith("/")


def _redirect_handler(location: str) -> Handler:
    def handler(request: Request) -> Response:
        return Response.redirect(location, status=301)

    return handler


class ServeMux:
    """Request multiplexer.

    Patterns name fixed paths like "/favicon.ico" or rooted subtrees like
    "/images/" (note the trailing slash). Longer patterns take precedence,
    so "/images/thumbnails/" wins over "/images/" for paths below it.

    - A pattern without a trailing slash matches only that exact path.
    - A subtree pattern matches every path that begins with it.
    - Requests for "/images" are redirected to "/images/" when only the
      subtree is registered.
    - Paths with `.`/`..` elements or repeated slashes are redirected to
      their clean form.

    Usage:
        mux = ServeMux()
        mux.handle("/health", health)

        @mux.handle_func("/static/")
        def static(request):
            ...

        response = mux(request)
    """

    def __init__(self):
        self._entries: Dict[str, MuxEntry] = {}
        self._subtrees: List[MuxEntry] = []  # longest first
        self._lock = threading.RLock()

    def handle(self, pattern: str, handler: Handler) -> None:
        """Register a handler for a pattern.

        Raises:
            ValueError: For an invalid pattern, a missing handler, or a
                pattern that is already registered
        """
        if not pattern or not pattern.startswith("/"):
            raise ValueError(f"Invalid pattern: {pattern!r}")
        if handler is None or not callable(handler):
            raise ValueError(f"Handler for {pattern!r} is not callable")

        entry = MuxEntry(pattern=pattern, handler=handler)

        with self._lock:
            if pattern in self._entries:
                raise ValueError(f"Multiple registrations for {pattern}")
            self._entries[pattern] = entry
            if entry.is_subtree:
                self._subtrees.append(entry)
                self._subtrees.sort(key=lambda e: len(e.pattern), reverse=True)

    def handle_func(
        self,
        pattern: str,
        fn: Optional[Handler] = None,
    ) -> Callable:
        """Register a function for a pattern.

        Works as a plain call or as a decorator.
        """
        if fn is not None:
            self.handle(pattern, fn)
            return fn

        def decorator(func: Handler) -> Handler:
            self.handle(pattern, func)
            return func

        return decorator

    def match(self, path: str) -> Optional[MuxEntry]:
        """Find the entry for a clean path."""
        with self._lock:
            entry = self._entries.get(path)
            if entry is not None:
                return entry

            for entry in self._subtrees:
                if path.startswith(entry.pattern):
                    return entry

        return None

    def handler(self, request: Request) -> Tuple[Handler, str]:
        """Return the handler for a request and the pattern it matched.

        The pattern is empty for redirects and unmatched requests.
        """
        path = clean_path(request.path)
        if path != request.path:
            return _redirect_handler(self._location(path, request)), ""

        if self._should_redirect_to_subtree(path):
            return _redirect_handler(self._location(path + "/", request)), ""

        entry = self.match(path)
        if entry is None:
            return _not_found, ""
        return entry.handler, entry.pattern

    def __call__(self, request: Request) -> Response:
        handler, _ = self.handler(request)
        return handler(request)

    def patterns(self) -> List[str]:
        """Get all registered patterns."""
        with self._lock:
            return list(self._entries)

    def _should_redirect_to_subtree(self, path: str) -> bool:
        with self._lock:
            return path not in self._entries and path + "/" in self._entries

    @staticmethod
    def _location(path: str, request: Request) -> str:
        location = quote(path, safe="/")
        if request.raw_query:
            return f"{location}?{request.raw_query}"
        return location


def _not_found(request: Request) -> Response:
    return not_found()


__all__ = [
    "MuxEntry",
    "ServeMux",
]
