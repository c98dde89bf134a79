"""Route parameters carried on the request context.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import dataclasses
from enum import Enum, auto
from types import MappingProxyType
from typing import Optional, Tuple

from roadresource_core.http.request import Request
from roadresource_core.routing.matcher import RouteParams, match

_EMPTY: RouteParams = MappingProxyType({})


class ContextKey(Enum):
    """Keys reserved in `Request.context`."""

    PARAMS = auto()


def with_params(request: Request, params: RouteParams) -> Request:
    """Return a copy of the request carrying `params`.

    The attached mapping is a read-only view over a private copy.
    """
    context = dict(request.context)
    context[ContextKey.PARAMS] = MappingProxyType(dict(params))
    return dataclasses.replace(request, context=context)


def new_context(request: Request, pattern: str) -> Request:
    """Match `pattern` against the request path and attach the result."""
    return with_params(request, match(pattern, request.path))


def from_context(request: Request) -> Tuple[RouteParams, bool]:
    """Return the attached params and whether any were attached."""
    params = request.context.get(ContextKey.PARAMS)
    if params is None:
        return _EMPTY, False
    return params, True


def get_param(
    request: Request,
    name: str,
    default: Optional[str] = None,
) -> Optional[str]:
    params, _ = from_context(request)
    return params.get(name, default)


__all__ = [
    "ContextKey",
    "with_params",
    "new_context",
    "from_context",
    "get_param",
]
