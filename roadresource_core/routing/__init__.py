"""Routing module - Path matching, resources and routers."""

from roadresource_core.routing.matcher import RouteParams, match
from roadresource_core.routing.params import (
    ContextKey,
    from_context,
    get_param,
    new_context,
    with_params,
)
from roadresource_core.routing.resource import Resource, ResourceHandler
from roadresource_core.routing.mux import ServeMux
from roadresource_core.routing.router import Router

__all__ = [
    "RouteParams",
    "match",
    "ContextKey",
    "from_context",
    "get_param",
    "new_context",
    "with_params",
    "Resource",
    "ResourceHandler",
    "ServeMux",
    "Router",
]
