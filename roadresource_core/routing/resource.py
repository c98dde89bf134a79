"""Resource - REST resource dispatch.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from roadresource_core.http.request import (
    Request,
    Response,
    method_not_allowed,
    not_found,
)
from roadresource_core.routing.matcher import match
from roadresource_core.routing.params import with_params
from roadresource_core.utils.helpers import join_path, trim_path

RESOURCE_ACTIONS = ("index", "create", "show", "update", "destroy")
ALLOWED_METHODS = ("GET", "POST", "PUT", "DELETE")


class Resource(ABC):
    """Handlers for the REST routes of one collection.

    Each method performs one operation on the collection, usually a CRUD
    operation against some store. For a `photos` resource:

        Method     HTTP Method     Path            Used For
        ------     -----------     -----------     --------------------------
        index      GET             /photos         display list of all photos
        create     POST            /photos         create a new photo
        show       GET             /photos/:id     display specific photo
        update     PUT             /photos/:id     update a specific photo
        destroy    DELETE          /photos/:id     delete a specific photo

    `show`, `update` and `destroy` receive the matched `id` through
    `from_context(request)`.
    """

    @abstractmethod
    def index(self, request: Request) -> Response:
        """List all items."""
        pass

    @abstractmethod
    def create(self, request: Request) -> Response:
        """Create an item from the request body."""
        pass

    @abstractmethod
    def show(self, request: Request) -> Response:
        """Return a single item."""
        pass

    @abstractmethod
    def update(self, request: Request) -> Response:
        """Replace a single item."""
        pass

    @abstractmethod
    def destroy(self, request: Request) -> Response:
        """Delete a single item."""
        pass


class ResourceHandler:
    """Routes requests under a path prefix to a Resource.

    Usable standalone or registered on a Router:

        handler = ResourceHandler("/posts", PostResource())
        response = handler(Request(method="GET", path="/posts/1"))
    """

    def __init__(self, prefix: str, resource: Any):
        missing = [
            name for name in RESOURCE_ACTIONS
            if not callable(getattr(resource, name, None))
        ]
        if missing:
            raise TypeError(
                f"{type(resource).__name__} is not a resource, "
                f"missing: {', '.join(missing)}"
            )

        self._prefix = trim_path(prefix)
        self._resource = resource
        self._item_pattern = join_path(self._prefix, ":id")

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def resource(self) -> Any:
        return self._resource

    def __call__(self, request: Request) -> Response:
        """Dispatch request to the resource."""
        path = trim_path(request.path)

        if not path.startswith(self._prefix):
            return not_found()

        method = request.method

        if method == "GET":
            if path[len(self._prefix):].lstrip("/"):
                return self._resource.show(self._item(request))
            return self._resource.index(request)

        if method == "POST":
            return self._resource.create(request)

        if method == "PUT":
            return self._resource.update(self._item(request))

        if method == "DELETE":
            return self._resource.destroy(self._item(request))

        return method_not_allowed(ALLOWED_METHODS)

    def _item(self, request: Request) -> Request:
        params = dict(match(self._item_pattern, request.path))
        params.setdefault("id", "")
        return with_params(request, params)

    def __repr__(self) -> str:
        return f"ResourceHandler({self._prefix!r}, {type(self._resource).__name__})"


__all__ = [
    "Resource",
    "ResourceHandler",
    "ALLOWED_METHODS",
]
