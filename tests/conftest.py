"""Shared fixtures."""

import pytest

from roadresource_core.http.request import Request, Response
from roadresource_core.routing.params import from_context
from roadresource_core.routing.resource import Resource


def echo(request: Request) -> Response:
    """Respond with the method, path and attached params as JSON."""
    data = {"method": request.method, "path": request.path}
    params, found = from_context(request)
    if found:
        data["matches"] = dict(params)
    return Response.json(data)


class EchoResource(Resource):
    """Resource recording every call and echoing the request."""

    def __init__(self):
        self.calls = []

    def _record(self, action, request):
        self.calls.append((action, request))
        return echo(request)

    def index(self, request):
        return self._record("index", request)

    def create(self, request):
        return self._record("create", request)

    def show(self, request):
        return self._record("show", request)

    def update(self, request):
        return self._record("update", request)

    def destroy(self, request):
        return self._record("destroy", request)


@pytest.fixture
def resource():
    return EchoResource()


@pytest.fixture
def echo_handler():
    return echo
