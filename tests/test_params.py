"""Route parameter context tests."""

import pytest
from roadresource_core.http.request import Request
from roadresource_core.routing.params import (
    ContextKey,
    from_context,
    get_param,
    new_context,
    with_params,
)


class TestParamContext:
    """Test attaching and retrieving params."""

    def test_not_found_without_params(self):
        """Test retrieve on a bare request."""
        params, found = from_context(Request(method="GET", path="/posts"))
        assert found is False
        assert dict(params) == {}

    def test_attach_and_retrieve(self):
        """Test params round trip through the context."""
        request = with_params(Request(method="GET", path="/x"), {"id": "7"})
        params, found = from_context(request)
        assert found is True
        assert dict(params) == {"id": "7"}

    def test_attach_does_not_modify_original(self):
        """Test the original request is left untouched."""
        original = Request(method="GET", path="/posts/1")
        attached = new_context(original, "/posts/:id")

        assert attached is not original
        assert ContextKey.PARAMS not in original.context
        assert from_context(original)[1] is False
        assert attached.path == original.path

    def test_other_context_values_preserved(self):
        """Test attaching keeps unrelated context data."""
        request = Request(method="GET", path="/posts/1", context={"user": "ann"})
        attached = new_context(request, "/posts/:id")
        assert attached.context["user"] == "ann"

    def test_params_are_read_only(self):
        """Test handlers cannot mutate attached params."""
        request = new_context(Request(method="GET", path="/posts/1"), "/posts/:id")
        params, _ = from_context(request)
        with pytest.raises(TypeError):
            params["id"] = "2"

    def test_params_isolated_from_source_dict(self):
        """Test later changes to the source dict are not visible."""
        source = {"id": "1"}
        request = with_params(Request(method="GET", path="/"), source)
        source["id"] = "2"
        assert get_param(request, "id") == "1"

    def test_get_param_default(self):
        """Test default for missing params."""
        request = Request(method="GET", path="/posts")
        assert get_param(request, "id") is None
        assert get_param(request, "id", "none") == "none"
