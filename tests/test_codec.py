"""JSON helper tests."""

import json
from dataclasses import dataclass, field
from typing import List

import pytest
from roadresource_core.http.codec import DecodeError, read_json, write_json
from roadresource_core.http.request import Request


@dataclass
class Post:
    title: str
    tags: List[str] = field(default_factory=list)


def post(body: bytes) -> Request:
    return Request(method="POST", path="/posts", body=body)


class TestReadJSON:
    """Test body decoding."""

    def test_plain_value(self):
        """Test decoding without a target type."""
        assert read_json(post(b'{"a": [1, 2]}')) == {"a": [1, 2]}

    def test_into_dataclass(self):
        """Test decoding into a dataclass, ignoring unknown keys."""
        value = read_json(post(b'{"title": "hi", "extra": 1}'), Post)
        assert value == Post(title="hi")

    @pytest.mark.parametrize("body", [b"", b"{not json", b"\xff\xfe"])
    def test_invalid_body(self, body):
        """Test undecodable bodies."""
        with pytest.raises(DecodeError):
            read_json(post(body))

    def test_missing_field(self):
        """Test required dataclass fields."""
        with pytest.raises(DecodeError):
            read_json(post(b'{"tags": []}'), Post)

    def test_non_object_for_dataclass(self):
        """Test arrays cannot build a dataclass."""
        with pytest.raises(DecodeError):
            read_json(post(b"[1]"), Post)

    def test_decode_error_is_value_error(self):
        """Test callers can catch ValueError."""
        with pytest.raises(ValueError):
            read_json(post(b"nope"))


class TestWriteJSON:
    """Test body encoding."""

    def test_indented(self):
        """Test two-space indentation and content type."""
        response = write_json({"a": 1})
        assert response.status == 200
        assert response.body == b'{\n  "a": 1\n}'
        assert response.headers["Content-Type"] == "application/json"

    def test_dataclasses(self):
        """Test nested dataclasses encode as objects."""
        response = write_json({"1": Post(title="x", tags=["t"])}, status=201)
        assert response.status == 201
        assert json.loads(response.body) == {"1": {"title": "x", "tags": ["t"]}}

    def test_unserializable(self):
        """Test unsupported types raise."""
        with pytest.raises(TypeError):
            write_json({"a": object()})
