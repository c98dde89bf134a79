"""JSON body helpers.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Dict, Optional, Type

from roadresource_core.http.request import Request, Response


class DecodeError(ValueError):
    """Request body could not be decoded."""


def read_json(request: Request, into: Optional[Type] = None) -> Any:
    """Decode the request body as JSON.

    Args:
        request: Incoming request
        into: Optional dataclass type to build from the decoded object.
            Unknown keys are ignored.

    Returns:
        Decoded value, or an instance of `into`

    Raises:
        DecodeError: If the body is not valid JSON or does not fit `into`
    """
    try:
        data = json.loads(request.text())
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError(f"Invalid JSON body: {e}") from e

    if into is None:
        return data

    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object for {into.__name__}")

    valid_fields = {f.name for f in dataclasses.fields(into)}
    filtered = {k: v for k, v in data.items() if k in valid_fields}
    try:
        return into(**filtered)
    except TypeError as e:
        raise DecodeError(f"Cannot build {into.__name__}: {e}") from e


def _default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def write_json(
    data: Any,
    status: int = 200,
    headers: Optional[Dict[str, str]] = None,
) -> Response:
    """Encode data as indented JSON."""
    body = json.dumps(data, indent=2, default=_default).encode()
    resp_headers = dict(headers or {})
    resp_headers["Content-Type"] = "application/json"
    return Response(status=status, body=body, headers=resp_headers)


__all__ = [
    "DecodeError",
    "read_json",
    "write_json",
]
