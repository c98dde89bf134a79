"""Pattern Matcher - Path parameter extraction.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Dict, Mapping

RouteParams = Mapping[str, str]


def match(pattern: str, path: str) -> RouteParams:
    """Extract named parameters from a path.

    Segments are compared by position. Every pattern segment starting with
    `:` captures the request segment at the same index. Literal segments are
    not checked, and pattern segments past the end of the path are skipped.

    Example:
        match("/posts/:id", "/posts/23/comments")  # {"id": "23"}
    """
    path_parts = path.split("/")
    params: Dict[str, str] = {}

    for segment, value in zip(pattern.split("/"), path_parts):
        if segment.startswith(":"):
            params[segment[1:]] = value

    return params


__all__ = [
    "RouteParams",
    "match",
]
