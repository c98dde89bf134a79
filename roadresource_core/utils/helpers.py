"""Path helpers.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import List


def trim_path(path: str) -> str:
    """Drop a single trailing `/`."""
    if path.endswith("/"):
        return path[:-1]
    return path


def clean_path(path: str) -> str:
    """Return the canonical form of a URL path.

    - Ensures a leading `/`
    - Collapses repeated slashes
    - Resolves `.` and `..` segments (never above the root)
    - Keeps a trailing slash if the original had one
    """
    if not path:
        return "/"

    if not path.startswith("/"):
        path = "/" + path

    stack: List[str] = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if stack:
                stack.pop()
            continue
        stack.append(segment)

    cleaned = "/" + "/".join(stack)
    if path.endswith("/") and cleaned != "/":
        cleaned += "/"

    return cleaned


def join_path(*parts: str) -> str:
    """Join path fragments with `/` and clean the result."""
    return clean_path("/".join(p for p in parts if p))


__all__ = [
    "trim_path",
    "clean_path",
    "join_path",
]
