"""In-memory resource.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Optional, Type

from roadresource_core.http.codec import DecodeError, read_json, write_json
from roadresource_core.http.request import Request, Response
from roadresource_core.routing.params import from_context
from roadresource_core.routing.resource import Resource

logger = logging.getLogger(__name__)


class MemoryResource(Resource):
    """Thread-safe resource backed by a dict of records.

    Records are keyed by string ids assigned sequentially on create.
    When `record_type` is a dataclass, request bodies are decoded into it.

    Usage:
        @dataclass
        class Employee:
            name: str

        router.handle_resource("/employees", MemoryResource(Employee))
    """

    def __init__(
        self,
        record_type: Optional[Type] = None,
        records: Optional[Dict[str, Any]] = None,
    ):
        self.record_type = record_type
        self._records: Dict[str, Any] = dict(records or {})
        self._last_id = max(
            (int(k) for k in self._records if k.isdigit()), default=0
        )
        self._lock = threading.RLock()

    def snapshot(self) -> Dict[str, Any]:
        """Copy of the current records."""
        with self._lock:
            return dict(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    # GET /collection
    def index(self, request: Request) -> Response:
        return write_json(self.snapshot())

    # POST /collection
    def create(self, request: Request) -> Response:
        try:
            record = read_json(request, self.record_type)
        except DecodeError as e:
            logger.debug(f"Rejected create body: {e}")
            return Response.error(400)

        with self._lock:
            self._last_id += 1
            record_id = str(self._last_id)
            self._records[record_id] = record

        return Response.text(record_id)

    # GET /collection/:id
    def show(self, request: Request) -> Response:
        record_id = self._record_id(request)
        if record_id is None:
            return Response.error(400)

        with self._lock:
            if record_id not in self._records:
                return Response.error(404)
            record = self._records[record_id]

        return write_json(record)

    # PUT /collection/:id
    def update(self, request: Request) -> Response:
        record_id = self._record_id(request)
        if record_id is None:
            return Response.error(400)

        with self._lock:
            if record_id not in self._records:
                return Response.error(404)

            try:
                record = read_json(request, self.record_type)
            except DecodeError as e:
                logger.debug(f"Rejected update body for {record_id}: {e}")
                return Response.error(400)

            self._records[record_id] = record

        return Response(status=200)

    # DELETE /collection/:id
    def destroy(self, request: Request) -> Response:
        record_id = self._record_id(request)
        if record_id is None:
            return Response.error(400)

        with self._lock:
            if record_id not in self._records:
                return Response.error(404)
            del self._records[record_id]

        return Response(status=200)

    @staticmethod
    def _record_id(request: Request) -> Optional[str]:
        params, found = from_context(request)
        if not found:
            return None
        return params.get("id")


__all__ = [
    "MemoryResource",
]
