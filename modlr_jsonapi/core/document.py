"""JSON:API document construction and encoding."""

from __future__ import annotations

import json
from typing import Any, Iterable, Mapping

from modlr_jsonapi.config import JSONAPISettings, get_settings


class JSONAPIDocumentBuilder:
    """Build JSON:API v1.1 documents from serialized data."""

    def __init__(self, *, settings: JSONAPISettings | None = None) -> None:
        self.settings = settings or get_settings()

    def build_single(self, resource: Mapping[str, Any] | None) -> dict[str, Any]:
        """Return a document for a single resource object, or ``null`` data."""
        return {"data": None if resource is None else dict(resource)}

    def build_collection(
        self, resources: Iterable[Mapping[str, Any]]
    ) -> dict[str, Any]:
        """Return a document for a collection of resources."""
        return {"data": [dict(item) for item in resources]}

    def encode(self, document: Mapping[str, Any]) -> str:
        """Encode a top-level document to its compact JSON wire form."""
        return json.dumps(
            document,
            separators=(",", ":"),
            ensure_ascii=self.settings.ensure_ascii,
        )
