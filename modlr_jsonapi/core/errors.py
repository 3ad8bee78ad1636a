"""JSON:API error objects and serializer exceptions."""

from __future__ import annotations

from typing import Any

from modlr_jsonapi.schemas import JSONAPIErrorDocument


class SerializerError(Exception):
    """Failure raised while projecting models into a document."""

    title = "Internal Server Error"
    status_code = 500

    def __init__(
        self,
        detail: str,
        *,
        title: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        if title is not None:
            self.title = title
        if status_code is not None:
            self.status_code = status_code


class InvalidRelationshipValue(SerializerError):
    """A relationship value's arity contradicts its declared arity."""

    title = "Bad Request"
    status_code = 400

    def __init__(self, relationship_key: str) -> None:
        super().__init__(f"Invalid relationship value for '{relationship_key}'.")
        self.relationship_key = relationship_key


class JSONAPIErrorBuilder:
    """Build JSON:API error objects and error documents."""

    def error_object(
        self,
        *,
        status: str | None = None,
        code: str | None = None,
        title: str | None = None,
        detail: str | None = None,
        source: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API error object."""
        error: dict[str, Any] = {}
        if status is not None:
            error["status"] = status
        if code is not None:
            error["code"] = code
        if title is not None:
            error["title"] = title
        if detail is not None:
            error["detail"] = detail
        if source is not None:
            error["source"] = source
        if meta is not None:
            error["meta"] = meta
        if not error:
            raise ValueError("Error object must include at least one field.")
        return error

    def error_document(self, errors: list[dict[str, Any]]) -> dict[str, Any]:
        """Return a validated JSON:API document with an errors array."""
        return JSONAPIErrorDocument(errors=errors).model_dump(exclude_none=True)
