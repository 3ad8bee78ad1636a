"""Core JSON:API document and error helpers."""

from .document import JSONAPIDocumentBuilder
from .errors import InvalidRelationshipValue, JSONAPIErrorBuilder, SerializerError

__all__ = [
    "InvalidRelationshipValue",
    "JSONAPIDocumentBuilder",
    "JSONAPIErrorBuilder",
    "SerializerError",
]
