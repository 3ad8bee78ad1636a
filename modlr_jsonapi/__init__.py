"""Serialize domain models into JSON:API v1.1 documents."""

from .adapters import RestUrlAdapter
from .config import JSONAPISettings, get_settings
from .core.document import JSONAPIDocumentBuilder
from .core.errors import InvalidRelationshipValue, JSONAPIErrorBuilder, SerializerError
from .serializers.base import JSONAPISerializer

__all__ = [
    "InvalidRelationshipValue",
    "JSONAPIDocumentBuilder",
    "JSONAPIErrorBuilder",
    "JSONAPISerializer",
    "JSONAPISettings",
    "RestUrlAdapter",
    "SerializerError",
    "get_settings",
]
