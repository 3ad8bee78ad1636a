"""Serializers for JSON:API."""

from .base import JSONAPISerializer, SerializationState, collection_auto_init_suspended
from .coercers import serialize_attribute, serialize_embed
from .relationships import RelatedMany, RelatedNone, RelatedOne, classify_relationship

__all__ = [
    "JSONAPISerializer",
    "RelatedMany",
    "RelatedNone",
    "RelatedOne",
    "SerializationState",
    "classify_relationship",
    "collection_auto_init_suspended",
    "serialize_attribute",
    "serialize_embed",
]
