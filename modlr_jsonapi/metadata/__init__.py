"""Entity metadata definitions consumed by the JSON:API serializer."""

from .definitions import (
    AttributeMetadata,
    Cardinality,
    DataKind,
    EmbeddedPropMetadata,
    EmbedMetadata,
    EntityMetadata,
    RelationshipMetadata,
)

__all__ = [
    "AttributeMetadata",
    "Cardinality",
    "DataKind",
    "EmbeddedPropMetadata",
    "EmbedMetadata",
    "EntityMetadata",
    "RelationshipMetadata",
]
