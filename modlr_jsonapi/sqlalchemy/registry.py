"""Entity metadata derived from SQLAlchemy mappers."""

from __future__ import annotations

from typing import Any

from sqlalchemy import ARRAY, JSON, Boolean, Date, DateTime, Integer, Numeric, String
from sqlalchemy.inspection import inspect

from modlr_jsonapi.metadata import (
    AttributeMetadata,
    Cardinality,
    DataKind,
    EntityMetadata,
    RelationshipMetadata,
)

# first match wins
COLUMN_KINDS: list[tuple[type, DataKind]] = [
    (Boolean, DataKind.BOOLEAN),
    (Integer, DataKind.INTEGER),
    (Numeric, DataKind.FLOAT),
    (DateTime, DataKind.DATE),
    (Date, DataKind.DATE),
    (JSON, DataKind.OBJECT),
    (ARRAY, DataKind.ARRAY),
    (String, DataKind.STRING),
]


def column_kind(column_type: Any) -> DataKind:
    """Return the data kind matching a SQLAlchemy column type."""
    for type_class, kind in COLUMN_KINDS:
        if isinstance(column_type, type_class):
            return kind
    return DataKind.MIXED


def type_name(model_class: type) -> str:
    return getattr(model_class, "__tablename__", model_class.__name__.lower())


class SQLAlchemyMetadataRegistry:
    """Build and cache :class:`EntityMetadata` for mapped classes.

    Primary key and foreign key columns are left out of the attributes; the
    id is the resource id and foreign keys are exposed as relationships.
    """

    def __init__(self) -> None:
        self._metadata: dict[type, EntityMetadata] = {}

    def metadata_for(self, model_class: type) -> EntityMetadata:
        metadata = self._metadata.get(model_class)
        if metadata is None:
            metadata = self._build(model_class)
            self._metadata[model_class] = metadata
        return metadata

    def _build(self, model_class: type) -> EntityMetadata:
        mapper = inspect(model_class)
        attributes = []
        for prop in mapper.column_attrs:
            column = prop.columns[0]
            if column.primary_key or column.foreign_keys:
                continue
            attributes.append(AttributeMetadata(key=prop.key, data_type=column_kind(column.type)))
        relationships = [
            RelationshipMetadata(
                key=relationship.key,
                entity_type=type_name(relationship.mapper.class_),
                rel_type=Cardinality.MANY if relationship.uselist else Cardinality.ONE,
            )
            for relationship in mapper.relationships
        ]
        return EntityMetadata.define(
            type_name(model_class), attributes=attributes, relationships=relationships
        )
