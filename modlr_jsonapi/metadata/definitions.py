"""Pydantic definitions describing attributes, embeds and relationships."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field


class DataKind(str, Enum):
    """Declared data kind of an attribute."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATE = "date"
    ARRAY = "array"
    OBJECT = "object"
    MIXED = "mixed"


class Cardinality(str, Enum):
    """One-vs-many arity of an embed or relationship."""

    ONE = "one"
    MANY = "many"


class _Definition(BaseModel):
    model_config = ConfigDict(frozen=True)


class AttributeMetadata(_Definition):
    """A plain attribute: property key plus declared data kind."""

    key: str
    data_type: DataKind = DataKind.STRING


class EmbedMetadata(_Definition):
    """Shape of an embedded value object (attributes and nested embeds)."""

    name: str
    attributes: dict[str, AttributeMetadata] = Field(default_factory=dict)
    embeds: dict[str, "EmbeddedPropMetadata"] = Field(default_factory=dict)

    @classmethod
    def define(
        cls,
        name: str,
        *,
        attributes: Iterable[AttributeMetadata] = (),
        embeds: Iterable["EmbeddedPropMetadata"] = (),
    ) -> "EmbedMetadata":
        """Build embed metadata keyed by property name, in the given order."""
        return cls(
            name=name,
            attributes={attr.key: attr for attr in attributes},
            embeds={embed.key: embed for embed in embeds},
        )

    def get_attributes(self) -> dict[str, AttributeMetadata]:
        return self.attributes

    def get_embeds(self) -> dict[str, "EmbeddedPropMetadata"]:
        return self.embeds


class EmbeddedPropMetadata(_Definition):
    """A model or embed property holding one embed or a sequence of embeds."""

    key: str
    embed_meta: EmbedMetadata
    embed_type: Cardinality = Cardinality.ONE

    def is_one(self) -> bool:
        return self.embed_type is Cardinality.ONE

    def is_many(self) -> bool:
        return self.embed_type is Cardinality.MANY


class RelationshipMetadata(_Definition):
    """A relationship to another entity type."""

    key: str
    entity_type: str
    rel_type: Cardinality = Cardinality.ONE

    def get_key(self) -> str:
        return self.key

    def is_one(self) -> bool:
        return self.rel_type is Cardinality.ONE

    def is_many(self) -> bool:
        return self.rel_type is Cardinality.MANY


class EntityMetadata(_Definition):
    """Metadata for a model type.

    Definition order is preserved by the mappings and drives the order in
    which attributes and relationships appear in serialized resources.
    """

    type: str
    attributes: dict[str, AttributeMetadata] = Field(default_factory=dict)
    embeds: dict[str, EmbeddedPropMetadata] = Field(default_factory=dict)
    relationships: dict[str, RelationshipMetadata] = Field(default_factory=dict)

    @classmethod
    def define(
        cls,
        type_: str,
        *,
        attributes: Iterable[AttributeMetadata] = (),
        embeds: Iterable[EmbeddedPropMetadata] = (),
        relationships: Iterable[RelationshipMetadata] = (),
    ) -> "EntityMetadata":
        """Build entity metadata keyed by property name, in the given order."""
        return cls(
            type=type_,
            attributes={attr.key: attr for attr in attributes},
            embeds={embed.key: embed for embed in embeds},
            relationships={rel.key: rel for rel in relationships},
        )

    def get_attributes(self) -> dict[str, AttributeMetadata]:
        return self.attributes

    def get_embeds(self) -> dict[str, EmbeddedPropMetadata]:
        return self.embeds

    def get_relationships(self) -> dict[str, RelationshipMetadata]:
        return self.relationships


EmbedMetadata.model_rebuild()
EmbeddedPropMetadata.model_rebuild()
