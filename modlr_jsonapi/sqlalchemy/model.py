"""Model access over SQLAlchemy mapped instances."""

from __future__ import annotations

from typing import Any

from sqlalchemy.inspection import inspect
from sqlalchemy.orm.attributes import NO_VALUE

from modlr_jsonapi.metadata import EntityMetadata

from .registry import SQLAlchemyMetadataRegistry


class SQLAlchemyModel:
    """Expose a mapped instance through the model interface.

    While collection auto-init is disabled, relationships that have not been
    loaded read as absent instead of emitting a lazy load.
    """

    def __init__(self, instance: Any, registry: SQLAlchemyMetadataRegistry) -> None:
        self.instance = instance
        self.registry = registry
        self.collection_auto_init = True

    def get(self, key: str) -> Any:
        relationship = inspect(type(self.instance)).relationships.get(key)
        if relationship is None:
            return getattr(self.instance, key, None)
        if self.collection_auto_init:
            related = getattr(self.instance, key)
        else:
            related = inspect(self.instance).attrs[key].loaded_value
            if related is NO_VALUE:
                related = [] if relationship.uselist else None
        if related is None:
            return None
        if relationship.uselist:
            return [self._wrap(item) for item in related]
        return self._wrap(related)

    def get_type(self) -> str:
        return self.get_metadata().type

    def get_id(self) -> str:
        value = getattr(self.instance, "id", None)
        return "" if value is None else str(value)

    def get_metadata(self) -> EntityMetadata:
        return self.registry.metadata_for(type(self.instance))

    def enable_collection_auto_init(self, enabled: bool) -> None:
        self.collection_auto_init = enabled

    def _wrap(self, instance: Any) -> "SQLAlchemyModel":
        return SQLAlchemyModel(instance, self.registry)
