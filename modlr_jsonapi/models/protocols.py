"""Structural interfaces for models and embeds read by the serializer."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from modlr_jsonapi.metadata import EntityMetadata


@runtime_checkable
class EmbedProtocol(Protocol):
    """Value object without identity."""

    def get(self, key: str) -> Any:
        ...


@runtime_checkable
class ModelProtocol(Protocol):
    """Typed domain object with identity, metadata and relationships."""

    collection_auto_init: bool

    def get(self, key: str) -> Any:
        ...

    def get_type(self) -> str:
        ...

    def get_id(self) -> str:
        ...

    def get_metadata(self) -> EntityMetadata:
        ...

    def enable_collection_auto_init(self, enabled: bool) -> None:
        ...
