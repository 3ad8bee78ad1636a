"""Serialize models into JSON:API documents.

Only the root resource of a document is fully expanded. Models reached by
following a relationship are emitted as ``{type, id}`` identifiers, which
bounds the traversal to one relationship hop whatever the shape of the graph.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from modlr_jsonapi.adapters import AdapterInterface, RestUrlAdapter
from modlr_jsonapi.config import JSONAPISettings, get_settings
from modlr_jsonapi.core.document import JSONAPIDocumentBuilder
from modlr_jsonapi.core.errors import InvalidRelationshipValue, JSONAPIErrorBuilder
from modlr_jsonapi.metadata import RelationshipMetadata
from modlr_jsonapi.models import ModelCollection, ModelProtocol

from .coercers import serialize_attribute, serialize_embed
from .relationships import RelatedMany, RelatedNone, RelatedOne, classify_relationship

logger = logging.getLogger(__name__)


@dataclass
class SerializationState:
    """Relationship depth of one top-level serialize call."""

    depth: int = 0

    @property
    def is_root(self) -> bool:
        return self.depth == 0

    @contextmanager
    def descend(self) -> Iterator[None]:
        self.depth += 1
        try:
            yield
        finally:
            self.depth = max(self.depth - 1, 0)


@contextmanager
def collection_auto_init_suspended(model: ModelProtocol) -> Iterator[None]:
    """Disable collection auto-init on ``model``, restoring the prior flag on exit."""
    previous = model.collection_auto_init
    model.enable_collection_auto_init(False)
    try:
        yield
    finally:
        model.enable_collection_auto_init(previous)


class JSONAPISerializer:
    """Serialize models into JSON:API documents (www.jsonapi.org).

    Every public method starts a fresh :class:`SerializationState` and returns
    an encoded JSON string. The instance holds no per-call state and may be
    shared across requests.
    """

    document_builder_class: type = JSONAPIDocumentBuilder
    error_builder_class: type = JSONAPIErrorBuilder

    def __init__(
        self,
        adapter: AdapterInterface | None = None,
        *,
        settings: JSONAPISettings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.adapter = adapter or RestUrlAdapter(settings=self.settings)
        self.document_builder = self.document_builder_class(settings=self.settings)
        self.error_builder = self.error_builder_class()

    def serialize(self, model: ModelProtocol | None) -> str:
        """Encode a single-resource document; ``None`` yields ``{"data": null}``."""
        if model is not None:
            logger.debug("Serializing %s:%s", model.get_type(), model.get_id())
        document = self.build_document(model, SerializationState())
        return self.document_builder.encode(document)

    def serialize_array(self, models: Iterable[ModelProtocol]) -> str:
        """Encode a collection document, preserving input order."""
        models = list(models)
        logger.debug("Serializing %d models", len(models))
        document = self.build_collection_document(models, SerializationState())
        return self.document_builder.encode(document)

    def serialize_collection(self, collection: ModelCollection) -> str:
        """Encode the models already loaded in ``collection``."""
        return self.serialize_array(collection.all_without_load())

    def serialize_error(self, title: str, message: str, status_code: int) -> str:
        """Encode a document holding exactly one error object."""
        error = self.error_builder.error_object(
            status=str(status_code), title=title, detail=message
        )
        return self.document_builder.encode(self.error_builder.error_document([error]))

    def build_document(
        self, model: ModelProtocol | None, state: SerializationState
    ) -> dict[str, Any]:
        """Return the unencoded single-resource document at ``state``'s depth."""
        resource = None if model is None else self.serialize_model(model, state)
        return self.document_builder.build_single(resource)

    def build_collection_document(
        self, models: Iterable[ModelProtocol], state: SerializationState
    ) -> dict[str, Any]:
        """Return the unencoded collection document at ``state``'s depth."""
        return self.document_builder.build_collection(
            self.serialize_model(model, state) for model in models
        )

    def serialize_model(
        self, model: ModelProtocol, state: SerializationState
    ) -> dict[str, Any]:
        """Serialize the resource object of a model.

        Below the root only the resource identifier is produced.
        """
        serialized: dict[str, Any] = {"type": model.get_type(), "id": model.get_id()}
        if not state.is_root:
            return serialized

        metadata = model.get_metadata()
        attributes: dict[str, Any] = {}
        for key, attr_meta in metadata.get_attributes().items():
            attributes[key] = serialize_attribute(model.get(key), attr_meta)
        for key, embedded_prop_meta in metadata.get_embeds().items():
            attributes[key] = serialize_embed(model.get(key), embedded_prop_meta)
        if attributes:
            serialized["attributes"] = attributes

        serialized["links"] = {"self": self.adapter.build_url(metadata, model.get_id())}

        relationships: dict[str, Any] = {}
        with collection_auto_init_suspended(model), state.descend():
            for key, rel_meta in metadata.get_relationships().items():
                relationships[key] = self.serialize_relationship(
                    model, model.get(key), rel_meta, state
                )
        if relationships:
            serialized["relationships"] = relationships
        return serialized

    def serialize_relationship(
        self,
        owner: ModelProtocol,
        value: Any,
        rel_meta: RelationshipMetadata,
        state: SerializationState,
    ) -> dict[str, Any]:
        """Serialize a relationship object: linkage plus navigation links."""
        related = classify_relationship(value)
        if rel_meta.is_one():
            if isinstance(related, RelatedNone):
                serialized = self.serialize_has_one(None, state)
            elif isinstance(related, RelatedOne):
                serialized = self.serialize_has_one(related.model, state)
            else:
                raise self._invalid_relationship(owner, rel_meta)
        else:
            if isinstance(related, RelatedNone):
                serialized = self.serialize_has_many([], state)
            elif isinstance(related, RelatedMany):
                serialized = self.serialize_has_many(related.models, state)
            else:
                raise self._invalid_relationship(owner, rel_meta)

        owner_meta = owner.get_metadata()
        key = rel_meta.get_key()
        serialized["links"] = {
            "self": self.adapter.build_url(owner_meta, owner.get_id(), key),
            "related": self.adapter.build_url(owner_meta, owner.get_id(), key, True),
        }
        return serialized

    def serialize_has_one(
        self, model: ModelProtocol | None, state: SerializationState
    ) -> dict[str, Any]:
        return {"data": self.build_document(model, state)["data"]}

    def serialize_has_many(
        self, models: list[ModelProtocol], state: SerializationState
    ) -> dict[str, Any]:
        if not models:
            return self.serialize_has_one(None, state)
        return {"data": self.build_collection_document(models, state)["data"]}

    def _invalid_relationship(
        self, owner: ModelProtocol, rel_meta: RelationshipMetadata
    ) -> InvalidRelationshipValue:
        logger.warning(
            "Invalid value for %s relationship %s on %s:%s",
            rel_meta.rel_type.value,
            rel_meta.get_key(),
            owner.get_type(),
            owner.get_id(),
        )
        return InvalidRelationshipValue(rel_meta.get_key())
