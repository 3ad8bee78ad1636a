"""Shared fixtures: a small blog domain with articles, people and comments."""

from datetime import datetime, timezone

import pytest

from modlr_jsonapi import JSONAPISerializer, JSONAPISettings, RestUrlAdapter
from modlr_jsonapi.metadata import (
    AttributeMetadata,
    Cardinality,
    DataKind,
    EmbeddedPropMetadata,
    EmbedMetadata,
    EntityMetadata,
    RelationshipMetadata,
)
from modlr_jsonapi.models import Embed, Model, ModelCollection

BASE_URL = "http://api.test/v1"


@pytest.fixture
def settings() -> JSONAPISettings:
    return JSONAPISettings(base_url=BASE_URL)


@pytest.fixture
def serializer(settings) -> JSONAPISerializer:
    return JSONAPISerializer(RestUrlAdapter(settings=settings), settings=settings)


@pytest.fixture
def address_meta() -> EmbedMetadata:
    return EmbedMetadata.define(
        "address",
        attributes=[
            AttributeMetadata(key="street"),
            AttributeMetadata(key="city"),
        ],
    )


@pytest.fixture
def person_meta(address_meta) -> EntityMetadata:
    return EntityMetadata.define(
        "people",
        attributes=[AttributeMetadata(key="name")],
        embeds=[EmbeddedPropMetadata(key="address", embed_meta=address_meta)],
        relationships=[
            RelationshipMetadata(key="articles", entity_type="articles", rel_type=Cardinality.MANY),
        ],
    )


@pytest.fixture
def comment_meta() -> EntityMetadata:
    return EntityMetadata.define("comments", attributes=[AttributeMetadata(key="body")])


@pytest.fixture
def article_meta() -> EntityMetadata:
    return EntityMetadata.define(
        "articles",
        attributes=[
            AttributeMetadata(key="title"),
            AttributeMetadata(key="published", data_type=DataKind.DATE),
            AttributeMetadata(key="tags", data_type=DataKind.ARRAY),
        ],
        relationships=[
            RelationshipMetadata(key="author", entity_type="people"),
            RelationshipMetadata(key="comments", entity_type="comments", rel_type=Cardinality.MANY),
        ],
    )


@pytest.fixture
def author(person_meta) -> Model:
    return Model(
        person_meta,
        "9",
        {"name": "Dan Gebhardt", "address": Embed({"street": "1 Main St", "city": "Springfield"})},
    )


@pytest.fixture
def comments(comment_meta) -> list[Model]:
    return [
        Model(comment_meta, "5", {"body": "First!"}),
        Model(comment_meta, "12", {"body": "I like XML better"}),
    ]


@pytest.fixture
def article(article_meta, author, comments) -> Model:
    model = Model(
        article_meta,
        "1",
        {
            "title": "JSON:API paints my bikeshed!",
            "published": datetime(2024, 1, 1, 0, 0, 0, 500000, tzinfo=timezone.utc),
            "tags": None,
            "author": author,
            "comments": ModelCollection(comments),
        },
    )
    author.set("articles", [model])
    return model
