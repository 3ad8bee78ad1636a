"""Tests for modlr_jsonapi.models."""

from modlr_jsonapi.models import Model, ModelCollection, ModelProtocol


def test_model_accessors(article):
    assert article.get_type() == "articles"
    assert article.get_id() == "1"
    assert article.get_metadata().type == "articles"
    assert article.get("missing") is None
    assert isinstance(article, ModelProtocol)


def test_collection_loads_once(comment_meta):
    calls = []

    def load():
        calls.append(1)
        return [Model(comment_meta, "7")]

    collection = ModelCollection(loader=load)
    assert collection.all_without_load() == []
    assert [model.get_id() for model in collection] == ["7"]
    assert len(collection) == 1
    assert calls == [1]


def test_model_get_initializes_collection_only_when_enabled(article, comment_meta):
    collection = ModelCollection(loader=lambda: [Model(comment_meta, "7")])
    article.set("comments", collection)
    article.enable_collection_auto_init(False)
    assert article.get("comments") is collection
    assert not collection.loaded
    article.enable_collection_auto_init(True)
    article.get("comments")
    assert collection.loaded
