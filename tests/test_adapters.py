"""Tests for modlr_jsonapi.adapters."""

from modlr_jsonapi import JSONAPISettings, RestUrlAdapter
from modlr_jsonapi.metadata import EntityMetadata

META = EntityMetadata.define("articles")


def test_resource_url():
    adapter = RestUrlAdapter("http://api.test/v1/", settings=JSONAPISettings())
    assert adapter.build_url(META, "1") == "http://api.test/v1/articles/1"


def test_relationship_urls():
    adapter = RestUrlAdapter("/api", settings=JSONAPISettings())
    assert adapter.build_url(META, "1", "author") == "/api/articles/1/relationships/author"
    assert adapter.build_url(META, "1", "author", True) == "/api/articles/1/author"


def test_settings_supply_defaults():
    settings = JSONAPISettings(base_url="https://example.com", related_segment="links")
    adapter = RestUrlAdapter(settings=settings)
    assert adapter.build_url(META, "1", "author") == "https://example.com/articles/1/links/author"


def test_empty_base_url_builds_relative_urls():
    adapter = RestUrlAdapter("", settings=JSONAPISettings())
    assert adapter.build_url(META, "abc") == "/articles/abc"
