"""URL builders used to fill ``links`` entries."""

from __future__ import annotations

from typing import Protocol

from modlr_jsonapi.config import JSONAPISettings, get_settings
from modlr_jsonapi.metadata import EntityMetadata


class AdapterInterface(Protocol):
    """Build resource and relationship URLs for an entity type."""

    def build_url(
        self,
        metadata: EntityMetadata,
        identifier: str,
        relationship_key: str | None = None,
        is_related: bool = False,
    ) -> str:
        ...


class RestUrlAdapter:
    """Build ``{base}/{type}/{id}`` style URLs.

    Relationship links follow the JSON:API recommendation:
    ``{base}/{type}/{id}/relationships/{key}`` for ``self`` and
    ``{base}/{type}/{id}/{key}`` for ``related``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        settings: JSONAPISettings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        if base_url is None:
            base_url = self.settings.base_url
        self.base_url = base_url.rstrip("/")

    def build_url(
        self,
        metadata: EntityMetadata,
        identifier: str,
        relationship_key: str | None = None,
        is_related: bool = False,
    ) -> str:
        """Return the URL of a resource, or of one of its relationships."""
        url = self._resource_url(metadata.type, identifier)
        if relationship_key is None:
            return url
        if is_related:
            return f"{url}/{relationship_key}"
        return f"{url}/{self.settings.related_segment}/{relationship_key}"

    def _resource_url(self, type_: str, identifier: str) -> str:
        return f"{self.base_url}/{type_}/{identifier}"
