"""In-memory models, embeds and collections."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Mapping

from modlr_jsonapi.metadata import EntityMetadata


class Embed:
    """Embedded value object backed by a plain mapping."""

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, key: str) -> Any:
        return self._values.get(key)


class EmbedCollection:
    """Ordered sequence of embeds."""

    def __init__(self, embeds: Iterable[Embed] = ()) -> None:
        self._embeds = list(embeds)

    def __iter__(self) -> Iterator[Embed]:
        return iter(self._embeds)

    def __len__(self) -> int:
        return len(self._embeds)


class ModelCollection:
    """Has-many collection that may load its models lazily.

    ``loader`` is called at most once, the first time the collection is
    initialized. Until then only the models passed at construction are known.
    """

    def __init__(
        self,
        models: Iterable["Model"] = (),
        *,
        loader: Callable[[], Iterable["Model"]] | None = None,
    ) -> None:
        self._models = list(models)
        self._loader = loader
        self.loaded = loader is None

    def initialize(self) -> None:
        """Run the loader if it has not run yet."""
        if self.loaded:
            return
        self._models = list(self._loader())
        self.loaded = True

    def all_without_load(self) -> list["Model"]:
        """Return the models known so far without triggering a load."""
        return list(self._models)

    def __iter__(self) -> Iterator["Model"]:
        self.initialize()
        return iter(self._models)

    def __len__(self) -> int:
        self.initialize()
        return len(self._models)


class Model:
    """Typed domain object holding attribute, embed and relationship values.

    Values are keyed by property name. When collection auto-init is enabled,
    reading a has-many :class:`ModelCollection` initializes it.
    """

    def __init__(
        self,
        metadata: EntityMetadata,
        id_: str,
        values: Mapping[str, Any] | None = None,
    ) -> None:
        self._metadata = metadata
        self._id = id_
        self._values = dict(values or {})
        self.collection_auto_init = True

    def get(self, key: str) -> Any:
        value = self._values.get(key)
        if isinstance(value, ModelCollection) and self.collection_auto_init:
            value.initialize()
        return value

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def get_type(self) -> str:
        return self._metadata.type

    def get_id(self) -> str:
        return self._id

    def get_metadata(self) -> EntityMetadata:
        return self._metadata

    def enable_collection_auto_init(self, enabled: bool) -> None:
        self.collection_auto_init = enabled

    def __repr__(self) -> str:
        return f"<Model {self.get_type()}:{self._id}>"
