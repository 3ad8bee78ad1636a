"""Tagged relationship values: absent, one related model, or many."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Union

from modlr_jsonapi.models import ModelCollection, ModelProtocol


@dataclass(frozen=True)
class RelatedNone:
    """No related model."""


@dataclass(frozen=True)
class RelatedOne:
    model: ModelProtocol


@dataclass(frozen=True)
class RelatedMany:
    models: Sequence[ModelProtocol]


RelatedValue = Union[RelatedNone, RelatedOne, RelatedMany]


def classify_relationship(value: Any) -> RelatedValue | None:
    """Tag a raw relationship value.

    Collections are read without triggering a load. Returns ``None`` for
    values that are neither a model nor a sequence of models.
    """
    if value is None:
        return RelatedNone()
    if isinstance(value, ModelCollection):
        return RelatedMany(value.all_without_load())
    if isinstance(value, (list, tuple)):
        return RelatedMany(list(value))
    if isinstance(value, ModelProtocol):
        return RelatedOne(value)
    return None
