"""Attribute and embed value coercion."""

from __future__ import annotations

import dataclasses
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Mapping

from pydantic import BaseModel

from modlr_jsonapi.metadata import (
    AttributeMetadata,
    DataKind,
    EmbeddedPropMetadata,
    EmbedMetadata,
)
from modlr_jsonapi.models import EmbedProtocol


def serialize_attribute(value: Any, attr_meta: AttributeMetadata) -> Any:
    """Coerce an attribute value according to its declared data kind."""
    kind = attr_meta.data_type
    if kind is DataKind.DATE:
        return format_date(value)
    if kind is DataKind.ARRAY:
        return [] if not value else value
    if kind is DataKind.OBJECT:
        return to_mapping(value)
    return value


def format_date(value: Any) -> Any:
    """Format an instant as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC.

    Naive datetimes are read as UTC and plain dates as midnight UTC. Anything
    else is returned unchanged.
    """
    if isinstance(value, datetime):
        instant = value
    elif isinstance(value, date):
        instant = datetime.combine(value, time.min)
    else:
        return value
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    else:
        instant = instant.astimezone(timezone.utc)
    # half-up; 999500us and above carries into the next second
    milliseconds = (instant.microsecond + 500) // 1000
    instant = instant.replace(microsecond=0) + timedelta(milliseconds=milliseconds)
    return f"{instant:%Y-%m-%dT%H:%M:%S}.{milliseconds % 1000:03d}Z"


def to_mapping(value: Any) -> Any:
    """Flatten an opaque object into plain data."""
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if hasattr(value, "__dict__"):
        return {key: item for key, item in vars(value).items() if not key.startswith("_")}
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def serialize_embed(value: Any, embedded_prop_meta: EmbeddedPropMetadata) -> Any:
    """Serialize a single embed or a sequence of embeds."""
    embed_meta = embedded_prop_meta.embed_meta
    if embedded_prop_meta.is_one():
        return serialize_embed_one(embed_meta, value)
    return serialize_embed_many(embed_meta, value)


def serialize_embed_one(
    embed_meta: EmbedMetadata, embed: EmbedProtocol | None
) -> dict[str, Any] | None:
    if embed is None:
        return None
    serialized: dict[str, Any] = {}
    for key, attr_meta in embed_meta.get_attributes().items():
        serialized[key] = serialize_attribute(embed.get(key), attr_meta)
    for key, embedded_prop_meta in embed_meta.get_embeds().items():
        serialized[key] = serialize_embed(embed.get(key), embedded_prop_meta)
    return serialized or None


def serialize_embed_many(embed_meta: EmbedMetadata, embeds: Any) -> list[Any]:
    if not embeds:
        return []
    return [serialize_embed_one(embed_meta, embed) for embed in embeds]
