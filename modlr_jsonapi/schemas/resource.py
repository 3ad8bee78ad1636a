"""Pydantic schemas for JSON:API error documents."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class JSONAPIErrorObject(BaseModel):
    """Single JSON:API error object."""

    model_config = ConfigDict(extra="allow")

    status: Optional[str] = None
    code: Optional[str] = None
    title: Optional[str] = None
    detail: Optional[str] = None
    source: Optional[dict[str, Any]] = None
    meta: Optional[dict[str, Any]] = None


class JSONAPIErrorDocument(BaseModel):
    """Top-level JSON:API error document."""

    errors: list[JSONAPIErrorObject]
