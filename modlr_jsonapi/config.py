"""Settings for JSON:API serialization.

Values come from init kwargs first, then ``MODLR_JSONAPI_*`` environment
variables, then the defaults below.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class JSONAPISettings(BaseSettings):
    """Serializer and URL building settings.

    Attributes:
        base_url: Prefix for URLs built by :class:`~modlr_jsonapi.adapters.RestUrlAdapter`.
        ensure_ascii: Escape non-ASCII characters in encoded documents.
        related_segment: Path segment used in relationship ``self`` links.
    """

    model_config = SettingsConfigDict(env_prefix="MODLR_JSONAPI_", frozen=True)

    base_url: str = ""
    ensure_ascii: bool = True
    related_segment: str = "relationships"


@lru_cache(maxsize=1)
def get_settings() -> JSONAPISettings:
    """Return the process-wide settings instance."""
    return JSONAPISettings()
