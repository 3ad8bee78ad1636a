"""URL building adapters for JSON:API links."""

from .base import AdapterInterface, RestUrlAdapter

__all__ = ["AdapterInterface", "RestUrlAdapter"]
