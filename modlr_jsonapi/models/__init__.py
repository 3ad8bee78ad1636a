"""Model and embed access used by the serializer."""

from .base import Embed, EmbedCollection, Model, ModelCollection
from .protocols import EmbedProtocol, ModelProtocol

__all__ = [
    "Embed",
    "EmbedCollection",
    "EmbedProtocol",
    "Model",
    "ModelCollection",
    "ModelProtocol",
]
