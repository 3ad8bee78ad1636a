"""SQLAlchemy binding for JSON:API serialization."""

from .model import SQLAlchemyModel
from .registry import SQLAlchemyMetadataRegistry, column_kind

__all__ = ["SQLAlchemyMetadataRegistry", "SQLAlchemyModel", "column_kind"]
