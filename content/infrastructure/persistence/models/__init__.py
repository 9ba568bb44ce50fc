"""SQLAlchemy ORM models (registered on Base.metadata on import)."""

from content.infrastructure.persistence.models.content import (
    ContentRichEntityModel,
    DimensionContentModel,
)

__all__ = ["ContentRichEntityModel", "DimensionContentModel"]
