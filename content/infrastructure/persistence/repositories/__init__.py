"""SQLAlchemy repositories returning domain entities."""

from content.infrastructure.persistence.repositories.content_rich_entity_repo import (
    ContentRichEntityRepository,
)

__all__ = ["ContentRichEntityRepository"]
