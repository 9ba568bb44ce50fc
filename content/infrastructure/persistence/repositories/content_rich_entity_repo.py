"""Content rich entity repository (IContentRichEntityRepository). Maps ORM rows to domain entities."""

from __future__ import annotations

from typing import TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from content.domain.entities import (
    AuthorBearing,
    ContentRichEntity,
    DimensionContent,
    TemplateBearing,
    WebspaceBearing,
)
from content.domain.exceptions import ValidationException
from content.domain.value_objects.core import DimensionKey, ResourceReference
from content.infrastructure.persistence.models.content import (
    ContentRichEntityModel,
    DimensionContentModel,
)
from content.shared.telemetry import get_logger
from content.shared.utils.datetime import ensure_utc

logger = get_logger(__name__)

C = TypeVar("C", bound=DimensionContent)
E = TypeVar("E", bound=ContentRichEntity)


def _row_to_content(
    content_class: type[C], row: DimensionContentModel
) -> C:
    """Map an ORM variant row onto a new instance of content_class."""
    content = content_class(
        resource=ResourceReference(resource_key=row.resource_key, resource_id=row.resource_id),
        dimension=DimensionKey(locale=row.locale, stage=row.stage),
        id=row.id,
    )
    if isinstance(content, TemplateBearing):
        content.template_key = row.template_key
        content.template_data = dict(row.template_data or {})
    if isinstance(content, WebspaceBearing):
        content.main_webspace = row.main_webspace
        content.additional_webspaces = list(row.additional_webspaces or [])
    if isinstance(content, AuthorBearing):
        content.author_id = row.author_id
        content.authored = ensure_utc(row.authored)
    return content


def _content_to_row(content: DimensionContent) -> DimensionContentModel:
    """Map a domain variant to a new ORM row (capability columns only when carried)."""
    row = DimensionContentModel(
        resource_id=content.resource.resource_id,
        resource_key=content.resource.resource_key,
        locale=content.locale,
        stage=content.stage.value,
    )
    if content.id:
        row.id = content.id
    if isinstance(content, TemplateBearing):
        row.template_key = content.template_key
        row.template_data = dict(content.template_data)
    if isinstance(content, WebspaceBearing):
        row.main_webspace = content.main_webspace
        row.additional_webspaces = list(content.additional_webspaces)
    if isinstance(content, AuthorBearing):
        row.author_id = content.author_id
        row.authored = ensure_utc(content.authored)
    return row


class ContentRichEntityRepository:
    """Load and store content rich entities with their variants (exact primary key lookups)."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_id(
        self, entity_class: type[E], entity_id: str
    ) -> E | None:
        """Return the entity of entity_class with all variants, or None."""
        result = await self.db.execute(
            select(ContentRichEntityModel).where(
                ContentRichEntityModel.id == entity_id,
                ContentRichEntityModel.resource_key == entity_class.RESOURCE_KEY,
            )
        )
        row = result.scalar_one_or_none()
        if row is None:
            return None
        entity = entity_class(id=row.id)
        for variant_row in row.dimension_contents:
            entity.add_dimension_content(
                _row_to_content(entity_class.dimension_content_class, variant_row)
            )
        return entity

    async def get_dimension_content_by_id(
        self, content_class: type[C], content_id: str
    ) -> C | None:
        """Return one raw variant of content_class's content type by its own id, or None.

        Raises:
            ValidationException: If content_class is not bound to a content type.
        """
        if content_class.RESOURCE_KEY is None:
            raise ValidationException(
                f"{content_class.__name__} is not the variant class of a content type",
                field="content_class",
            )
        result = await self.db.execute(
            select(DimensionContentModel).where(
                DimensionContentModel.id == content_id,
                DimensionContentModel.resource_key == content_class.RESOURCE_KEY,
            )
        )
        row = result.scalar_one_or_none()
        return _row_to_content(content_class, row) if row else None

    async def add(self, entity: ContentRichEntity) -> ContentRichEntity:
        """Persist a new entity with its variants; assigns generated variant ids back."""
        variants = entity.dimension_contents
        rows = [_content_to_row(variant) for variant in variants]
        self.db.add(
            ContentRichEntityModel(
                id=entity.id,
                resource_key=entity.RESOURCE_KEY,
                dimension_contents=rows,
            )
        )
        await self.db.flush()
        for variant, row in zip(variants, rows, strict=True):
            variant.id = row.id
        logger.debug("Stored %s %s with %d variant(s)", entity.RESOURCE_KEY, entity.id, len(rows))
        return entity

    async def delete(self, entity_class: type[ContentRichEntity], entity_id: str) -> bool:
        """Delete an entity and (cascading) all of its variants. Returns False if absent."""
        result = await self.db.execute(
            select(ContentRichEntityModel).where(
                ContentRichEntityModel.id == entity_id,
                ContentRichEntityModel.resource_key == entity_class.RESOURCE_KEY,
            )
        )
        row = result.scalar_one_or_none()
        if row is None:
            return False
        await self.db.delete(row)
        await self.db.flush()
        return True
