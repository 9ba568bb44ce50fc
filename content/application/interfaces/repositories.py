"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from content.domain.entities import ContentRichEntity, DimensionContent

E = TypeVar("E", bound="ContentRichEntity")
C = TypeVar("C", bound="DimensionContent")


class IContentRichEntityRepository(Protocol):
    """Protocol for loading content rich entities and raw variants by primary key."""

    async def get_by_id(
        self, entity_class: type[E], entity_id: str
    ) -> E | None:
        """Return the entity with all of its variants, or None (exact id match)."""

    async def get_dimension_content_by_id(
        self, content_class: type[C], content_id: str
    ) -> C | None:
        """Return one raw (unmerged) variant of content_class's type by id, or None."""
