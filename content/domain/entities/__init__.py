"""Domain entities and capability mixins.

Pure domain models; no ORM or persistence concerns.
"""

from content.domain.entities.capabilities import (
    AuthorBearing,
    TemplateBearing,
    WebspaceBearing,
)
from content.domain.entities.content_rich_entity import ContentRichEntity
from content.domain.entities.dimension_content import DimensionContent

__all__ = [
    "AuthorBearing",
    "ContentRichEntity",
    "DimensionContent",
    "TemplateBearing",
    "WebspaceBearing",
]
