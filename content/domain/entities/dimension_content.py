"""Dimension content domain entity.

One variant of a content rich entity for a single dimension key, or the
merged projection the aggregator builds from several variants.
"""

from dataclasses import dataclass
from typing import ClassVar

from content.domain.enums import Stage
from content.domain.value_objects.core import DimensionKey, ResourceReference


@dataclass(kw_only=True)
class DimensionContent:
    """Variant data for one dimension key of a content rich entity.

    resource is a back-reference only; the owning ContentRichEntity holds the
    variant. A merged projection has merged=True and no id of its own: it is
    rebuilt per request and never attached to an entity or persisted.
    Capabilities (template, webspace, author) are added by mixing in the
    classes from content.domain.entities.capabilities.

    RESOURCE_KEY names the content type whose variants this class holds; it is
    bound by the owning ContentRichEntity subclass.
    """

    RESOURCE_KEY: ClassVar[str | None] = None

    resource: ResourceReference
    dimension: DimensionKey
    id: str | None = None
    merged: bool = False

    @property
    def locale(self) -> str | None:
        return self.dimension.locale

    @property
    def stage(self) -> Stage:
        return self.dimension.stage

    def mark_as_merged(self) -> None:
        """Flag this object as an aggregated projection (eligible for indexing)."""
        self.merged = True

    def belongs_to(self, reference: ResourceReference) -> bool:
        """Return whether this variant references the given entity."""
        return self.resource == reference
