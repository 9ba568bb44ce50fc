"""Content aggregator: merge an entity's variants into one projection for a dimension."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from content.application.services.mergers import DimensionContentMerger
from content.domain.entities import ContentRichEntity, DimensionContent
from content.domain.exceptions import ContentNotFoundError, ValidationException
from content.domain.value_objects.core import DimensionKey
from content.shared.telemetry import add_span_attributes, get_logger, traced

logger = get_logger(__name__)


class ContentAggregator:
    """Resolve a content rich entity into a merged projection.

    The default (unlocalized) variant of the requested stage supplies the
    baseline; the localized variant of the same stage is overlaid on top of
    it. Stage never falls back. The projection takes its identity from the
    entity, is flagged as merged and is never attached to the entity.
    """

    def __init__(self, merger: DimensionContentMerger | None = None) -> None:
        self.merger = merger or DimensionContentMerger()

    @traced("content.aggregate")
    def aggregate(
        self,
        entity: ContentRichEntity,
        dimension: DimensionKey | Mapping[str, Any],
    ) -> DimensionContent:
        """Return the merged projection of entity for the requested dimension.

        Args:
            entity: Entity owning the variants.
            dimension: Target key, or a mapping such as {'locale': 'de', 'stage': 'live'}.

        Returns:
            New DimensionContent (entity's content type) with merged=True.

        Raises:
            ValidationException: If the target has no locale or unknown axes.
            ContentNotFoundError: If neither the default nor the localized
                variant exists for the target stage.
        """
        target = (
            dimension
            if isinstance(dimension, DimensionKey)
            else DimensionKey.from_attributes(dimension)
        )
        if target.locale is None:
            raise ValidationException(
                "A locale is required to aggregate content", field="locale"
            )

        contributing = [
            variant
            for key in target.fallback_chain()
            if (variant := entity.get_dimension_content(key)) is not None
        ]
        if not contributing:
            raise ContentNotFoundError(
                entity.RESOURCE_KEY, entity.id, target.to_attributes()
            )

        merged = entity.create_dimension_content(target)
        merged.mark_as_merged()
        for variant in contributing:
            self.merger.merge(merged, variant)

        add_span_attributes(
            resource_key=entity.RESOURCE_KEY,
            variant_count=len(contributing),
        )
        logger.debug(
            "Aggregated %s %s for %s from %d variant(s)",
            entity.RESOURCE_KEY,
            entity.id,
            target.to_attributes(),
            len(contributing),
        )
        return merged
