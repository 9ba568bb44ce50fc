"""Route defaults for content rich entities (controller, view, cache lifetime).

Recoverable lookups (unknown id, no live variant, no template metadata)
return None so the caller answers with a not-found response. Invalid cache
lifetimes and contract violations are configuration errors and propagate.
"""

from __future__ import annotations

from typing import Any

from content.application.dtos.route_defaults import RouteDefaults, StructureMetadata
from content.application.interfaces.repositories import IContentRichEntityRepository
from content.application.interfaces.services import (
    ICacheLifetimeResolver,
    IStructureMetadataProvider,
)
from content.application.services.content_aggregator import ContentAggregator
from content.domain.entities import ContentRichEntity, DimensionContent, TemplateBearing
from content.domain.enums import Stage
from content.domain.exceptions import (
    ContentContractViolationError,
    ContentNotFoundError,
    InvalidCacheLifetimeError,
    MetadataNotFoundError,
)
from content.domain.value_objects.core import CacheLifetimeDescriptor, DimensionKey
from content.shared.telemetry import add_span_event, get_logger, traced

logger = get_logger(__name__)


class ContentRouteDefaultsProvider:
    """Build route defaults for the live projection of a content rich entity."""

    def __init__(
        self,
        entity_repository: IContentRichEntityRepository,
        content_aggregator: ContentAggregator,
        metadata_provider: IStructureMetadataProvider,
        cache_lifetime_resolver: ICacheLifetimeResolver,
    ) -> None:
        self._entity_repository = entity_repository
        self._content_aggregator = content_aggregator
        self._metadata_provider = metadata_provider
        self._cache_lifetime_resolver = cache_lifetime_resolver

    @traced("content.route_defaults")
    async def get_by_entity(
        self,
        entity_class: type[Any],
        id: str,
        locale: str,
        obj: DimensionContent | None = None,
    ) -> RouteDefaults | None:
        """Return route defaults for an entity in a locale, or None for not-found.

        Args:
            entity_class: ContentRichEntity subclass to load.
            id: Entity id.
            locale: Requested locale.
            obj: Already resolved content (e.g. preview); skips loading.

        Returns:
            RouteDefaults, or None when the entity, its live content or its
            template metadata is missing.

        Raises:
            ContentContractViolationError: If the content cannot select a template.
            InvalidCacheLifetimeError: If the template's cache lifetime is invalid.
        """
        content = obj if obj is not None else await self._load_content(entity_class, id, locale)
        if content is None:
            return None

        if not isinstance(content, TemplateBearing):
            raise ContentContractViolationError(
                TemplateBearing.__name__, type(content).__name__
            )

        try:
            metadata = self._metadata_provider.get_metadata(content)
        except MetadataNotFoundError as e:
            add_span_event(
                "content.metadata_not_found",
                {"template_key": str(e.details["template_key"])},
            )
            logger.info("No route defaults for %s %s: %s", entity_class.__name__, id, e.message)
            return None

        return RouteDefaults(
            object=content,
            view=metadata.view,
            structure=metadata,
            controller=metadata.controller,
            cache_lifetime=self._get_cache_lifetime(metadata),
        )

    async def is_published(self, entity_class: type[Any], id: str, locale: str) -> bool:
        """Return whether the object behind (entity_class, id) is published.

        A dimension content variant is published when it is LIVE and its locale
        matches exactly. A content rich entity is published when it has live
        content for the locale (its aggregated live projection exists).
        """
        if issubclass(entity_class, DimensionContent):
            variant = await self._entity_repository.get_dimension_content_by_id(
                entity_class, id
            )
            if variant is None:
                return False
            return variant.stage is Stage.LIVE and variant.locale == locale

        content = await self._load_content(entity_class, id, locale)
        return (
            content is not None
            and content.stage is Stage.LIVE
            and content.locale == locale
        )

    def supports(self, entity_class: type[Any]) -> bool:
        """Return whether this provider handles the class.

        Variant classes are accepted too, so published checks can run against
        a single stored variant.
        """
        return isinstance(entity_class, type) and issubclass(
            entity_class, (ContentRichEntity, DimensionContent)
        )

    async def _load_content(
        self, entity_class: type[Any], id: str, locale: str
    ) -> DimensionContent | None:
        """Load the entity and aggregate its live content; None when either is missing."""
        if not issubclass(entity_class, ContentRichEntity):
            raise ContentContractViolationError(
                ContentRichEntity.__name__, entity_class.__name__
            )

        entity = await self._entity_repository.get_by_id(entity_class, id)
        if entity is None:
            return None

        # Route resolution only serves published content.
        try:
            return self._content_aggregator.aggregate(
                entity, DimensionKey(locale=locale, stage=Stage.LIVE)
            )
        except ContentNotFoundError:
            add_span_event("content.not_found", {"locale": locale})
            return None

    def _get_cache_lifetime(self, metadata: StructureMetadata) -> int | None:
        """Resolve the template's cache lifetime to seconds (None when unset)."""
        descriptor = CacheLifetimeDescriptor.from_raw(metadata.cache_lifetime)
        if descriptor is None:
            return None
        if not self._cache_lifetime_resolver.supports(descriptor.type, descriptor.value):
            raise InvalidCacheLifetimeError(metadata.cache_lifetime)
        return self._cache_lifetime_resolver.resolve(descriptor.type, descriptor.value)
