"""Application layer: interfaces, DTOs, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (entity loading, template metadata).
"""

from content.application.dtos import RouteDefaults, SearchIndexMetadata, StructureMetadata
from content.application.interfaces import (
    ICacheLifetimeResolver,
    IContentRichEntityRepository,
    IStructureMetadataProvider,
)
from content.application.services import (
    CacheLifetimeResolver,
    ContentAggregator,
    ContentNormalizer,
    ContentSearchMetadataProvider,
    WebspaceDataMapper,
)
from content.application.use_cases import ContentRouteDefaultsProvider

__all__ = [
    "CacheLifetimeResolver",
    "ContentAggregator",
    "ContentNormalizer",
    "ContentRouteDefaultsProvider",
    "ContentSearchMetadataProvider",
    "ICacheLifetimeResolver",
    "IContentRichEntityRepository",
    "IStructureMetadataProvider",
    "RouteDefaults",
    "SearchIndexMetadata",
    "StructureMetadata",
    "WebspaceDataMapper",
]
