"""Application services: aggregation, merging, normalization, mapping, search metadata."""

from content.application.services.cache_lifetime_resolver import CacheLifetimeResolver
from content.application.services.content_aggregator import ContentAggregator
from content.application.services.content_normalizer import (
    ContentNormalizer,
    DimensionContentNormalizer,
    Normalizer,
    TemplateNormalizer,
)
from content.application.services.data_mappers import WebspaceDataMapper
from content.application.services.mergers import (
    AuthorMerger,
    DimensionContentMerger,
    Merger,
    TemplateMerger,
    WebspaceMerger,
)
from content.application.services.search_metadata import ContentSearchMetadataProvider

__all__ = [
    "AuthorMerger",
    "CacheLifetimeResolver",
    "ContentAggregator",
    "ContentNormalizer",
    "ContentSearchMetadataProvider",
    "DimensionContentMerger",
    "DimensionContentNormalizer",
    "Merger",
    "Normalizer",
    "TemplateMerger",
    "TemplateNormalizer",
    "WebspaceDataMapper",
    "WebspaceMerger",
]
