"""Shared constants for content resolution."""

# Attributes of a dimension content object that never reach serialized output
# as-is (replaced by canonical identity fields).
DIMENSION_CONTENT_INTERNAL_ATTRIBUTES: frozenset[str] = frozenset(
    {"id", "merged", "dimension", "resource"}
)

# Cache lifetime descriptor type understood by CacheLifetimeResolver.
CACHE_LIFETIME_TYPE_SECONDS = "seconds"

# Suffix for search indexes holding published (live) content.
PUBLISHED_INDEX_SUFFIX = "_published"

# Router keys for controller and cache lifetime route defaults.
ROUTE_DEFAULT_CONTROLLER = "_controller"
ROUTE_DEFAULT_CACHE_LIFETIME = "_cacheLifetime"
