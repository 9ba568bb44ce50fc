"""Domain value objects."""

from content.domain.value_objects.core import (
    CacheLifetimeDescriptor,
    DimensionKey,
    ResourceReference,
)

__all__ = [
    "CacheLifetimeDescriptor",
    "DimensionKey",
    "ResourceReference",
]
