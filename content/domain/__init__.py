"""Domain layer: entities, capabilities, value objects, enums, and exceptions.

No dependencies on infrastructure. Used by application and infrastructure
layers.
"""

from content.domain.entities import (
    AuthorBearing,
    ContentRichEntity,
    DimensionContent,
    TemplateBearing,
    WebspaceBearing,
)
from content.domain.enums import Stage
from content.domain.exceptions import (
    ContentContractViolationError,
    ContentException,
    ContentNotFoundError,
    InvalidCacheLifetimeError,
    MetadataNotFoundError,
    SqlNotConfiguredException,
    ValidationException,
)
from content.domain.value_objects import (
    CacheLifetimeDescriptor,
    DimensionKey,
    ResourceReference,
)

__all__ = [
    # Entities
    "AuthorBearing",
    "ContentRichEntity",
    "DimensionContent",
    "TemplateBearing",
    "WebspaceBearing",
    # Enums
    "Stage",
    # Exceptions
    "ContentContractViolationError",
    "ContentException",
    "ContentNotFoundError",
    "InvalidCacheLifetimeError",
    "MetadataNotFoundError",
    "SqlNotConfiguredException",
    "ValidationException",
    # Value objects
    "CacheLifetimeDescriptor",
    "DimensionKey",
    "ResourceReference",
]
