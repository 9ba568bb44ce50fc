"""Application DTOs (no ORM dependency)."""

from content.application.dtos.route_defaults import RouteDefaults, StructureMetadata
from content.application.dtos.search import SearchIndexMetadata

__all__ = [
    "RouteDefaults",
    "SearchIndexMetadata",
    "StructureMetadata",
]
