"""DTOs for route defaults resolution (no dependency on ORM or HTTP)."""

from dataclasses import dataclass
from typing import Any

from content.core.constants import ROUTE_DEFAULT_CACHE_LIFETIME, ROUTE_DEFAULT_CONTROLLER
from content.domain.entities import DimensionContent


@dataclass(frozen=True)
class StructureMetadata:
    """Display metadata of a template: view id, controller id and raw cache lifetime.

    cache_lifetime stays undecoded here; the route defaults provider validates
    it so a bad definition fails at resolution time with a clear error.
    """

    template_type: str
    template_key: str
    view: str
    controller: str
    cache_lifetime: Any = None


@dataclass(frozen=True)
class RouteDefaults:
    """Routing metadata for serving one resolved (merged, live) content projection."""

    object: DimensionContent
    view: str
    structure: StructureMetadata
    controller: str
    cache_lifetime: int | None

    def as_route_defaults(self) -> dict[str, Any]:
        """Return the mapping consumed by the router (underscore keys are framework keys)."""
        return {
            "object": self.object,
            "view": self.view,
            "structure": self.structure,
            ROUTE_DEFAULT_CONTROLLER: self.controller,
            ROUTE_DEFAULT_CACHE_LIFETIME: self.cache_lifetime,
        }
