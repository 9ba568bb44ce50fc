"""Service interfaces (ports) for the application layer.

Protocols define contracts for collaborators the resolution core consumes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from content.application.dtos.route_defaults import StructureMetadata
    from content.domain.entities import TemplateBearing


class ICacheLifetimeResolver(Protocol):
    """Protocol for converting a declarative cache lifetime into seconds."""

    def supports(self, type: str, value: str | int | float) -> bool:
        """Return whether the (type, value) pair can be resolved."""

    def resolve(self, type: str, value: str | int | float) -> int:
        """Return the lifetime in seconds (only valid when supports() is True)."""


class IStructureMetadataProvider(Protocol):
    """Protocol for template/view metadata lookup."""

    def get_metadata(self, content: TemplateBearing) -> StructureMetadata:
        """Return view, controller and cache lifetime for the content's template.

        Raises MetadataNotFoundError when no definition exists.
        """
