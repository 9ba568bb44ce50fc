"""Template structure metadata (view, controller, cache lifetime)."""

from content.infrastructure.structure.metadata_provider import (
    StructureMetadataProvider,
    TemplateDefinition,
)

__all__ = ["StructureMetadataProvider", "TemplateDefinition"]
