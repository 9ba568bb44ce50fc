"""Structure metadata provider backed by template definitions.

Template definitions are validated with pydantic (from code or from a JSON
file). The cache lifetime is kept raw; the route defaults provider validates
it at resolution time.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from content.application.dtos.route_defaults import StructureMetadata
from content.core.config import get_settings
from content.domain.entities import TemplateBearing
from content.domain.exceptions import MetadataNotFoundError
from content.shared.telemetry import get_logger

logger = get_logger(__name__)


class TemplateDefinition(BaseModel):
    """One template of a template type (e.g. page/default) and how it is rendered."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str = Field(min_length=1)
    key: str = Field(min_length=1)
    view: str = Field(min_length=1)
    controller: str = Field(min_length=1)
    cache_lifetime: Any = Field(default=None, alias="cacheLifetime")


_definitions_adapter = TypeAdapter(list[TemplateDefinition])


class StructureMetadataProvider:
    """Look up structure metadata by (template type, template key) (IStructureMetadataProvider)."""

    def __init__(self, definitions: Iterable[TemplateDefinition]) -> None:
        self._definitions: dict[tuple[str, str], TemplateDefinition] = {}
        for definition in definitions:
            self._definitions[(definition.type, definition.key)] = definition

    @classmethod
    def from_file(cls, path: str | Path) -> StructureMetadataProvider:
        """Load definitions from a JSON array file.

        Raises:
            pydantic.ValidationError: If the file content is not a list of definitions.
        """
        definitions = _definitions_adapter.validate_json(Path(path).read_bytes())
        logger.info("Loaded %d template definition(s) from %s", len(definitions), path)
        return cls(definitions)

    @classmethod
    def from_settings(cls) -> StructureMetadataProvider:
        """Load definitions from settings.templates_path (empty provider when unset)."""
        path = get_settings().templates_path
        if not path:
            return cls([])
        return cls.from_file(path)

    def get_metadata(self, content: TemplateBearing) -> StructureMetadata:
        """Return metadata for the content's template.

        Raises:
            MetadataNotFoundError: If the template key is unset or unknown for the type.
        """
        template_type = content.get_template_type()
        template_key = content.template_key
        definition = (
            self._definitions.get((template_type, template_key)) if template_key else None
        )
        if definition is None:
            raise MetadataNotFoundError(template_type, template_key)
        return StructureMetadata(
            template_type=definition.type,
            template_key=definition.key,
            view=definition.view,
            controller=definition.controller,
            cache_lifetime=definition.cache_lifetime,
        )
