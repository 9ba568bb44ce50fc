"""DTOs for search indexing metadata."""

from dataclasses import dataclass

from content.domain.enums import Stage


@dataclass(frozen=True)
class SearchIndexMetadata:
    """Where and how merged content of one resource and stage is indexed."""

    index_name: str
    resource_key: str
    stage: Stage
    id_field: str = "id"
    locale_field: str = "locale"
