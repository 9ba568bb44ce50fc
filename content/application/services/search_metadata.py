"""Search metadata provider: which content objects are indexed, and where."""

from __future__ import annotations

from collections.abc import Iterable

from content.application.dtos.search import SearchIndexMetadata
from content.core.constants import PUBLISHED_INDEX_SUFFIX
from content.domain.entities import ContentRichEntity, DimensionContent
from content.domain.enums import Stage


def index_name_for(resource_key: str, stage: Stage) -> str:
    """Return the index name for a resource and stage (live content has its own index)."""
    if stage is Stage.LIVE:
        return f"{resource_key}{PUBLISHED_INDEX_SUFFIX}"
    return resource_key


class ContentSearchMetadataProvider:
    """Index metadata for merged dimension content of the registered content types.

    Only merged projections are indexable: a raw variant lacks the default
    variant's shared attributes and would produce an incomplete document.
    """

    def __init__(self, entity_classes: Iterable[type[ContentRichEntity]]) -> None:
        self._resource_keys: dict[str, type[ContentRichEntity]] = {
            entity_class.RESOURCE_KEY: entity_class for entity_class in entity_classes
        }

    def get_metadata_for_object(self, obj: object) -> SearchIndexMetadata | None:
        """Return index metadata for obj, or None when obj must not be indexed."""
        if not isinstance(obj, DimensionContent) or not obj.merged:
            return None
        entity_class = self._resource_keys.get(obj.resource.resource_key)
        if entity_class is None or not isinstance(obj, entity_class.dimension_content_class):
            return None
        return self._metadata(obj.resource.resource_key, obj.stage)

    def get_all_metadata(self) -> list[SearchIndexMetadata]:
        """Return metadata for every registered resource and stage."""
        return [
            self._metadata(resource_key, stage)
            for resource_key in self._resource_keys
            for stage in Stage
        ]

    def get_metadata_for_index(self, index_name: str) -> SearchIndexMetadata | None:
        """Return metadata for a stored document's index name, or None if unknown."""
        for metadata in self.get_all_metadata():
            if metadata.index_name == index_name:
                return metadata
        return None

    @staticmethod
    def _metadata(resource_key: str, stage: Stage) -> SearchIndexMetadata:
        return SearchIndexMetadata(
            index_name=index_name_for(resource_key, stage),
            resource_key=resource_key,
            stage=stage,
        )
