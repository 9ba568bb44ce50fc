"""Content normalization: turn content objects into serialization-ready dicts.

ContentNormalizer builds a generic serialization with pydantic, drops the
attributes every registered normalizer hides, then lets each normalizer
enhance the result. Objects a normalizer does not handle pass through it
unchanged.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from collections.abc import Sequence
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter

from content.core.constants import DIMENSION_CONTENT_INTERNAL_ATTRIBUTES
from content.domain.entities import DimensionContent, TemplateBearing


class Normalizer(ABC):
    """Hide raw attributes and add derived ones for a kind of object."""

    @abstractmethod
    def get_ignored_attributes(self, obj: object) -> set[str]:
        """Return attribute names to drop from the generic serialization."""
        ...

    @abstractmethod
    def enhance(self, obj: object, normalized_data: dict[str, Any]) -> dict[str, Any]:
        """Return normalized_data with derived fields added."""
        ...


class DimensionContentNormalizer(Normalizer):
    """Expose the owning entity's identity instead of merge-internal fields."""

    def get_ignored_attributes(self, obj: object) -> set[str]:
        if not isinstance(obj, DimensionContent):
            return set()
        return set(DIMENSION_CONTENT_INTERNAL_ATTRIBUTES)

    def enhance(self, obj: object, normalized_data: dict[str, Any]) -> dict[str, Any]:
        if not isinstance(obj, DimensionContent):
            return normalized_data
        normalized_data["id"] = obj.resource.resource_id
        normalized_data["locale"] = obj.locale
        normalized_data["stage"] = obj.stage.value
        return normalized_data


class TemplateNormalizer(Normalizer):
    """Flatten template attributes into the root and expose the template key as 'template'."""

    def get_ignored_attributes(self, obj: object) -> set[str]:
        if not isinstance(obj, TemplateBearing):
            return set()
        return {"template_key", "template_data"}

    def enhance(self, obj: object, normalized_data: dict[str, Any]) -> dict[str, Any]:
        if not isinstance(obj, TemplateBearing):
            return normalized_data
        template_data = _dump(obj.template_data)
        # Structural fields win over template attributes of the same name.
        enhanced = {**template_data, **normalized_data}
        enhanced["template"] = obj.template_key
        return enhanced


@lru_cache(maxsize=None)
def _adapter(tp: type) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


def _dump(value: Any, exclude: set[str] | None = None) -> Any:
    """JSON-mode serialization of any value pydantic understands."""
    return _adapter(type(value)).dump_python(value, mode="json", exclude=exclude)


class ContentNormalizer:
    """Run registered normalizers over a generic serialization of an object."""

    def __init__(self, normalizers: Sequence[Normalizer] | None = None) -> None:
        self._normalizers: tuple[Normalizer, ...] = (
            tuple(normalizers)
            if normalizers is not None
            else (DimensionContentNormalizer(), TemplateNormalizer())
        )

    def get_ignored_attributes(self, obj: object) -> set[str]:
        """Union of ignored attributes over all normalizers."""
        ignored: set[str] = set()
        for normalizer in self._normalizers:
            ignored |= normalizer.get_ignored_attributes(obj)
        return ignored

    def normalize(
        self, obj: object, normalized_data: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Return the final serialization of obj.

        Args:
            obj: Object to normalize (typically a merged DimensionContent).
            normalized_data: Base serialization from another serializer; when
                omitted, the dataclass fields of obj are serialized with pydantic.

        Returns:
            Serialization-ready dict.
        """
        ignored = self.get_ignored_attributes(obj)
        if normalized_data is None:
            if not dataclasses.is_dataclass(obj):
                raise TypeError(
                    f"Cannot build a base serialization for {type(obj).__name__}; "
                    "pass normalized_data explicitly"
                )
            data: dict[str, Any] = _dump(obj, exclude=ignored)
        else:
            data = {k: v for k, v in normalized_data.items() if k not in ignored}
        for normalizer in self._normalizers:
            data = normalizer.enhance(obj, data)
        return data
