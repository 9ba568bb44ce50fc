"""Domain value objects for content resolution.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, ClassVar

from content.domain.enums import Stage
from content.domain.exceptions import InvalidCacheLifetimeError, ValidationException


@dataclass(frozen=True)
class DimensionKey:
    """Identifies one variant of a content rich entity.

    A key with locale None is the default (unlocalized) key; its variant
    carries attributes shared by every locale. Equality and hashing are
    structural so keys can index a variant mapping directly.
    """

    locale: str | None = None
    stage: Stage = Stage.DRAFT

    # Ordered from least to most specific. Only locale is overridable by a
    # more specific variant; stage selects variants but never falls back.
    # New axes (e.g. a segment) plug in here together with fallback_chain().
    AXES: ClassVar[tuple[str, ...]] = ("locale", "stage")

    def __post_init__(self) -> None:
        """Coerce stage strings and validate locale.

        Raises:
            ValidationException: If stage is unknown or locale is an empty string.
        """
        if not isinstance(self.stage, Stage):
            try:
                object.__setattr__(self, "stage", Stage(self.stage))
            except ValueError as e:
                raise ValidationException(
                    f"Stage must be one of {Stage.values()}, got {self.stage!r}",
                    field="stage",
                ) from e
        if self.locale is not None:
            if not isinstance(self.locale, str) or not self.locale.strip():
                raise ValidationException(
                    "Locale must be a non-empty string or None", field="locale"
                )

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, Any]) -> "DimensionKey":
        """Build a key from a dimension attribute mapping.

        Args:
            attributes: Mapping such as {'locale': 'de', 'stage': 'live'}.

        Returns:
            DimensionKey for exactly the given axes.

        Raises:
            ValidationException: If the mapping names an unsupported axis or
                omits one (locale may be None, but must be given).
        """
        for axis in attributes:
            if axis not in cls.AXES:
                raise ValidationException(
                    f"Unsupported dimension attribute {axis!r}; supported: {list(cls.AXES)}",
                    field=axis,
                )
        for axis in cls.AXES:
            if axis not in attributes:
                raise ValidationException(
                    f"Missing dimension attribute {axis!r}", field=axis
                )
        return cls(**dict(attributes))

    @property
    def is_localized(self) -> bool:
        return self.locale is not None

    def unlocalized(self) -> "DimensionKey":
        """Return the default key for the same stage."""
        return replace(self, locale=None)

    def fallback_chain(self) -> tuple["DimensionKey", ...]:
        """Return the keys whose variants contribute to this key, least specific first."""
        if not self.is_localized:
            return (self,)
        return (self.unlocalized(), self)

    def to_attributes(self) -> dict[str, Any]:
        """Return the key as a plain dimension attribute mapping."""
        return {"locale": self.locale, "stage": self.stage.value}


@dataclass(frozen=True)
class ResourceReference:
    """Non-owning link from a variant back to the entity that owns it."""

    resource_key: str
    resource_id: str

    def __post_init__(self) -> None:
        if not self.resource_key:
            raise ValidationException("Resource key is required", field="resource_key")
        if not self.resource_id:
            raise ValidationException("Resource id is required", field="resource_id")


@dataclass(frozen=True)
class CacheLifetimeDescriptor:
    """Declarative cache lifetime from template metadata (e.g. seconds / 3600).

    Converted to seconds by a CacheLifetimeResolver.
    """

    type: str
    value: str | int | float

    @classmethod
    def from_raw(cls, raw: Any) -> "CacheLifetimeDescriptor | None":
        """Parse a raw descriptor from metadata.

        Args:
            raw: Usually a mapping {'type': ..., 'value': ...}; falsy means unset.

        Returns:
            Descriptor, or None when no lifetime is configured.

        Raises:
            InvalidCacheLifetimeError: If raw is not a {type, value} mapping.
        """
        if not raw:
            return None
        if (
            not isinstance(raw, Mapping)
            or raw.get("type") is None
            or raw.get("value") is None
            or not isinstance(raw["type"], str)
            or isinstance(raw["value"], bool)
            or not isinstance(raw["value"], (str, int, float))
        ):
            raise InvalidCacheLifetimeError(raw)
        return cls(type=raw["type"], value=raw["value"])
