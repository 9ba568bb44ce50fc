"""Content rich entity (aggregate root owning dimension content variants).

Represents the business concept independent of persistence.
"""

from dataclasses import dataclass, field
from typing import ClassVar

from content.domain.entities.dimension_content import DimensionContent
from content.domain.exceptions import ValidationException
from content.domain.value_objects.core import DimensionKey, ResourceReference


@dataclass
class ContentRichEntity:
    """Root entity with a stable id that owns its dimension content variants.

    Subclasses set RESOURCE_KEY and dimension_content_class for a concrete
    content type (e.g. pages, articles). Variants are stored by DimensionKey,
    so there is at most one variant per key; adding a variant for an existing
    key replaces it.
    """

    RESOURCE_KEY: ClassVar[str] = "contents"
    dimension_content_class: ClassVar[type[DimensionContent]] = DimensionContent

    id: str

    _dimension_contents: dict[DimensionKey, DimensionContent] = field(
        default_factory=dict, init=False, repr=False
    )

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Bind the variant class to this content type's RESOURCE_KEY.

        Raises:
            TypeError: If the variant class is already bound to another type.
        """
        super().__init_subclass__(**kwargs)
        content_class = cls.__dict__.get("dimension_content_class")
        if content_class is None or content_class is DimensionContent:
            return
        bound_key = content_class.__dict__.get("RESOURCE_KEY")
        if bound_key is None:
            content_class.RESOURCE_KEY = cls.RESOURCE_KEY
        elif bound_key != cls.RESOURCE_KEY:
            raise TypeError(
                f"{content_class.__name__} holds {bound_key!r} variants, "
                f"not {cls.RESOURCE_KEY!r}"
            )

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate entity business rules. Raises ValidationException if invalid."""
        if not self.id:
            raise ValidationException("Content rich entity ID is required", field="id")

    @property
    def reference(self) -> ResourceReference:
        return ResourceReference(resource_key=self.RESOURCE_KEY, resource_id=self.id)

    @property
    def dimension_contents(self) -> tuple[DimensionContent, ...]:
        return tuple(self._dimension_contents.values())

    def create_dimension_content(self, dimension: DimensionKey) -> DimensionContent:
        """Create a detached variant of this entity's content type for a dimension.

        The result is not added to the entity; call add_dimension_content to
        attach it, or use it as a merge target.

        Args:
            dimension: Dimension key of the new variant.

        Returns:
            New instance of dimension_content_class referencing this entity.
        """
        return self.dimension_content_class(resource=self.reference, dimension=dimension)

    def add_dimension_content(self, dimension_content: DimensionContent) -> None:
        """Attach a variant, replacing any existing variant for the same key.

        Raises:
            ValidationException: If the variant belongs to another entity, has
                the wrong content type, or is a merged projection.
        """
        if not isinstance(dimension_content, self.dimension_content_class):
            raise ValidationException(
                f"{self.RESOURCE_KEY} variants must be "
                f"{self.dimension_content_class.__name__}, got "
                f"{type(dimension_content).__name__}",
                field="dimension_content",
            )
        if not dimension_content.belongs_to(self.reference):
            raise ValidationException(
                "Dimension content belongs to another entity", field="resource"
            )
        if dimension_content.merged:
            raise ValidationException(
                "Merged dimension content cannot be attached to an entity",
                field="merged",
            )
        self._dimension_contents[dimension_content.dimension] = dimension_content

    def get_dimension_content(self, dimension: DimensionKey) -> DimensionContent | None:
        """Return the variant stored for exactly this key, or None."""
        return self._dimension_contents.get(dimension)

    def remove_dimension_content(self, dimension: DimensionKey) -> DimensionContent | None:
        """Detach and return the variant for a key (None if absent)."""
        return self._dimension_contents.pop(dimension, None)

    def has_dimension_content(self, dimension: DimensionKey) -> bool:
        return dimension in self._dimension_contents
