"""Content ORM models: content rich entities and their dimension content variants.

One generic schema serves every content type; resource_key tells the types
apart. Capability columns are nullable and only filled for content types
that carry the capability.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from content.infrastructure.persistence.database import Base
from content.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class ContentRichEntityModel(CuidMixin, TimestampMixin, Base):
    """Content rich entity. Table: content_rich_entity. Owns its variants (cascade delete)."""

    __tablename__ = "content_rich_entity"

    resource_key: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

    dimension_contents: Mapped[list["DimensionContentModel"]] = relationship(
        back_populates="entity",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )


class DimensionContentModel(CuidMixin, TimestampMixin, Base):
    """One variant per (resource_id, locale, stage). Null locale is the default variant."""

    __tablename__ = "dimension_content"

    resource_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("content_rich_entity.id", ondelete="CASCADE"),
        nullable=False,
    )
    resource_key: Mapped[str] = mapped_column(String(64), nullable=False)
    locale: Mapped[str | None] = mapped_column(String(16), nullable=True)
    stage: Mapped[str] = mapped_column(String(16), nullable=False)

    # TemplateBearing
    template_key: Mapped[str | None] = mapped_column(String(128), nullable=True)
    template_data: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    # WebspaceBearing
    main_webspace: Mapped[str | None] = mapped_column(String(128), nullable=True)
    additional_webspaces: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    # AuthorBearing
    author_id: Mapped[str | None] = mapped_column(String, nullable=True)
    authored: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    entity: Mapped[ContentRichEntityModel] = relationship(back_populates="dimension_contents")

    # NULL locales are distinct in a plain unique constraint, so the default
    # variant's uniqueness is enforced by ContentRichEntity's key mapping.
    __table_args__ = (
        UniqueConstraint(
            "resource_id",
            "locale",
            "stage",
            name="uq_dimension_content_resource_locale_stage",
        ),
        Index("ix_dimension_content_resource_stage", "resource_id", "stage"),
    )
