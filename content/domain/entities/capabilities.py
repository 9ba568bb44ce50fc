"""Capability mixins for dimension content.

A content type declares what its variants can carry by mixing these into
its DimensionContent subclass. Mergers, normalizers and the route defaults
provider test for a capability with isinstance, so a missing capability is
an explicit, checkable condition.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(kw_only=True)
class TemplateBearing(ABC):
    """Content that selects a template and carries its attributes.

    template_data holds the template attributes (title, url, blocks, ...)
    that are merged key by key across variants.
    """

    template_key: str | None = None
    template_data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    @abstractmethod
    def get_template_type(cls) -> str:
        """Return the template type used to look up structure metadata (e.g. 'page')."""


@dataclass(kw_only=True)
class WebspaceBearing:
    """Content assigned to a main webspace (and optionally further ones)."""

    main_webspace: str | None = None
    additional_webspaces: list[str] = field(default_factory=list)


@dataclass(kw_only=True)
class AuthorBearing:
    """Content with an author and an authored timestamp (UTC)."""

    author_id: str | None = None
    authored: datetime | None = None
