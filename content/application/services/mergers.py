"""Capability mergers that overlay one dimension content onto another.

Each merger handles one capability and ignores objects that do not carry
it. DimensionContentMerger runs all of them in order (OCP: new capabilities
add a merger, the aggregator stays unchanged).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from content.domain.entities import (
    AuthorBearing,
    DimensionContent,
    TemplateBearing,
    WebspaceBearing,
)


class Merger(ABC):
    """Copy one capability's values from source onto target (source wins)."""

    @abstractmethod
    def merge(self, target: DimensionContent, source: DimensionContent) -> None:
        """Overlay source onto target in place."""
        ...


class TemplateMerger(Merger):
    """Template attributes are overlaid key by key; the template key follows the source when set."""

    def merge(self, target: DimensionContent, source: DimensionContent) -> None:
        if not isinstance(target, TemplateBearing) or not isinstance(source, TemplateBearing):
            return
        if source.template_key:
            target.template_key = source.template_key
        # Explicit None values from the more specific variant still win.
        target.template_data = {**target.template_data, **source.template_data}


class WebspaceMerger(Merger):
    def merge(self, target: DimensionContent, source: DimensionContent) -> None:
        if not isinstance(target, WebspaceBearing) or not isinstance(source, WebspaceBearing):
            return
        if source.main_webspace is not None:
            target.main_webspace = source.main_webspace
        if source.additional_webspaces:
            target.additional_webspaces = list(source.additional_webspaces)


class AuthorMerger(Merger):
    def merge(self, target: DimensionContent, source: DimensionContent) -> None:
        if not isinstance(target, AuthorBearing) or not isinstance(source, AuthorBearing):
            return
        if source.author_id is not None:
            target.author_id = source.author_id
        if source.authored is not None:
            target.authored = source.authored


class DimensionContentMerger:
    """Composite merger applying every capability merger in order."""

    def __init__(self, mergers: Sequence[Merger] | None = None) -> None:
        self._mergers: tuple[Merger, ...] = (
            tuple(mergers)
            if mergers is not None
            else (TemplateMerger(), WebspaceMerger(), AuthorMerger())
        )

    def merge(self, target: DimensionContent, source: DimensionContent) -> DimensionContent:
        """Overlay source onto target with all mergers and return target."""
        for merger in self._mergers:
            merger.merge(target, source)
        return target
