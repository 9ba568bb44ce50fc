"""Data mappers: apply editorial input data onto dimension content variants."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from content.core.config import get_settings
from content.domain.entities import DimensionContent, WebspaceBearing
from content.domain.exceptions import ValidationException


class WebspaceDataMapper:
    """Map 'mainWebspace' / 'additionalWebspaces' input onto the localized variant.

    When the input does not mention a main webspace and the localized variant
    has none yet, the configured default webspace is assigned.
    """

    def __init__(self, default_webspace: str | None = None) -> None:
        self._default_webspace = (
            default_webspace
            if default_webspace is not None
            else get_settings().default_webspace
        )

    def map(
        self,
        unlocalized: DimensionContent,
        localized: DimensionContent,
        data: Mapping[str, Any],
    ) -> None:
        if not isinstance(localized, WebspaceBearing) or not isinstance(
            unlocalized, WebspaceBearing
        ):
            return

        if "mainWebspace" in data:
            main_webspace = data["mainWebspace"]
            if main_webspace is not None and not isinstance(main_webspace, str):
                raise ValidationException(
                    "mainWebspace must be a string or null", field="mainWebspace"
                )
            localized.main_webspace = main_webspace or None
        elif localized.main_webspace is None and self._default_webspace:
            localized.main_webspace = self._default_webspace

        if "additionalWebspaces" in data:
            localized.additional_webspaces = list(data["additionalWebspaces"] or [])
