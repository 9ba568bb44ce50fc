"""WebspaceDataMapper: editorial webspace input and default assignment."""

import pytest

from content.application.services.data_mappers import WebspaceDataMapper
from content.domain.enums import Stage
from content.domain.exceptions import ValidationException
from content.domain.value_objects.core import DimensionKey
from tests.example_content import Example, Tag


def _variants(entity_class=Example):
    entity = entity_class(id="e1")
    return (
        entity.create_dimension_content(DimensionKey(None, Stage.DRAFT)),
        entity.create_dimension_content(DimensionKey("en", Stage.DRAFT)),
    )


def test_sets_main_and_additional_webspaces() -> None:
    unlocalized, localized = _variants()

    WebspaceDataMapper().map(
        unlocalized,
        localized,
        {"mainWebspace": "intranet", "additionalWebspaces": ["blog", "shop"]},
    )

    assert localized.main_webspace == "intranet"
    assert localized.additional_webspaces == ["blog", "shop"]
    assert unlocalized.main_webspace is None


def test_null_main_webspace_clears() -> None:
    unlocalized, localized = _variants()
    localized.main_webspace = "intranet"

    WebspaceDataMapper(default_webspace="main").map(unlocalized, localized, {"mainWebspace": None})

    assert localized.main_webspace is None


def test_default_webspace_when_absent() -> None:
    unlocalized, localized = _variants()
    WebspaceDataMapper(default_webspace="main").map(unlocalized, localized, {})
    assert localized.main_webspace == "main"


def test_existing_main_webspace_is_kept() -> None:
    unlocalized, localized = _variants()
    localized.main_webspace = "intranet"
    WebspaceDataMapper(default_webspace="main").map(unlocalized, localized, {})
    assert localized.main_webspace == "intranet"


def test_default_webspace_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    from content.core.config import get_settings

    monkeypatch.setenv("DEFAULT_WEBSPACE", "main")
    get_settings.cache_clear()
    unlocalized, localized = _variants()

    WebspaceDataMapper().map(unlocalized, localized, {})

    assert localized.main_webspace == "main"


def test_no_default_configured() -> None:
    unlocalized, localized = _variants()
    WebspaceDataMapper().map(unlocalized, localized, {})
    assert localized.main_webspace is None


def test_invalid_main_webspace() -> None:
    unlocalized, localized = _variants()
    with pytest.raises(ValidationException) as exc_info:
        WebspaceDataMapper().map(unlocalized, localized, {"mainWebspace": 5})
    assert exc_info.value.details == {"field": "mainWebspace"}


def test_content_without_webspaces_is_ignored() -> None:
    unlocalized, localized = _variants(Tag)
    WebspaceDataMapper(default_webspace="main").map(
        unlocalized, localized, {"mainWebspace": "intranet"}
    )
    assert not hasattr(localized, "main_webspace")
