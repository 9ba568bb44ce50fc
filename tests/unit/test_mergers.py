"""Capability mergers and the composite DimensionContentMerger."""

from datetime import datetime, timezone

from content.application.services.mergers import (
    AuthorMerger,
    DimensionContentMerger,
    TemplateMerger,
    WebspaceMerger,
)
from content.domain.enums import Stage
from content.domain.value_objects.core import DimensionKey
from tests.example_content import Example, Tag


def _pair():
    entity = Example(id="e1")
    target = entity.create_dimension_content(DimensionKey("en", Stage.DRAFT))
    source = entity.create_dimension_content(DimensionKey("en", Stage.DRAFT))
    return target, source


class TestTemplateMerger:
    def test_overlays_data_and_key(self) -> None:
        target, source = _pair()
        target.template_key = "default"
        target.template_data = {"title": "a", "url": "/a"}
        source.template_key = "homepage"
        source.template_data = {"title": "b"}

        TemplateMerger().merge(target, source)

        assert target.template_key == "homepage"
        assert target.template_data == {"title": "b", "url": "/a"}

    def test_empty_source_key_keeps_target_key(self) -> None:
        target, source = _pair()
        target.template_key = "default"
        TemplateMerger().merge(target, source)
        assert target.template_key == "default"

    def test_skips_content_without_capability(self) -> None:
        tag = Tag(id="t1")
        target = tag.create_dimension_content(DimensionKey("en"))
        source = tag.create_dimension_content(DimensionKey("en"))
        TemplateMerger().merge(target, source)
        assert not hasattr(target, "template_data")


class TestWebspaceMerger:
    def test_main_webspace_overrides_when_set(self) -> None:
        target, source = _pair()
        target.main_webspace = "main"
        WebspaceMerger().merge(target, source)
        assert target.main_webspace == "main"

        source.main_webspace = "intranet"
        source.additional_webspaces = ["blog"]
        WebspaceMerger().merge(target, source)
        assert target.main_webspace == "intranet"
        assert target.additional_webspaces == ["blog"]


class TestAuthorMerger:
    def test_author_fields_override_when_set(self) -> None:
        target, source = _pair()
        target.author_id = "u1"
        authored = datetime(2020, 5, 8, tzinfo=timezone.utc)
        source.authored = authored

        AuthorMerger().merge(target, source)

        assert target.author_id == "u1"
        assert target.authored == authored


class TestDimensionContentMerger:
    def test_runs_all_default_mergers(self) -> None:
        target, source = _pair()
        source.template_data = {"title": "x"}
        source.main_webspace = "main"
        source.author_id = "u1"

        result = DimensionContentMerger().merge(target, source)

        assert result is target
        assert target.template_data == {"title": "x"}
        assert target.main_webspace == "main"
        assert target.author_id == "u1"

    def test_custom_merger_list(self) -> None:
        target, source = _pair()
        source.template_data = {"title": "x"}
        source.main_webspace = "main"

        DimensionContentMerger([WebspaceMerger()]).merge(target, source)

        assert target.template_data == {}
        assert target.main_webspace == "main"
