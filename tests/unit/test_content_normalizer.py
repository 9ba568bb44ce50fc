"""Content normalization: identity fields, hidden internals, flattened template data."""

from datetime import datetime, timezone

import pytest

from content.application.services.content_aggregator import ContentAggregator
from content.application.services.content_normalizer import (
    ContentNormalizer,
    DimensionContentNormalizer,
    TemplateNormalizer,
)
from content.domain.enums import Stage
from content.domain.value_objects.core import DimensionKey
from tests.example_content import Example, Tag, add_variant


@pytest.fixture
def merged_page(aggregator: ContentAggregator):
    entity = Example(id="page-1")
    add_variant(entity, None, Stage.LIVE, {"webspace": "main"})
    add_variant(entity, "de", Stage.LIVE, {"title": "Hallo"})
    return aggregator.aggregate(entity, DimensionKey("de", Stage.LIVE))


class TestDimensionContentNormalizer:
    def test_ignored_attributes_for_dimension_content(self, merged_page) -> None:
        assert DimensionContentNormalizer().get_ignored_attributes(merged_page) == {
            "id",
            "merged",
            "dimension",
            "resource",
        }

    def test_non_dimension_objects_pass_through(self) -> None:
        normalizer = DimensionContentNormalizer()
        data = {"id": 5, "merged": True}
        assert normalizer.get_ignored_attributes(object()) == set()
        assert normalizer.enhance(object(), data) == {"id": 5, "merged": True}

    def test_enhance_sets_canonical_identity(self, merged_page) -> None:
        data = DimensionContentNormalizer().enhance(merged_page, {"id": "transient"})
        assert data == {"id": "page-1", "locale": "de", "stage": "live"}


class TestTemplateNormalizer:
    def test_flattens_template_data(self, merged_page) -> None:
        merged_page.template_key = "default"
        data = TemplateNormalizer().enhance(merged_page, {"id": "page-1"})
        assert data == {
            "webspace": "main",
            "title": "Hallo",
            "id": "page-1",
            "template": "default",
        }

    def test_template_data_cannot_shadow_identity(self, merged_page) -> None:
        merged_page.template_data["id"] = "spoofed"
        data = TemplateNormalizer().enhance(merged_page, {"id": "page-1"})
        assert data["id"] == "page-1"


class TestContentNormalizer:
    def test_example_scenario(self, merged_page) -> None:
        data = ContentNormalizer().normalize(merged_page)

        assert data["webspace"] == "main"
        assert data["title"] == "Hallo"
        assert data["locale"] == "de"
        assert data["stage"] == "live"
        assert data["id"] == "page-1"

    def test_stage_uses_persisted_lowercase_value(self, merged_page) -> None:
        """Stage is serialized as stored ('live', 'draft'), not as the enum name."""
        data = ContentNormalizer().normalize(merged_page)

        assert data["stage"] == Stage.LIVE.value == "live"
        assert data["stage"] != Stage.LIVE.name

    def test_internal_fields_never_leak(self, merged_page) -> None:
        data = ContentNormalizer().normalize(merged_page)

        assert "merged" not in data
        assert "dimension" not in data
        assert "resource" not in data
        assert "template_data" not in data
        assert "template_key" not in data
        assert list(data).count("id") == 1

    def test_structural_fields_are_json_ready(self, aggregator: ContentAggregator) -> None:
        entity = Example(id="page-1")
        add_variant(
            entity,
            "en",
            Stage.DRAFT,
            main_webspace="main",
            author_id="u1",
            authored=datetime(2020, 5, 8, tzinfo=timezone.utc),
        )
        merged = aggregator.aggregate(entity, DimensionKey("en", Stage.DRAFT))

        data = ContentNormalizer().normalize(merged)

        assert data["main_webspace"] == "main"
        assert data["additional_webspaces"] == []
        assert data["author_id"] == "u1"
        assert data["authored"].startswith("2020-05-08T00:00:00")
        assert data["template"] is None

    def test_with_base_serialization(self, merged_page) -> None:
        base = {"id": "transient", "merged": True, "dimension": {}, "resource": {}, "extra": 1}

        data = ContentNormalizer([DimensionContentNormalizer()]).normalize(merged_page, base)

        assert data == {"extra": 1, "id": "page-1", "locale": "de", "stage": "live"}

    def test_content_without_template(self, aggregator: ContentAggregator) -> None:
        tag = Tag(id="tag-1")
        tag.add_dimension_content(tag.create_dimension_content(DimensionKey("en", Stage.LIVE)))
        merged = aggregator.aggregate(tag, DimensionKey("en", Stage.LIVE))

        assert ContentNormalizer().normalize(merged) == {
            "id": "tag-1",
            "locale": "en",
            "stage": "live",
        }

    def test_non_dataclass_requires_base_serialization(self) -> None:
        with pytest.raises(TypeError):
            ContentNormalizer().normalize(object())
        assert ContentNormalizer().normalize(object(), {"a": 1}) == {"a": 1}
