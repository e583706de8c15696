"""Tests for the cache key registry (key format and identity)."""

import uuid

import pytest

from app.application.caching import (
    CacheResource,
    CacheResourceKind,
    category_key,
    category_list_key,
    dashboard_key,
    key_for,
)
from app.domain.value_objects.core import CategoryId


def test_global_keys() -> None:
    assert dashboard_key() == "AdminDashboard"
    assert category_list_key() == "CategoryList"
    assert key_for(CacheResource.dashboard()) == "AdminDashboard"
    assert key_for(CacheResource.category_list()) == "CategoryList"


def test_category_key_uses_canonical_id() -> None:
    raw = uuid.UUID("3f2c1a9e-8b7d-4c6e-9f01-23456789abcd")
    expected = "Category_3f2c1a9e-8b7d-4c6e-9f01-23456789abcd"
    assert category_key(raw) == expected
    assert category_key(str(raw).upper()) == expected
    assert category_key("{" + str(raw) + "}") == expected
    assert category_key(CategoryId(raw)) == expected
    assert key_for(CacheResource.category(str(raw))) == expected


def test_distinct_categories_have_distinct_keys() -> None:
    assert category_key(CategoryId.new()) != category_key(CategoryId.new())


def test_invalid_category_id_rejected() -> None:
    with pytest.raises(ValueError):
        category_key("not-a-uuid")


class TestCacheResource:
    def test_category_requires_id(self) -> None:
        with pytest.raises(ValueError, match="requires a category_id"):
            CacheResource(CacheResourceKind.CATEGORY)

    def test_global_views_take_no_id(self) -> None:
        with pytest.raises(ValueError, match="takes no category_id"):
            CacheResource(CacheResourceKind.DASHBOARD, CategoryId.new())

    def test_equal_resources_are_equal(self) -> None:
        cid = CategoryId.new()
        assert CacheResource.category(cid) == CacheResource.category(str(cid))
