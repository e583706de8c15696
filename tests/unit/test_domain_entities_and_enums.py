"""Tests for domain entities (Category, Tip, User) and enums."""

import pytest

from app.domain.entities import Category, Tip, User
from app.domain.enums import EntityKind, MutationKind
from app.domain.exceptions import ValidationException
from app.domain.value_objects.core import (
    CategoryId,
    Email,
    ExternalAuthId,
    Tag,
    TipDescription,
    TipStep,
    TipTitle,
    UserName,
)


def _tip(category_id: CategoryId, **overrides) -> Tip:
    fields = {
        "title": TipTitle("Batch your errands"),
        "description": TipDescription("Group errands by location."),
        "steps": [TipStep(1, "List every errand for the week.")],
        "category_id": category_id,
    }
    fields.update(overrides)
    return Tip.create(**fields)


class TestCategory:
    def test_create_trims_name(self) -> None:
        category = Category.create("  Productivity  ")
        assert category.name == "Productivity"
        assert category.is_deleted is False
        assert category.updated_at is None

    @pytest.mark.parametrize(
        ("name", "match"),
        [
            ("", "cannot be empty"),
            ("   ", "cannot be empty"),
            ("a", "at least 2"),
            ("a" * 101, "cannot exceed 100"),
        ],
    )
    def test_invalid_name_rejected(self, name: str, match: str) -> None:
        with pytest.raises(ValidationException, match=match) as exc_info:
            Category.create(name)
        assert exc_info.value.details == {"field": "name"}

    def test_rename_sets_updated_at(self) -> None:
        category = Category.create("Productivity")
        category.rename("Focus")
        assert category.name == "Focus"
        assert category.updated_at is not None

    def test_mark_deleted_is_idempotent(self) -> None:
        category = Category.create("Productivity")
        category.mark_deleted()
        deleted_at = category.deleted_at
        category.mark_deleted()
        assert category.is_deleted is True
        assert category.deleted_at == deleted_at


class TestTip:
    def test_create(self) -> None:
        cid = CategoryId.new()
        tip = _tip(cid, tags=[Tag("errands")])
        assert tip.category_id == cid
        assert [t.value for t in tip.tags] == ["errands"]
        assert tip.video_url is None

    def test_requires_a_step(self) -> None:
        with pytest.raises(ValidationException, match="at least one step"):
            _tip(CategoryId.new(), steps=[])

    def test_tag_limit(self) -> None:
        tags = [Tag(f"tag{i}") for i in range(11)]
        with pytest.raises(ValidationException, match="more than 10 tags"):
            _tip(CategoryId.new(), tags=tags)

    def test_update_moves_category(self) -> None:
        tip = _tip(CategoryId.new())
        target = CategoryId.new()
        tip.update(
            title=TipTitle("Batch errands weekly"),
            description=tip.description,
            steps=tip.steps,
            category_id=target,
            tags=[],
            video_url=None,
        )
        assert tip.category_id == target
        assert tip.updated_at is not None

    def test_invalid_update_leaves_tip_unchanged(self) -> None:
        tip = _tip(CategoryId.new())
        original_title = tip.title
        with pytest.raises(ValidationException):
            tip.update(
                title=TipTitle("Another title"),
                description=tip.description,
                steps=[],
                category_id=tip.category_id,
                tags=[],
                video_url=None,
            )
        assert tip.title == original_title


class TestUser:
    def test_create_and_rename(self) -> None:
        user = User.create(
            email=Email("ada@example.com"),
            name=UserName("Ada"),
            external_auth_id=ExternalAuthId("auth0|1"),
        )
        assert user.is_admin is False
        user.rename(UserName("Ada Lovelace"))
        assert user.name.value == "Ada Lovelace"
        assert user.updated_at is not None

    def test_mark_deleted(self) -> None:
        user = User.create(
            email=Email("ada@example.com"),
            name=UserName("Ada"),
            external_auth_id=ExternalAuthId("auth0|1"),
        )
        user.mark_deleted()
        assert user.is_deleted is True
        assert user.deleted_at is not None


def test_entity_kind_values() -> None:
    assert EntityKind.values() == ["category", "tip", "user"]
    assert EntityKind("tip") is EntityKind.TIP


def test_mutation_kind_values() -> None:
    assert MutationKind.values() == ["created", "updated", "deleted"]
