"""In-memory repositories: copy semantics, soft delete, and persistence errors."""

import pytest

from app.domain.entities import Category, Tip, User
from app.domain.exceptions import PersistenceException
from app.domain.value_objects.core import (
    Email,
    ExternalAuthId,
    TipDescription,
    TipStep,
    TipTitle,
    UserName,
)


async def test_stored_entities_are_copies(category_repo) -> None:
    """Mutating a returned entity does not change the store without update()."""
    category = Category.create("Productivity")
    await category_repo.add(category)

    loaded = await category_repo.get_by_id(category.id)
    loaded.rename("Changed")

    assert (await category_repo.get_by_id(category.id)).name == "Productivity"


async def test_duplicate_add_is_persistence_error(category_repo) -> None:
    category = Category.create("Productivity")
    await category_repo.add(category)
    with pytest.raises(PersistenceException, match="categories.add"):
        await category_repo.add(category)


async def test_update_unknown_is_persistence_error(tip_repo, category_repo) -> None:
    category = Category.create("Productivity")
    tip = Tip.create(
        title=TipTitle("Batch your errands"),
        description=TipDescription("Group errands by location."),
        steps=[TipStep(1, "List every errand for the week.")],
        category_id=category.id,
    )
    with pytest.raises(PersistenceException) as exc_info:
        await tip_repo.update(tip)
    assert exc_info.value.details["operation"] == "tips.update"


async def test_get_all_orders_categories_by_creation(category_repo) -> None:
    names = ["First", "Second", "Third"]
    for name in names:
        await category_repo.add(Category.create(name))
    assert [c.name for c in await category_repo.get_all()] == names


async def test_user_soft_delete_frees_email(user_repo) -> None:
    user = User.create(
        email=Email("ada@example.com"),
        name=UserName("Ada"),
        external_auth_id=ExternalAuthId("auth0|1"),
    )
    await user_repo.add(user)

    await user_repo.delete(user.id)
    await user_repo.delete(user.id)

    assert await user_repo.get_by_id(user.id) is None
    assert await user_repo.get_by_email(Email("ada@example.com")) is None


async def test_clear_empties_store(data_store, category_repo) -> None:
    await category_repo.add(Category.create("Productivity"))
    data_store.clear()
    assert await category_repo.get_all() == []
