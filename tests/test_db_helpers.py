"""
Tests de persistencia: recetas, modificaciones, paginación y permisos.
"""

from datetime import datetime, timezone

import pytest

from recipe_ai_core.db.helpers import (
    ModificationAccessDenied,
    ModificationNotFound,
    delete_modification,
    format_timestamp,
    get_modification_for_user,
    get_recipe_snapshot,
    insert_modification,
    list_modifications_by_recipe,
    modification_detail_to_dict,
    modification_to_dict,
)
from recipe_ai_core.db.models import RecipeModification
from recipe_ai_core.domains.modifications import ModificationRequest, PortionSizeParams, dispatch


def _insert(session, recipe_id, user_id, created_at=None):
    recipe = get_recipe_snapshot(session, recipe_id)
    result = dispatch(recipe, ModificationRequest.of(PortionSizeParams(new_servings=2)))
    modification = insert_modification(session, recipe_id, user_id, "portion_size", result)
    if created_at is not None:
        modification.created_at = created_at
        session.flush()
    return modification


def test_recipe_snapshot_roundtrip(session, private_recipe_id, owner_id, base_nutrition):
    snapshot = get_recipe_snapshot(session, private_recipe_id)

    assert snapshot.user_id == owner_id
    assert snapshot.servings == 4
    assert snapshot.nutrition_per_serving == base_nutrition
    assert [i.name for i in snapshot.ingredients] == ["makaron penne", "masło", "szpinak"]
    assert snapshot.steps[1].step_number == 2
    assert snapshot.is_public is False


def test_get_recipe_snapshot_missing(session):
    assert get_recipe_snapshot(session, "00000000-0000-0000-0000-000000000000") is None


def test_list_modifications_paginates_newest_first(session, public_recipe_id, owner_id):
    created = [
        _insert(session, public_recipe_id, owner_id, datetime(2025, 1, day, tzinfo=timezone.utc))
        for day in (1, 2, 3)
    ]

    first_page, pagination = list_modifications_by_recipe(session, public_recipe_id, 1, 2)
    second_page, _ = list_modifications_by_recipe(session, public_recipe_id, 2, 2)

    assert pagination == {"page": 1, "limit": 2, "total": 3, "totalPages": 2}
    assert [m.id for m in first_page] == [created[2].id, created[1].id]
    assert [m.id for m in second_page] == [created[0].id]


def test_list_modifications_empty(session, public_recipe_id):
    modifications, pagination = list_modifications_by_recipe(session, public_recipe_id, 1, 20)

    assert modifications == []
    assert pagination["total"] == 0
    assert pagination["totalPages"] == 0


def test_modification_visibility(
    session, private_recipe_id, public_recipe_id, owner_id, other_user_id
):
    private_mod = _insert(session, private_recipe_id, owner_id)
    public_mod = _insert(session, public_recipe_id, owner_id)

    assert get_modification_for_user(session, private_mod.id, owner_id) is not None
    assert get_modification_for_user(session, private_mod.id, other_user_id) is None
    assert get_modification_for_user(session, public_mod.id, other_user_id) is not None


def test_delete_modification_only_by_owner(session, public_recipe_id, owner_id, other_user_id):
    modification = _insert(session, public_recipe_id, owner_id)

    with pytest.raises(ModificationAccessDenied):
        delete_modification(session, modification.id, other_user_id)

    delete_modification(session, modification.id, owner_id)
    assert session.query(RecipeModification).filter_by(id=modification.id).first() is None

    with pytest.raises(ModificationNotFound):
        delete_modification(session, modification.id, owner_id)


def test_modification_dicts_use_camel_case(
    session, public_recipe_id, other_user_id, base_nutrition
):
    modification = _insert(session, public_recipe_id, other_user_id)

    data = modification_to_dict(modification)
    detail = modification_detail_to_dict(modification)

    assert data["originalRecipeId"] == public_recipe_id
    assert data["modifiedData"]["servings"] == 2
    assert data["modifiedData"]["nutritionPerServing"] == base_nutrition.to_dict()
    assert detail["originalRecipe"]["id"] == public_recipe_id
    assert detail["originalRecipe"]["nutritionPerServing"]["calories"] == 450
    assert "userId" not in detail


def test_format_timestamp_always_has_utc_offset():
    naive = datetime(2025, 1, 2, 3, 4, 5, 123456)
    aware = naive.replace(tzinfo=timezone.utc)

    assert format_timestamp(naive) == "2025-01-02T03:04:05.123456+00:00"
    assert format_timestamp(aware) == format_timestamp(naive)


def test_reloaded_modification_keeps_created_at(session, public_recipe_id, owner_id):
    modification = _insert(session, public_recipe_id, owner_id)
    before = modification_to_dict(modification)["createdAt"]

    session.expire_all()
    reloaded = session.query(RecipeModification).filter_by(id=modification.id).one()

    assert modification_to_dict(reloaded)["createdAt"] == before
    assert modification_detail_to_dict(reloaded)["createdAt"] == before
