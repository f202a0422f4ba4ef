"""
Tests del orquestador `recipe_ai_core.engine`.
"""

import uuid
from datetime import datetime, timezone

import pytest

from recipe_ai_core.db.helpers import (
    SqlModificationStore,
    SqlRecipeRepository,
    list_modifications_by_recipe,
)
from recipe_ai_core.domains.modifications import (
    IncreaseProteinParams,
    ModificationRequest,
    UnsupportedModificationType,
)
from recipe_ai_core.engine import create_modification, run_modification


class FakeModificationStore:
    """Store en memoria: guarda lo que recibe y devuelve un registro."""

    def __init__(self):
        self.inserted = []

    def insert_modification(self, recipe_id, user_id, modification_type, result):
        self.inserted.append((recipe_id, user_id, modification_type, result))
        return {
            "id": str(uuid.uuid4()),
            "original_recipe_id": recipe_id,
            "user_id": user_id,
            "modification_type": modification_type,
            "modified_data": result.to_dict(),
            "created_at": datetime(2025, 1, 1, tzinfo=timezone.utc),
        }


def test_create_modification_dispatches_request(recipe, other_user_id):
    request = ModificationRequest.of(IncreaseProteinParams(target_protein=35))

    result = create_modification(recipe, other_user_id, request)

    assert result.nutrition_per_serving.protein == 35
    assert result.nutrition_per_serving.calories == 490


def test_run_modification_hands_result_to_store(recipe, other_user_id):
    store = FakeModificationStore()
    request = ModificationRequest.of(IncreaseProteinParams(target_protein=35))

    record = run_modification(
        recipe=recipe, requester_id=other_user_id, request=request, store=store
    )

    assert len(store.inserted) == 1
    assert record["original_recipe_id"] == recipe.id
    assert record["user_id"] == other_user_id
    assert record["modification_type"] == "increase_protein"
    assert record["modified_data"]["nutritionPerServing"]["protein"] == 35
    assert record["modified_data"]["servings"] == 4


def test_run_modification_stores_nothing_for_unknown_tag(recipe, other_user_id):
    store = FakeModificationStore()
    request = ModificationRequest(modification_type="make_vegan", parameters={})

    with pytest.raises(UnsupportedModificationType):
        run_modification(recipe=recipe, requester_id=other_user_id, request=request, store=store)

    assert store.inserted == []


def test_run_modification_with_sql_store(session, public_recipe_id, other_user_id):
    recipe = SqlRecipeRepository(session).fetch_recipe(public_recipe_id)
    request = ModificationRequest.from_dict(
        {"modificationType": "reduce_calories", "parameters": {"targetCalories": 225}}
    )

    record = run_modification(
        recipe=recipe,
        requester_id=other_user_id,
        request=request,
        store=SqlModificationStore(session),
    )

    assert record["id"]
    assert record["modified_data"]["nutritionPerServing"]["salt"] == 0.8
    modifications, pagination = list_modifications_by_recipe(session, public_recipe_id, 1, 20)
    assert pagination["total"] == 1
    assert modifications[0].id == record["id"]
