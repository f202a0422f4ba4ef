"""
Fixtures compartidas.

La base de datos de tests es un SQLite temporal: `DATABASE_URL` se fija
antes de importar cualquier módulo de `recipe_ai_core`.
"""

import os
import tempfile
import uuid
from pathlib import Path

_TEST_DB_DIR = tempfile.mkdtemp(prefix="recipe_ai_core_tests_")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_TEST_DB_DIR) / 'test.sqlite'}"
os.environ["ENVIRONMENT"] = "test"
os.environ["DEV_USER_ID"] = ""

import pytest  # noqa: E402

from recipe_ai_core.db.database import get_db_session, init_db  # noqa: E402
from recipe_ai_core.db.helpers import create_recipe  # noqa: E402
from recipe_ai_core.domain_models import (  # noqa: E402
    Ingredient,
    NutritionVector,
    RecipeSnapshot,
    RecipeStep,
)

OWNER_ID = "a85d6d6c-b7d4-4605-9cc4-3743401b67a0"
OTHER_USER_ID = "0b6a3f52-7c1e-4d8e-9a41-5f2d3c8b1e07"

BASE_NUTRITION = NutritionVector(
    calories=450, protein=25, fat=15, carbs=50, fiber=8, salt=1.5
)
BASE_INGREDIENTS = [
    Ingredient(name="makaron penne", amount=400, unit="g"),
    Ingredient(name="masło", amount=30, unit="g"),
    Ingredient(name="szpinak", amount=200, unit="g"),
]
BASE_STEPS = [
    RecipeStep(step_number=1, instruction="Ugotuj makaron."),
    RecipeStep(step_number=2, instruction="Podsmaż szpinak na maśle."),
]


@pytest.fixture(scope="session", autouse=True)
def _create_tables():
    init_db()


@pytest.fixture
def recipe() -> RecipeSnapshot:
    """Receta base de los escenarios (4 porciones, 450 kcal)."""
    return RecipeSnapshot(
        id=str(uuid.uuid4()),
        user_id=OWNER_ID,
        title="Makaron ze szpinakiem",
        ingredients=list(BASE_INGREDIENTS),
        steps=list(BASE_STEPS),
        servings=4,
        nutrition_per_serving=BASE_NUTRITION,
        prep_time_minutes=30,
        is_public=True,
    )


@pytest.fixture
def session():
    """Sesión de base de datos para tests (commit al salir)."""
    with get_db_session() as s:
        yield s


def _persist_recipe(is_public: bool) -> str:
    with get_db_session() as s:
        row = create_recipe(
            s,
            user_id=OWNER_ID,
            title="Makaron ze szpinakiem",
            ingredients=BASE_INGREDIENTS,
            steps=BASE_STEPS,
            servings=4,
            nutrition=BASE_NUTRITION,
            prep_time_minutes=30,
            is_public=is_public,
        )
        return row.id


@pytest.fixture
def public_recipe_id() -> str:
    """Receta pública persistida, dueño OWNER_ID."""
    return _persist_recipe(is_public=True)


@pytest.fixture
def private_recipe_id() -> str:
    """Receta privada persistida, dueño OWNER_ID."""
    return _persist_recipe(is_public=False)


@pytest.fixture
def owner_id() -> str:
    return OWNER_ID


@pytest.fixture
def other_user_id() -> str:
    return OTHER_USER_ID


@pytest.fixture
def base_nutrition() -> NutritionVector:
    return BASE_NUTRITION
