# tools/seed_demo.py
from __future__ import annotations

import json
from pathlib import Path

from recipe_ai_core.db.database import get_db_session, init_db
from recipe_ai_core.db.helpers import create_recipe
from recipe_ai_core.db.models import Recipe
from recipe_ai_core.domain_models import RecipeSnapshot

DEMO_RECIPE_PATH = Path(__file__).parent / "demo_recipe.json"


def main():
    init_db()
    demo = RecipeSnapshot.from_dict(json.loads(DEMO_RECIPE_PATH.read_text(encoding="utf-8")))

    with get_db_session() as db:
        recipe = db.query(Recipe).filter(Recipe.id == demo.id).first()

        if not recipe:
            recipe = create_recipe(
                db,
                recipe_id=demo.id,
                user_id=demo.user_id,
                title=demo.title,
                ingredients=demo.ingredients,
                steps=demo.steps,
                servings=demo.servings,
                nutrition=demo.nutrition_per_serving,
                prep_time_minutes=demo.prep_time_minutes,
                is_public=demo.is_public,
            )

        print("✅ Seed OK")
        print(f"   recipe_id={recipe.id}")
        print(f"   user_id={recipe.user_id}")


if __name__ == "__main__":
    main()
