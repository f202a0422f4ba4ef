"""
Funciones helper para trabajar con recetas y modificaciones persistidas.

Estas funciones facilitan:
- Crear recetas (seeds y tests) y leerlas como `RecipeSnapshot`
- Insertar, listar, obtener y borrar registros de modificación
- Mapear filas ORM a los diccionarios que expone la API
"""

from __future__ import annotations

import json
import math
from datetime import UTC, datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from ..domain_models import (
    Ingredient,
    ModificationResult,
    NutritionVector,
    RecipeSnapshot,
    RecipeStep,
)
from .models import Recipe, RecipeModification


class ModificationNotFound(ValueError):
    """La modificación no existe."""


class ModificationAccessDenied(PermissionError):
    """El usuario no es dueño de la modificación."""


# ============================================================
# Recetas
# ============================================================

def create_recipe(
    session: Session,
    *,
    user_id: str,
    title: str,
    ingredients: Sequence[Ingredient],
    steps: Sequence[RecipeStep],
    servings: int,
    nutrition: NutritionVector,
    prep_time_minutes: int | None = None,
    is_public: bool = False,
    description: str = "",
    recipe_id: str | None = None,
) -> Recipe:
    """
    Crea una receta. Pensado para seeds y tests: el CRUD real de recetas
    no pasa por este paquete.

    Returns:
        Recipe creada (con ID asignado tras el flush)
    """
    recipe = Recipe(
        user_id=user_id,
        title=title,
        description=description,
        ingredients_json=json.dumps([i.to_dict() for i in ingredients], ensure_ascii=False),
        steps_json=json.dumps([s.to_dict() for s in steps], ensure_ascii=False),
        servings=servings,
        nutrition_json=json.dumps(nutrition.to_dict()),
        prep_time_minutes=prep_time_minutes,
        is_public=is_public,
    )
    if recipe_id:
        recipe.id = recipe_id
    session.add(recipe)
    session.flush()
    return recipe


def recipe_to_snapshot(recipe: Recipe) -> RecipeSnapshot:
    """Convierte la fila ORM en el snapshot inmutable que consume el motor."""
    return RecipeSnapshot(
        id=recipe.id,
        user_id=recipe.user_id,
        title=recipe.title,
        ingredients=[Ingredient.from_dict(i) for i in json.loads(recipe.ingredients_json or "[]")],
        steps=[RecipeStep.from_dict(s) for s in json.loads(recipe.steps_json or "[]")],
        servings=recipe.servings,
        nutrition_per_serving=NutritionVector.from_dict(json.loads(recipe.nutrition_json or "{}")),
        prep_time_minutes=recipe.prep_time_minutes,
        is_public=bool(recipe.is_public),
    )


def get_recipe_snapshot(session: Session, recipe_id: str) -> RecipeSnapshot | None:
    """
    Obtiene una receta por su ID como `RecipeSnapshot`, o None si no existe.
    """
    recipe = session.query(Recipe).filter_by(id=recipe_id).first()
    if not recipe:
        return None
    return recipe_to_snapshot(recipe)


# ============================================================
# Modificaciones
# ============================================================

def insert_modification(
    session: Session,
    recipe_id: str,
    user_id: str,
    modification_type: str,
    result: ModificationResult,
) -> RecipeModification:
    """
    Inserta un registro de modificación (nunca actualiza uno existente).

    Args:
        session: Sesión de base de datos
        recipe_id: Receta original
        user_id: Usuario que pidió la modificación
        modification_type: Tag de la modificación
        result: Resultado calculado por el motor

    Returns:
        RecipeModification creada (con ID y created_at tras el flush)
    """
    modification = RecipeModification(
        original_recipe_id=recipe_id,
        user_id=user_id,
        modification_type=modification_type,
        modified_data_json=json.dumps(result.to_dict(), ensure_ascii=False),
    )
    session.add(modification)
    session.flush()
    return modification


def list_modifications_by_recipe(
    session: Session,
    recipe_id: str,
    page: int,
    limit: int,
) -> Tuple[List[RecipeModification], Dict[str, int]]:
    """
    Lista paginada de modificaciones de una receta, las más nuevas primero.

    Args:
        page: Página (empieza en 1)
        limit: Resultados por página

    Returns:
        (modificaciones, paginación) donde paginación es
        {"page", "limit", "total", "totalPages"}.
    """
    query = session.query(RecipeModification).filter_by(original_recipe_id=recipe_id)
    total = query.count()
    modifications = (
        query.order_by(RecipeModification.created_at.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    pagination = {
        "page": page,
        "limit": limit,
        "total": total,
        "totalPages": math.ceil(total / limit),
    }
    return modifications, pagination


def get_modification_for_user(
    session: Session,
    modification_id: str,
    user_id: str,
) -> RecipeModification | None:
    """
    Obtiene una modificación si el usuario puede verla.

    Visible si el usuario es dueño de la modificación o si la receta original
    es pública. En cualquier otro caso devuelve None (igual que si no
    existiera, para no revelar su existencia).
    """
    modification = session.query(RecipeModification).filter_by(id=modification_id).first()
    if not modification:
        return None

    if modification.user_id != user_id and not modification.original_recipe.is_public:
        return None

    return modification


def delete_modification(session: Session, modification_id: str, user_id: str) -> None:
    """
    Borra una modificación. Solo su dueño puede hacerlo.

    Raises:
        ModificationNotFound: Si la modificación no existe
        ModificationAccessDenied: Si el usuario no es el dueño
    """
    modification = session.query(RecipeModification).filter_by(id=modification_id).first()
    if not modification:
        raise ModificationNotFound(f"Modificación {modification_id} no encontrada")

    if modification.user_id != user_id:
        raise ModificationAccessDenied(
            f"El usuario {user_id} no puede borrar la modificación {modification_id}"
        )

    session.delete(modification)
    session.flush()


# ============================================================
# Mapeos
# ============================================================

def format_timestamp(value: datetime) -> str:
    """
    ISO 8601 con offset. SQLite devuelve datetimes naive aunque la columna
    sea `timezone=True`; se guardan siempre en UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.isoformat()


def modification_to_record(modification: RecipeModification) -> Dict[str, Any]:
    """Fila ORM -> `engine.ModificationRecord` (snake_case)."""
    return {
        "id": modification.id,
        "original_recipe_id": modification.original_recipe_id,
        "user_id": modification.user_id,
        "modification_type": modification.modification_type,
        "modified_data": json.loads(modification.modified_data_json),
        "created_at": modification.created_at,
    }


def modification_to_dict(modification: RecipeModification) -> Dict[str, Any]:
    """Fila ORM -> `ModificationDTO` (camelCase, como la expone la API)."""
    return {
        "id": modification.id,
        "originalRecipeId": modification.original_recipe_id,
        "userId": modification.user_id,
        "modificationType": modification.modification_type,
        "modifiedData": json.loads(modification.modified_data_json),
        "createdAt": format_timestamp(modification.created_at),
    }


def modification_detail_to_dict(modification: RecipeModification) -> Dict[str, Any]:
    """Fila ORM -> `ModificationDetailDTO` (incluye datos de la receta original)."""
    recipe = modification.original_recipe
    return {
        "id": modification.id,
        "originalRecipeId": modification.original_recipe_id,
        "modificationType": modification.modification_type,
        "modifiedData": json.loads(modification.modified_data_json),
        "originalRecipe": {
            "id": recipe.id,
            "title": recipe.title,
            "nutritionPerServing": json.loads(recipe.nutrition_json),
        },
        "createdAt": format_timestamp(modification.created_at),
    }


# ============================================================
# Implementaciones SQLAlchemy de core.abstractions
# ============================================================

class SqlRecipeRepository:
    """`RecipeRepository` sobre una sesión SQLAlchemy."""

    def __init__(self, session: Session):
        self.session = session

    def fetch_recipe(self, recipe_id: str) -> Optional[RecipeSnapshot]:
        return get_recipe_snapshot(self.session, recipe_id)


class SqlModificationStore:
    """`ModificationStore` sobre una sesión SQLAlchemy (no hace commit)."""

    def __init__(self, session: Session):
        self.session = session

    def insert_modification(
        self,
        recipe_id: str,
        user_id: str,
        modification_type: str,
        result: ModificationResult,
    ) -> Dict[str, Any]:
        modification = insert_modification(
            self.session, recipe_id, user_id, modification_type, result
        )
        return modification_to_record(modification)
