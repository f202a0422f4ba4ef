from __future__ import annotations

"""
recipe_ai_core.domain_models
============================

Modelos de dominio (dataclasses) compartidos por el motor, la persistencia y la API.

Objetivo
--------
Este módulo define las estructuras de datos "neutras" del sistema:

- Vector nutricional por porción (`NutritionVector`)
- Ingredientes y pasos de una receta (`Ingredient`, `RecipeStep`)
- Foto inmutable de una receta tal como la entrega el repositorio (`RecipeSnapshot`)
- Resultado de una modificación antes de persistirse (`ModificationResult`)

Principios de diseño
--------------------
- Dataclasses sin lógica pesada: este módulo NO debe hablar con DB ni IO.
- `to_dict()` / `from_dict()` producen y consumen el formato JSON (camelCase)
  que se guarda en `recipe_modifications.modified_data_json` y que devuelve la API.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional


# ============================================================
# Nutrición
# ============================================================

NUTRITION_FIELDS = ("calories", "protein", "fat", "carbs", "fiber", "salt")
"""Orden canónico de los campos del vector nutricional."""


def json_number(value: float) -> float | int:
    """
    Número para JSON: 225.0 -> 225, 12.5 -> 12.5.

    Los valores no finitos se devuelven tal cual.
    """
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


@dataclass(frozen=True)
class NutritionVector:
    """
    Valores nutricionales por porción.

    Attributes:
        calories: kcal
        protein, fat, carbs, fiber, salt: gramos

    En datos bien formados todos los campos son >= 0, pero el motor no
    recorta resultados negativos.
    """
    calories: float
    protein: float
    fat: float
    carbs: float
    fiber: float
    salt: float

    def with_changes(self, **changes: float) -> "NutritionVector":
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, float]:
        return {name: json_number(getattr(self, name)) for name in NUTRITION_FIELDS}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NutritionVector":
        return cls(**{name: float(data.get(name, 0) or 0) for name in NUTRITION_FIELDS})


# ============================================================
# Receta
# ============================================================

@dataclass(frozen=True)
class Ingredient:
    """Ingrediente de la receta (nombre, cantidad, unidad)."""
    name: str
    amount: float
    unit: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "amount": json_number(self.amount), "unit": self.unit}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Ingredient":
        return cls(
            name=str(data.get("name", "")).strip(),
            amount=float(data.get("amount", 0) or 0),
            unit=str(data.get("unit", "")).strip(),
        )


@dataclass(frozen=True)
class RecipeStep:
    """Paso de preparación, numerado desde 1."""
    step_number: int
    instruction: str

    def to_dict(self) -> Dict[str, Any]:
        return {"stepNumber": self.step_number, "instruction": self.instruction}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RecipeStep":
        # Acepta tanto camelCase (API) como snake_case (columnas históricas)
        number = data.get("stepNumber", data.get("step_number", 0))
        return cls(
            step_number=int(number or 0),
            instruction=str(data.get("instruction", "")).strip(),
        )


@dataclass(frozen=True)
class RecipeSnapshot:
    """
    Estado de solo lectura de una receta sobre el que opera el motor.

    Lo construye el repositorio de recetas (`db.helpers.get_recipe_snapshot`)
    o un caller externo (CLI, tests). El motor nunca lo modifica: las listas
    se copian antes de devolverse en un `ModificationResult`.
    """
    id: str
    user_id: str
    title: str
    ingredients: List[Ingredient]
    steps: List[RecipeStep]
    servings: int
    nutrition_per_serving: NutritionVector
    prep_time_minutes: Optional[int] = None
    is_public: bool = False

    def is_visible_to(self, user_id: str) -> bool:
        """Una receta es visible si es pública o pertenece al usuario."""
        return self.is_public or self.user_id == user_id

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RecipeSnapshot":
        """
        Construye un snapshot desde el JSON camelCase de la API
        (`RecipeDetailDTO`). Lo usan la CLI y los tests.
        """
        prep_time = data.get("prepTimeMinutes")
        return cls(
            id=str(data.get("id", "")),
            user_id=str(data.get("userId", "")),
            title=str(data.get("title", "")).strip(),
            ingredients=[Ingredient.from_dict(i) for i in data.get("ingredients", [])],
            steps=[RecipeStep.from_dict(s) for s in data.get("steps", [])],
            servings=int(data.get("servings", 1) or 1),
            nutrition_per_serving=NutritionVector.from_dict(data.get("nutritionPerServing", {})),
            prep_time_minutes=int(prep_time) if prep_time is not None else None,
            is_public=bool(data.get("isPublic", False)),
        )


# ============================================================
# Resultado de modificación
# ============================================================

@dataclass
class ModificationResult:
    """
    Salida calculada por una estrategia, previa a la persistencia.

    Attributes:
        ingredients: copia de los ingredientes originales.
        steps: copia de los pasos originales.
        nutrition_per_serving: vector nutricional modificado.
        servings: porciones (las originales salvo en `portion_size`).
        notes: explicación legible de la modificación.
    """
    ingredients: List[Ingredient]
    steps: List[RecipeStep]
    nutrition_per_serving: NutritionVector
    servings: int
    notes: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Formato `modified_data` (camelCase) que se persiste y se expone."""
        return {
            "ingredients": [i.to_dict() for i in self.ingredients],
            "steps": [s.to_dict() for s in self.steps],
            "nutritionPerServing": self.nutrition_per_serving.to_dict(),
            "servings": self.servings,
            "modificationNotes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModificationResult":
        return cls(
            ingredients=[Ingredient.from_dict(i) for i in data.get("ingredients", [])],
            steps=[RecipeStep.from_dict(s) for s in data.get("steps", [])],
            nutrition_per_serving=NutritionVector.from_dict(data.get("nutritionPerServing", {})),
            servings=int(data.get("servings", 0) or 0),
            notes=str(data.get("modificationNotes", "")),
        )
