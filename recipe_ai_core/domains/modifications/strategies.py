"""
Estrategias de modificación: una función pura por tipo.

Cada estrategia recibe el `RecipeSnapshot` original y sus parámetros, y
devuelve un `ModificationResult` nuevo. Ninguna hace IO ni guarda estado:
dos llamadas con el mismo input producen el mismo resultado.

Hoy las estrategias son un placeholder aritmético determinista de lo que
haría un modelo de IA. Las constantes de abajo son parte del contrato con
los datos ya persistidos y no deben cambiarse.

Casos borde conocidos
---------------------
Si las calorías originales son 0, el ratio de `reduce_calories` /
`increase_calories` es `inf` o `nan` y se propaga a los macros sin error.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List

from ...domain_models import (
    Ingredient,
    ModificationResult,
    NutritionVector,
    RecipeSnapshot,
    RecipeStep,
)
from ...nutrition import ratio, round_half_away, scale
from . import notes
from .models import (
    IncreaseCaloriesParams,
    IncreaseFiberParams,
    IncreaseProteinParams,
    IngredientSubstitutionParams,
    PortionSizeParams,
    ReduceCaloriesParams,
)

KCAL_PER_GRAM_PROTEIN = 4
CARBS_PER_GRAM_FIBER = 1.5
KCAL_PER_GRAM_CARBS = 2

SUBSTITUTION_CALORIES_FACTOR = 0.95
SUBSTITUTION_PROTEIN_FACTOR = 1.05
SUBSTITUTION_FAT_FACTOR = 0.90
SUBSTITUTION_FIBER_FACTOR = 1.10


# ============================================================
# Helpers
# ============================================================

def _copy_ingredients(recipe: RecipeSnapshot) -> List[Ingredient]:
    return [replace(ingredient) for ingredient in recipe.ingredients]


def _copy_steps(recipe: RecipeSnapshot) -> List[RecipeStep]:
    return [replace(step) for step in recipe.steps]


def _result(
    recipe: RecipeSnapshot,
    nutrition: NutritionVector,
    modification_notes: str,
    servings: int | None = None,
) -> ModificationResult:
    return ModificationResult(
        ingredients=_copy_ingredients(recipe),
        steps=_copy_steps(recipe),
        nutrition_per_serving=nutrition,
        servings=recipe.servings if servings is None else servings,
        notes=modification_notes,
    )


def _scale_to_calories(recipe: RecipeSnapshot, target_calories: float) -> NutritionVector:
    """
    Escala los macros por `target / original` y fija las calorías en `target`.

    Las calorías no se recalculan desde el ratio (evita doble redondeo).
    """
    original = recipe.nutrition_per_serving
    factor = ratio(target_calories, original.calories)
    return scale(original, factor, precision=1).with_changes(calories=target_calories)


# ============================================================
# Calorías
# ============================================================

def reduce_calories(recipe: RecipeSnapshot, params: ReduceCaloriesParams) -> ModificationResult:
    original_calories = recipe.nutrition_per_serving.calories

    if params.target_calories is not None:
        target = params.target_calories
    elif params.reduction_percentage is not None:
        target = round_half_away(original_calories * (1 - params.reduction_percentage / 100))
    else:
        target = original_calories

    return _result(
        recipe,
        _scale_to_calories(recipe, target),
        notes.reduce_calories_notes(original_calories, target),
    )


def increase_calories(recipe: RecipeSnapshot, params: IncreaseCaloriesParams) -> ModificationResult:
    original_calories = recipe.nutrition_per_serving.calories

    if params.target_calories is not None:
        target = params.target_calories
    elif params.increase_percentage is not None:
        target = round_half_away(original_calories * (1 + params.increase_percentage / 100))
    else:
        target = original_calories

    return _result(
        recipe,
        _scale_to_calories(recipe, target),
        notes.increase_calories_notes(original_calories, target),
    )


# ============================================================
# Macros
# ============================================================

def increase_protein(recipe: RecipeSnapshot, params: IncreaseProteinParams) -> ModificationResult:
    """
    Solo cambian proteína y calorías: la proteína agregada suma 4 kcal/g
    sin tocar grasas, carbohidratos, fibra ni sal.
    """
    original = recipe.nutrition_per_serving

    if params.target_protein is not None:
        target = params.target_protein
    elif params.increase_percentage is not None:
        target = round_half_away(original.protein * (1 + params.increase_percentage / 100), 1)
    else:
        target = original.protein

    protein_delta = target - original.protein
    calorie_delta = round_half_away(protein_delta * KCAL_PER_GRAM_PROTEIN)

    nutrition = original.with_changes(
        calories=original.calories + calorie_delta,
        protein=target,
    )
    return _result(recipe, nutrition, notes.increase_protein_notes(original.protein, target))


def increase_fiber(recipe: RecipeSnapshot, params: IncreaseFiberParams) -> ModificationResult:
    """
    La fibra agregada arrastra 1.5 g de carbohidratos por gramo, y esos
    carbohidratos suman 2 kcal/g.
    """
    original = recipe.nutrition_per_serving

    if params.target_fiber is not None:
        target = params.target_fiber
    elif params.increase_percentage is not None:
        target = round_half_away(original.fiber * (1 + params.increase_percentage / 100), 1)
    else:
        target = original.fiber

    fiber_delta = target - original.fiber
    carbs_delta = round_half_away(fiber_delta * CARBS_PER_GRAM_FIBER, 1)
    calorie_delta = round_half_away(carbs_delta * KCAL_PER_GRAM_CARBS)

    nutrition = original.with_changes(
        calories=original.calories + calorie_delta,
        carbs=original.carbs + carbs_delta,
        fiber=target,
    )
    return _result(recipe, nutrition, notes.increase_fiber_notes(original.fiber, target))


# ============================================================
# Porciones y sustituciones
# ============================================================

def portion_size(recipe: RecipeSnapshot, params: PortionSizeParams) -> ModificationResult:
    """
    Cambia solo la cantidad de porciones declarada.

    La nutrición por porción queda idéntica y las cantidades de los
    ingredientes NO se reescalan.
    """
    new_servings = params.new_servings or recipe.servings
    return _result(
        recipe,
        recipe.nutrition_per_serving,
        notes.portion_size_notes(recipe.servings, new_servings),
        servings=new_servings,
    )


def ingredient_substitution(
    recipe: RecipeSnapshot, params: IngredientSubstitutionParams
) -> ModificationResult:
    """
    Aplica multiplicadores fijos, sin importar qué ingrediente se nombró.

    No se busca ni reemplaza el ingrediente en la lista: ingredientes y
    pasos se copian tal cual.
    """
    original_ingredient = params.original_ingredient or notes.UNKNOWN_INGREDIENT
    substitute = params.preferred_substitute or notes.GENERIC_SUBSTITUTE
    original = recipe.nutrition_per_serving

    nutrition = original.with_changes(
        calories=round_half_away(original.calories * SUBSTITUTION_CALORIES_FACTOR),
        protein=round_half_away(original.protein * SUBSTITUTION_PROTEIN_FACTOR, 1),
        fat=round_half_away(original.fat * SUBSTITUTION_FAT_FACTOR, 1),
        fiber=round_half_away(original.fiber * SUBSTITUTION_FIBER_FACTOR, 1),
    )
    return _result(
        recipe,
        nutrition,
        notes.ingredient_substitution_notes(original_ingredient, substitute),
    )
