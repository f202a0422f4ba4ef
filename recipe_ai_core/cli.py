"""
recipe_ai_core.cli
==================

Punto de entrada mínimo para aplicar una modificación a una receta en JSON,
sin base de datos:

    python -m recipe_ai_core.cli receta.json reduce_calories --param targetCalories=300
    python -m recipe_ai_core.cli receta.json ingredient_substitution \\
        --param originalIngredient=masło --param preferredSubstitute="oliwa z oliwek"

El archivo de receta usa el formato camelCase de la API (`id`, `userId`,
`title`, `ingredients`, `steps`, `servings`, `nutritionPerServing`, ...).

Este archivo está pensado para:
- demo local rápida,
- smoke tests manuales de las estrategias.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from .domain_models import RecipeSnapshot
from .domains.modifications.errors import UnsupportedModificationType
from .domains.modifications.models import ModificationRequest
from .engine import create_modification


def _parse_value(raw: str) -> Any:
    for cast in (int, float):
        try:
            return cast(raw)
        except ValueError:
            continue
    return raw


def _parse_params(pairs: List[str]) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    for pair in pairs:
        if "=" not in pair:
            raise ValueError(f"Parámetro inválido '{pair}'. Formato esperado: clave=valor")
        key, value = pair.split("=", 1)
        params[key.strip()] = _parse_value(value.strip())
    return params


def main(argv: List[str] | None = None) -> int:
    """
    Lee la receta, aplica la modificación y escribe el resultado en stdout.

    Returns
    -------
    int
        0 si salió bien, 2 si el tipo de modificación no existe o los
        parámetros no son válidos para ese tipo.
    """
    parser = argparse.ArgumentParser(description="Aplica una modificación a una receta JSON.")
    parser.add_argument("recipe_file", help="Ruta al JSON de la receta")
    parser.add_argument("modification_type", help="Tipo de modificación (ej: reduce_calories)")
    parser.add_argument(
        "--param",
        action="append",
        default=[],
        help="Parámetro clave=valor (repetible), ej: --param targetCalories=300",
    )
    parser.add_argument("--user-id", default="cli", help="Usuario que pide la modificación")
    args = parser.parse_args(argv)

    recipe = RecipeSnapshot.from_dict(
        json.loads(Path(args.recipe_file).read_text(encoding="utf-8"))
    )

    try:
        request = ModificationRequest.from_dict(
            {"modificationType": args.modification_type, "parameters": _parse_params(args.param)}
        )
        result = create_modification(recipe, args.user_id, request)
    except (UnsupportedModificationType, ValueError, TypeError) as e:
        # tipo o parámetros inválidos
        print(f"❌ {e}", file=sys.stderr)
        return 2

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
