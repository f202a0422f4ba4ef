from __future__ import annotations

"""
recipe_ai_core.nutrition
========================

Utilidades numéricas sobre `NutritionVector`.

Todas las estrategias de modificación redondean igual:

    round_half_away(x, p) == round(x * 10**p) / 10**p

con redondeo "half away from zero" (NO el redondeo bancario de `round()`
de Python). Los valores no finitos (`inf`, `nan`) se devuelven tal cual.

Nada de este módulo recorta valores en cero ni valida ratios: un ratio
negativo o infinito se propaga a todos los campos.
"""

import math

from .domain_models import NUTRITION_FIELDS, NutritionVector


def round_half_away(value: float, precision: int = 0) -> float:
    """
    Redondea `value` a `precision` decimales, con empates alejándose de cero.

    Ejemplos
    --------
    >>> round_half_away(7.5)
    8.0
    >>> round_half_away(26.25, 1)
    26.3
    >>> round_half_away(-2.5)
    -3.0
    """
    if not math.isfinite(value):
        return value
    factor = 10 ** precision
    shifted = value * factor
    rounded = math.floor(abs(shifted) + 0.5)
    return math.copysign(rounded, shifted) / factor


def ratio(numerator: float, denominator: float) -> float:
    """
    División con semántica IEEE-754: dividir por cero NO lanza excepción.

    - x / 0  -> +inf o -inf según los signos
    - 0 / 0  -> nan
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def scale(vector: NutritionVector, factor: float, precision: int = 1) -> NutritionVector:
    """
    Multiplica cada campo de `vector` por `factor` y redondea a `precision`.

    Args:
        vector: vector nutricional original (no se modifica).
        factor: ratio a aplicar; puede ser 0, negativo o no finito.
        precision: decimales del redondeo (default 1).

    Returns:
        Nuevo `NutritionVector` escalado.
    """
    return NutritionVector(
        **{
            name: round_half_away(getattr(vector, name) * factor, precision)
            for name in NUTRITION_FIELDS
        }
    )
