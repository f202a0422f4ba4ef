"""
Dispatcher de estrategias: `ModificationType` -> función de estrategia.

La tabla `STRATEGIES` es cerrada: si se agrega un miembro a
`ModificationType` sin su estrategia, el import de este módulo falla.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict

from ...domain_models import ModificationResult, RecipeSnapshot
from . import strategies
from .errors import UnsupportedModificationType
from .models import ModificationRequest, ModificationType

logger = logging.getLogger(__name__)

Strategy = Callable[[RecipeSnapshot, object], ModificationResult]

STRATEGIES: Dict[ModificationType, Strategy] = {
    ModificationType.REDUCE_CALORIES: strategies.reduce_calories,
    ModificationType.INCREASE_CALORIES: strategies.increase_calories,
    ModificationType.INCREASE_PROTEIN: strategies.increase_protein,
    ModificationType.INCREASE_FIBER: strategies.increase_fiber,
    ModificationType.PORTION_SIZE: strategies.portion_size,
    ModificationType.INGREDIENT_SUBSTITUTION: strategies.ingredient_substitution,
}

_missing = set(ModificationType) - set(STRATEGIES)
if _missing:
    raise RuntimeError(
        "Tipos de modificación sin estrategia: "
        + ", ".join(sorted(t.value for t in _missing))
    )


def get_strategy(modification_type: str) -> Strategy:
    """
    Devuelve la estrategia para `modification_type`.

    Raises:
        UnsupportedModificationType: si el tag no es uno de los seis conocidos.
    """
    strategy = STRATEGIES.get(modification_type)
    if strategy is None:
        logger.error(f"Tipo de modificación no soportado: {modification_type!r}")
        raise UnsupportedModificationType(modification_type)
    return strategy


def dispatch(recipe: RecipeSnapshot, request: ModificationRequest) -> ModificationResult:
    """Resuelve la estrategia del pedido y la aplica sobre `recipe`."""
    strategy = get_strategy(request.modification_type)
    return strategy(recipe, request.parameters)
