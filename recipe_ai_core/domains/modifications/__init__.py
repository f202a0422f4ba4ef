"""
Dominio de modificaciones de recetas.

Este módulo contiene la lógica específica para modificar recetas existentes:
- Modelos de pedido (ModificationType y un registro de parámetros por tipo)
- Estrategias puras (una por tipo de modificación)
- Dispatcher que mapea tipo -> estrategia
- Textos explicativos de cada modificación
"""

from .dispatcher import dispatch, get_strategy
from .errors import ModificationError, UnsupportedModificationType
from .models import (
    IncreaseCaloriesParams,
    IncreaseFiberParams,
    IncreaseProteinParams,
    IngredientSubstitutionParams,
    ModificationRequest,
    ModificationType,
    PortionSizeParams,
    ReduceCaloriesParams,
)

__all__ = [
    "dispatch",
    "get_strategy",
    "ModificationError",
    "UnsupportedModificationType",
    "ModificationRequest",
    "ModificationType",
    "ReduceCaloriesParams",
    "IncreaseCaloriesParams",
    "IncreaseProteinParams",
    "IncreaseFiberParams",
    "PortionSizeParams",
    "IngredientSubstitutionParams",
]
