"""
Modelos de dominio específicos para modificaciones de recetas.

Cada tipo de modificación tiene su propio registro de parámetros (frozen
dataclass) ligado a su tag. `ModificationRequest` une tag y parámetros y
rechaza combinaciones cruzadas (por ejemplo, un tag `portion_size` con
parámetros de `increase_fiber`).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Union

from .errors import UnsupportedModificationType


class ModificationType(str, Enum):
    """Tipos de modificación soportados por el motor."""

    REDUCE_CALORIES = "reduce_calories"
    INCREASE_CALORIES = "increase_calories"
    INCREASE_PROTEIN = "increase_protein"
    INCREASE_FIBER = "increase_fiber"
    PORTION_SIZE = "portion_size"
    INGREDIENT_SUBSTITUTION = "ingredient_substitution"


@dataclass(frozen=True)
class ReduceCaloriesParams:
    """`target_calories` gana siempre sobre `reduction_percentage`."""
    modification_type: ClassVar[ModificationType] = ModificationType.REDUCE_CALORIES

    target_calories: Optional[float] = None
    reduction_percentage: Optional[float] = None


@dataclass(frozen=True)
class IncreaseCaloriesParams:
    """`target_calories` gana siempre sobre `increase_percentage`."""
    modification_type: ClassVar[ModificationType] = ModificationType.INCREASE_CALORIES

    target_calories: Optional[float] = None
    increase_percentage: Optional[float] = None


@dataclass(frozen=True)
class IncreaseProteinParams:
    modification_type: ClassVar[ModificationType] = ModificationType.INCREASE_PROTEIN

    target_protein: Optional[float] = None
    increase_percentage: Optional[float] = None


@dataclass(frozen=True)
class IncreaseFiberParams:
    modification_type: ClassVar[ModificationType] = ModificationType.INCREASE_FIBER

    target_fiber: Optional[float] = None
    increase_percentage: Optional[float] = None


@dataclass(frozen=True)
class PortionSizeParams:
    """Sin `new_servings` se mantienen las porciones originales."""
    modification_type: ClassVar[ModificationType] = ModificationType.PORTION_SIZE

    new_servings: Optional[int] = None


@dataclass(frozen=True)
class IngredientSubstitutionParams:
    modification_type: ClassVar[ModificationType] = ModificationType.INGREDIENT_SUBSTITUTION

    original_ingredient: str = ""
    preferred_substitute: Optional[str] = None


ModificationParameters = Union[
    ReduceCaloriesParams,
    IncreaseCaloriesParams,
    IncreaseProteinParams,
    IncreaseFiberParams,
    PortionSizeParams,
    IngredientSubstitutionParams,
]

PARAMETERS_BY_TYPE: Dict[ModificationType, type] = {
    ModificationType.REDUCE_CALORIES: ReduceCaloriesParams,
    ModificationType.INCREASE_CALORIES: IncreaseCaloriesParams,
    ModificationType.INCREASE_PROTEIN: IncreaseProteinParams,
    ModificationType.INCREASE_FIBER: IncreaseFiberParams,
    ModificationType.PORTION_SIZE: PortionSizeParams,
    ModificationType.INGREDIENT_SUBSTITUTION: IngredientSubstitutionParams,
}

# Nombres camelCase del body HTTP -> atributos de los dataclasses
_PARAMETER_ALIASES: Dict[str, str] = {
    "targetCalories": "target_calories",
    "reductionPercentage": "reduction_percentage",
    "increasePercentage": "increase_percentage",
    "targetProtein": "target_protein",
    "targetFiber": "target_fiber",
    "newServings": "new_servings",
    "originalIngredient": "original_ingredient",
    "preferredSubstitute": "preferred_substitute",
}


@dataclass(frozen=True)
class ModificationRequest:
    """
    Pedido de modificación ya validado.

    `modification_type` es un `str` (los miembros de `ModificationType` lo
    son) para que un tag desconocido llegue al dispatcher, que es quien lo
    rechaza con `UnsupportedModificationType`.
    """
    modification_type: str
    parameters: Any

    def __post_init__(self) -> None:
        expected = PARAMETERS_BY_TYPE.get(self.modification_type)
        if expected is not None and not isinstance(self.parameters, expected):
            raise TypeError(
                f"{self.modification_type} requiere {expected.__name__}, "
                f"se recibió {type(self.parameters).__name__}"
            )

    @classmethod
    def of(cls, parameters: ModificationParameters) -> "ModificationRequest":
        """Construye el pedido a partir de los parámetros (el tag sale de su clase)."""
        return cls(modification_type=parameters.modification_type, parameters=parameters)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModificationRequest":
        """
        Parsea `{"modificationType": ..., "parameters": {...}}` (camelCase).

        Raises:
            UnsupportedModificationType: si el tag no es uno de los seis conocidos.
        """
        tag = data.get("modificationType")
        try:
            modification_type = ModificationType(tag)
        except ValueError as e:
            raise UnsupportedModificationType(tag) from e

        raw = data.get("parameters") or {}
        kwargs = {_PARAMETER_ALIASES.get(k, k): v for k, v in raw.items() if v is not None}
        parameters = PARAMETERS_BY_TYPE[modification_type](**kwargs)
        return cls(modification_type=modification_type, parameters=parameters)
