"""
Modelos de request/response para la API.

Estos modelos definen la estructura esperada de los requests HTTP,
validando tipos y rangos antes de pasarlos al core. El motor asume que el
pedido ya pasó por acá.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator

from recipe_ai_core.domains.modifications.models import (
    IncreaseCaloriesParams,
    IncreaseFiberParams,
    IncreaseProteinParams,
    IngredientSubstitutionParams,
    ModificationRequest,
    PortionSizeParams,
    ReduceCaloriesParams,
)


class _CamelModel(BaseModel):
    """Acepta el JSON camelCase del frontend y también nombres snake_case."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


# ============================================================
# Parámetros por tipo de modificación
# ============================================================

class ReduceCaloriesParameters(_CamelModel):
    target_calories: Optional[float] = Field(
        default=None, alias="targetCalories", gt=0, le=10000,
        description="Calorías objetivo por porción",
    )
    reduction_percentage: Optional[float] = Field(
        default=None, alias="reductionPercentage", ge=1, le=100,
        description="Porcentaje de reducción",
    )

    @model_validator(mode="after")
    def _require_target(self):
        if self.target_calories is None and self.reduction_percentage is None:
            raise ValueError("targetCalories or reductionPercentage is required")
        return self


class IncreaseCaloriesParameters(_CamelModel):
    target_calories: Optional[float] = Field(
        default=None, alias="targetCalories", gt=0, le=10000,
        description="Calorías objetivo por porción",
    )
    increase_percentage: Optional[float] = Field(
        default=None, alias="increasePercentage", ge=1, le=100,
        description="Porcentaje de aumento",
    )

    @model_validator(mode="after")
    def _require_target(self):
        if self.target_calories is None and self.increase_percentage is None:
            raise ValueError("targetCalories or increasePercentage is required")
        return self


class IncreaseProteinParameters(_CamelModel):
    target_protein: Optional[float] = Field(
        default=None, alias="targetProtein", gt=0, le=1000,
        description="Gramos de proteína objetivo por porción",
    )
    increase_percentage: Optional[float] = Field(
        default=None, alias="increasePercentage", ge=1, le=100,
    )

    @model_validator(mode="after")
    def _require_target(self):
        if self.target_protein is None and self.increase_percentage is None:
            raise ValueError("targetProtein or increasePercentage is required")
        return self


class IncreaseFiberParameters(_CamelModel):
    target_fiber: Optional[float] = Field(
        default=None, alias="targetFiber", gt=0, le=1000,
        description="Gramos de fibra objetivo por porción",
    )
    increase_percentage: Optional[float] = Field(
        default=None, alias="increasePercentage", ge=1, le=100,
    )

    @model_validator(mode="after")
    def _require_target(self):
        if self.target_fiber is None and self.increase_percentage is None:
            raise ValueError("targetFiber or increasePercentage is required")
        return self


class PortionSizeParameters(_CamelModel):
    new_servings: int = Field(..., alias="newServings", ge=1, le=100)


class IngredientSubstitutionParameters(_CamelModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid", str_strip_whitespace=True)

    original_ingredient: str = Field(
        ..., alias="originalIngredient", min_length=1, max_length=100,
    )
    preferred_substitute: Optional[str] = Field(
        default=None, alias="preferredSubstitute", min_length=1, max_length=100,
    )


# ============================================================
# Comandos (unión discriminada por modificationType)
# ============================================================

class ReduceCaloriesCommand(_CamelModel):
    modification_type: Literal["reduce_calories"] = Field(..., alias="modificationType")
    parameters: ReduceCaloriesParameters

    def to_request(self) -> ModificationRequest:
        p = self.parameters
        return ModificationRequest.of(
            ReduceCaloriesParams(
                target_calories=p.target_calories,
                reduction_percentage=p.reduction_percentage,
            )
        )


class IncreaseCaloriesCommand(_CamelModel):
    modification_type: Literal["increase_calories"] = Field(..., alias="modificationType")
    parameters: IncreaseCaloriesParameters

    def to_request(self) -> ModificationRequest:
        p = self.parameters
        return ModificationRequest.of(
            IncreaseCaloriesParams(
                target_calories=p.target_calories,
                increase_percentage=p.increase_percentage,
            )
        )


class IncreaseProteinCommand(_CamelModel):
    modification_type: Literal["increase_protein"] = Field(..., alias="modificationType")
    parameters: IncreaseProteinParameters

    def to_request(self) -> ModificationRequest:
        p = self.parameters
        return ModificationRequest.of(
            IncreaseProteinParams(
                target_protein=p.target_protein,
                increase_percentage=p.increase_percentage,
            )
        )


class IncreaseFiberCommand(_CamelModel):
    modification_type: Literal["increase_fiber"] = Field(..., alias="modificationType")
    parameters: IncreaseFiberParameters

    def to_request(self) -> ModificationRequest:
        p = self.parameters
        return ModificationRequest.of(
            IncreaseFiberParams(
                target_fiber=p.target_fiber,
                increase_percentage=p.increase_percentage,
            )
        )


class PortionSizeCommand(_CamelModel):
    modification_type: Literal["portion_size"] = Field(..., alias="modificationType")
    parameters: PortionSizeParameters

    def to_request(self) -> ModificationRequest:
        return ModificationRequest.of(PortionSizeParams(new_servings=self.parameters.new_servings))


class IngredientSubstitutionCommand(_CamelModel):
    modification_type: Literal["ingredient_substitution"] = Field(..., alias="modificationType")
    parameters: IngredientSubstitutionParameters

    def to_request(self) -> ModificationRequest:
        p = self.parameters
        return ModificationRequest.of(
            IngredientSubstitutionParams(
                original_ingredient=p.original_ingredient,
                preferred_substitute=p.preferred_substitute,
            )
        )


CreateModificationCommand = Annotated[
    Union[
        ReduceCaloriesCommand,
        IncreaseCaloriesCommand,
        IncreaseProteinCommand,
        IncreaseFiberCommand,
        PortionSizeCommand,
        IngredientSubstitutionCommand,
    ],
    Field(discriminator="modification_type"),
]


class CreateModificationBody(RootModel[CreateModificationCommand]):
    """Body de POST /api/recipes/{recipe_id}/modifications."""

    def to_request(self) -> ModificationRequest:
        return self.root.to_request()


# ============================================================
# Responses
# ============================================================

class PaginationResponse(BaseModel):
    page: int
    limit: int
    total: int
    totalPages: int


class ModificationResponse(BaseModel):
    """
    Registro de modificación tal como lo expone la API (camelCase).
    """

    id: str = Field(..., description="ID único de la modificación")
    originalRecipeId: str = Field(..., description="ID de la receta original")
    userId: str = Field(..., description="Usuario que pidió la modificación")
    modificationType: str = Field(..., description="Tipo de modificación")
    modifiedData: Dict[str, Any] = Field(
        default_factory=dict,
        description="ingredients, steps, nutritionPerServing, servings, modificationNotes",
    )
    createdAt: str = Field(..., description="Fecha de creación (ISO 8601)")


class CreateModificationResponse(BaseModel):
    success: bool = True
    modification: ModificationResponse


class ModificationListResponse(BaseModel):
    modifications: List[ModificationResponse]
    pagination: PaginationResponse


class OriginalRecipeSummary(BaseModel):
    id: str
    title: str
    nutritionPerServing: Dict[str, Union[int, float]]


class ModificationDetailResponse(BaseModel):
    id: str
    originalRecipeId: str
    modificationType: str
    modifiedData: Dict[str, Any]
    originalRecipe: OriginalRecipeSummary
    createdAt: str
