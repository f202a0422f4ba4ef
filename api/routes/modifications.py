"""
Endpoints para crear y consultar modificaciones de recetas.

Este módulo maneja:
- POST   /api/recipes/{recipe_id}/modifications: Crear una modificación
- GET    /api/recipes/{recipe_id}/modifications: Listar modificaciones (paginado)
- GET    /api/modifications/{modification_id}: Detalle de una modificación
- DELETE /api/modifications/{modification_id}: Borrar una modificación propia

Autorización: una receta se puede modificar (y ver sus modificaciones) si
es pública o si pertenece al usuario.
"""

import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from recipe_ai_core.config import get_settings
from recipe_ai_core.db.helpers import (
    ModificationAccessDenied,
    ModificationNotFound,
    SqlModificationStore,
    SqlRecipeRepository,
    delete_modification,
    format_timestamp,
    get_modification_for_user,
    list_modifications_by_recipe,
    modification_detail_to_dict,
    modification_to_dict,
)
from recipe_ai_core.domains.modifications.errors import ModificationError
from recipe_ai_core.engine import ModificationRecord, run_modification

from ..dependencies import get_current_user_id, get_db
from ..models.requests import (
    CreateModificationBody,
    CreateModificationResponse,
    ModificationDetailResponse,
    ModificationListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["modifications"])

GENERIC_ERROR = "An unexpected error occurred"


def _record_to_response(record: ModificationRecord) -> dict:
    return {
        "id": record["id"],
        "originalRecipeId": record["original_recipe_id"],
        "userId": record["user_id"],
        "modificationType": record["modification_type"],
        "modifiedData": record["modified_data"],
        "createdAt": format_timestamp(record["created_at"]),
    }


@router.post(
    "/recipes/{recipe_id}/modifications",
    response_model=CreateModificationResponse,
    status_code=201,
)
async def create_recipe_modification(
    recipe_id: uuid.UUID,
    command: CreateModificationBody,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Crea una modificación de una receta existente.

    Args:
        recipe_id: UUID de la receta a modificar
        command: Tipo de modificación y sus parámetros

    Returns:
        CreateModificationResponse con el registro creado

    Raises:
        404: La receta no existe
        403: La receta es privada y el usuario no es el dueño
        500: Error interno (incluye un tipo de modificación sin estrategia)
    """
    recipe = SqlRecipeRepository(db).fetch_recipe(str(recipe_id))
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")

    if not recipe.is_visible_to(user_id):
        raise HTTPException(
            status_code=403, detail="You don't have permission to modify this recipe"
        )

    try:
        record = run_modification(
            recipe=recipe,
            requester_id=user_id,
            request=command.to_request(),
            store=SqlModificationStore(db),
        )
    except ModificationError as e:
        # Violación de contrato: la validación debería haberlo impedido
        logger.exception(
            f"[POST /api/recipes/{recipe_id}/modifications] Error (user_id={user_id}): {e}"
        )
        raise HTTPException(status_code=500, detail=GENERIC_ERROR) from e

    return {"success": True, "modification": _record_to_response(record)}


@router.get(
    "/recipes/{recipe_id}/modifications",
    response_model=ModificationListResponse,
)
async def list_recipe_modifications(
    recipe_id: uuid.UUID,
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Lista paginada de modificaciones de una receta (las más nuevas primero).

    Args:
        recipe_id: UUID de la receta
        page: Página (default 1)
        limit: Resultados por página (default DEFAULT_PAGE_SIZE, máx MAX_PAGE_SIZE)
    """
    settings = get_settings()
    limit = limit or settings.default_page_size
    if limit > settings.max_page_size:
        raise HTTPException(
            status_code=400,
            detail=f"limit must be {settings.max_page_size} or less",
        )

    recipe = SqlRecipeRepository(db).fetch_recipe(str(recipe_id))
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")

    if not recipe.is_visible_to(user_id):
        raise HTTPException(
            status_code=403,
            detail="You don't have permission to view modifications for this recipe",
        )

    modifications, pagination = list_modifications_by_recipe(db, str(recipe_id), page, limit)
    return {
        "modifications": [modification_to_dict(m) for m in modifications],
        "pagination": pagination,
    }


@router.get(
    "/modifications/{modification_id}",
    response_model=ModificationDetailResponse,
)
async def get_modification(
    modification_id: uuid.UUID,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Detalle de una modificación, con datos de la receta original.

    Devuelve 404 tanto si no existe como si el usuario no puede verla.
    """
    modification = get_modification_for_user(db, str(modification_id), user_id)
    if modification is None:
        raise HTTPException(status_code=404, detail="Modification not found")

    return modification_detail_to_dict(modification)


@router.delete("/modifications/{modification_id}", status_code=204)
async def delete_modification_endpoint(
    modification_id: uuid.UUID,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Borra una modificación. Solo su dueño puede hacerlo.

    Raises:
        404: La modificación no existe
        403: El usuario no es el dueño
    """
    try:
        delete_modification(db, str(modification_id), user_id)
    except ModificationNotFound as e:
        raise HTTPException(status_code=404, detail="Modification not found") from e
    except ModificationAccessDenied as e:
        raise HTTPException(
            status_code=403,
            detail="You don't have permission to delete this modification",
        ) from e

    return Response(status_code=204)
