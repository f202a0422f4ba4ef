from __future__ import annotations

"""
recipe_ai_core.engine
=====================

Orquestador de alto nivel del motor de modificaciones de recetas.

Este módulo expone una **API interna** y estable para modificar recetas, sin
preocuparse por:

- HTTP
- frameworks web
- detalles de CLI

La idea es que:

- La CLI (`cli.py`) use `create_modification` directamente (sin DB).
- La API HTTP use `run_modification`, que además persiste el resultado.
- Nadie llame a las estrategias sueltas: siempre se pasa por el dispatcher.
"""

import logging
from datetime import datetime
from typing import Any, Dict, TypedDict

from .core.abstractions import ModificationStore
from .domain_models import ModificationResult, RecipeSnapshot
from .domains.modifications.dispatcher import dispatch
from .domains.modifications.models import ModificationRequest

logger = logging.getLogger(__name__)


class ModificationRecord(TypedDict):
    """
    Forma persistida de una modificación.

    Esta estructura es deliberadamente simple y serializable, pensada para:
    - Devolver datos a una capa HTTP.
    - Realizar asserts en tests de integración.
    """

    id: str
    """UUID del registro."""

    original_recipe_id: str
    """Receta sobre la que se calculó la modificación."""

    user_id: str
    """Usuario que pidió la modificación."""

    modification_type: str
    """Tag de la modificación (ej: "reduce_calories")."""

    modified_data: Dict[str, Any]
    """`ModificationResult.to_dict()` (camelCase)."""

    created_at: datetime
    """Momento de creación (UTC)."""


def create_modification(
    recipe: RecipeSnapshot,
    requester_id: str,
    request: ModificationRequest,
) -> ModificationResult:
    """
    Calcula una modificación de `recipe` (sin I/O).

    Flujo:
    ------
    1) El dispatcher resuelve la estrategia según `request.modification_type`.
    2) La estrategia calcula nutrición, porciones y notas sobre copias de
       ingredientes y pasos.

    No hay cache: cada llamada recalcula. Para el mismo input el resultado
    es siempre el mismo.

    Args:
        recipe:
            Snapshot de la receta original (no se modifica).
        requester_id:
            Usuario que pide la modificación (solo se usa para logging; la
            autorización es responsabilidad del caller).
        request:
            Pedido ya validado.

    Returns:
        ModificationResult listo para persistir.

    Raises:
        UnsupportedModificationType: si el tag del pedido no es conocido.
    """
    result = dispatch(recipe, request)
    logger.info(
        f"Modificación {request.modification_type} calculada "
        f"(recipe_id={recipe.id}, user_id={requester_id})"
    )
    return result


def run_modification(
    *,
    recipe: RecipeSnapshot,
    requester_id: str,
    request: ModificationRequest,
    store: ModificationStore,
) -> ModificationRecord:
    """
    Calcula la modificación y la entrega al store para persistirla.

    NOTA IMPORTANTE:
    ----------------
    - El commit de la transacción queda a cargo del caller (la sesión la
      maneja `get_db_session()` o la dependencia `get_db` de la API).
    - Si el dispatcher rechaza el tipo, no se persiste nada.

    Returns:
        ModificationRecord con el registro creado.
    """
    result = create_modification(recipe, requester_id, request)
    record = store.insert_modification(
        recipe_id=recipe.id,
        user_id=requester_id,
        modification_type=str(getattr(request.modification_type, "value", request.modification_type)),
        result=result,
    )
    return ModificationRecord(**record)
