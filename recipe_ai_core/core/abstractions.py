"""
Abstracciones (Protocols) de los colaboradores externos del motor.

El motor de modificaciones es puro: no sabe de SQL ni de HTTP. Estas
interfaces describen lo que necesita de afuera:

- Un repositorio de recetas que entregue `RecipeSnapshot`
- Un store que persista el resultado como registro de modificación
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol

from ..domain_models import ModificationResult, RecipeSnapshot


class RecipeRepository(Protocol):
    """
    Interfaz para obtener recetas.

    La implementación SQLAlchemy vive en `db.helpers.SqlRecipeRepository`.
    """

    def fetch_recipe(self, recipe_id: str) -> Optional[RecipeSnapshot]:
        """
        Devuelve el snapshot completo de la receta o None si no existe.

        Args:
            recipe_id: UUID de la receta
        """
        ...


class ModificationStore(Protocol):
    """
    Interfaz para persistir modificaciones calculadas.

    Cada llamada crea un registro nuevo: los registros nunca se actualizan.
    """

    def insert_modification(
        self,
        recipe_id: str,
        user_id: str,
        modification_type: str,
        result: ModificationResult,
    ) -> Dict[str, Any]:
        """
        Persiste el resultado y devuelve el registro creado.

        Returns:
            Diccionario con id, original_recipe_id, user_id,
            modification_type, modified_data y created_at.
        """
        ...
