"""
Errores del motor de modificaciones.

El motor lanza un único error propio: `UnsupportedModificationType`, cuando
el dispatcher recibe un tag fuera de los seis conocidos. Es una violación de
contrato (la validación de la API debería impedirlo), no un error de input
del usuario: el caller debe loguearlo y responder un error genérico.
"""

from __future__ import annotations

from typing import Any


class ModificationError(Exception):
    """Base de los errores del motor de modificaciones."""


class UnsupportedModificationType(ModificationError):
    """El tipo de modificación no tiene estrategia asociada."""

    def __init__(self, modification_type: Any):
        self.modification_type = modification_type
        super().__init__(f"Unsupported modification type: {modification_type}")
