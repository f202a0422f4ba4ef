"""Rutas de la API."""

from . import modifications

__all__ = ["modifications"]
