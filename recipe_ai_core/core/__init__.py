"""
Core genérico del motor de modificaciones.

Este módulo contiene las interfaces que conectan la lógica pura con el mundo:
- Repositorio de recetas (lectura de snapshots)
- Store de modificaciones (persistencia de resultados)
"""
