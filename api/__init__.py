"""
API HTTP para recipe-ai-core.

Esta capa expone endpoints REST que usan el core interno (recipe_ai_core.engine)
para modificar recetas y consultar las modificaciones guardadas.

La API está diseñada para ser consumida por:
- UI web del catálogo de recetas
- Scripts de automatización
"""
