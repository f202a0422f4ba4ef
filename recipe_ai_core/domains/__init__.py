"""
Dominios específicos del motor.

Cada dominio (modifications, ...) define:
- Modelos de dominio específicos
- Lógica pura específica (estrategias)
- Textos específicos
"""
