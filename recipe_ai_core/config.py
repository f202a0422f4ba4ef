# recipe_ai_core/config.py
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List
import os

from dotenv import load_dotenv

"""
recipe_ai_core.config
=====================

Gestión centralizada de configuración de la aplicación.

Este módulo define:
- La estructura de configuración (`Settings`)
- El mecanismo para cargar variables desde entorno (.env)
- Un acceso único y cacheado a la configuración (`get_settings`)

Convenciones
------------
- Las variables de entorno se cargan desde un archivo `.env` si existe.
- Los defaults están pensados para desarrollo local.
- En producción, los valores deben venir del entorno real (Docker, CI, etc.).

Notas importantes
-----------------
- `load_dotenv()` se ejecuta al importar el módulo.
- El motor de modificaciones NO lee configuración: es puro. Solo la capa
  de persistencia y la API HTTP dependen de estos valores.
"""

# Cargar variables de entorno desde .env (si existe)
load_dotenv()


@dataclass
class Settings:
    """
    Contenedor tipado de configuración global de la aplicación.

    Attributes
    ----------
    database_url:
        URL SQLAlchemy de la base donde viven recetas y modificaciones.
    environment:
        Ambiente de ejecución ("local", "staging", "production").
    log_level:
        Nivel de logging para `logging.basicConfig`.
    cors_origins:
        Orígenes permitidos por el middleware CORS de la API.
    default_page_size / max_page_size:
        Límites de paginación para el listado de modificaciones.
    dev_user_id:
        Usuario que se asume en ambiente local cuando no llega header
        Authorization. Vacío = autenticación obligatoria siempre.
    """

    database_url: str
    environment: str = "local"
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=list)

    # Paginación
    default_page_size: int = 20
    max_page_size: int = 100

    # Desarrollo
    dev_user_id: str = ""


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Devuelve una instancia única y cacheada de `Settings`.

    Variables de entorno utilizadas
    -------------------------------
    - DATABASE_URL (default: "sqlite:///data/recipe_ai_core.sqlite")
    - ENVIRONMENT (default: "local")
    - LOG_LEVEL (default: "INFO")
    - CORS_ORIGINS (default: "http://localhost:3000,http://localhost:4321")
    - DEFAULT_PAGE_SIZE (default: 20)
    - MAX_PAGE_SIZE (default: 100)
    - DEV_USER_ID (default: "")

    Notas
    -----
    En tests conviene llamar `get_settings.cache_clear()` después de tocar
    el entorno.
    """
    return Settings(
        database_url=os.getenv(
            "DATABASE_URL",
            "sqlite:///data/recipe_ai_core.sqlite",
        ),
        environment=os.getenv("ENVIRONMENT", "local"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=_split_csv(
            os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:4321")
        ),
        default_page_size=int(os.getenv("DEFAULT_PAGE_SIZE", "20")),
        max_page_size=int(os.getenv("MAX_PAGE_SIZE", "100")),
        dev_user_id=os.getenv("DEV_USER_ID", ""),
    )
