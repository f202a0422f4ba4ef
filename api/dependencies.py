"""
Dependencias de FastAPI para sesión de base de datos y autenticación.

Este módulo proporciona dependencias reutilizables para:
- Obtener una sesión SQLAlchemy por request (commit/rollback automático)
- Obtener el usuario actual desde el token JWT
"""

from typing import Generator, Optional
from fastapi import HTTPException, Header
from sqlalchemy.orm import Session

from recipe_ai_core.config import get_settings
from recipe_ai_core.db import database

import logging
import jwt  # pyjwt

logger = logging.getLogger(__name__)


def get_db() -> Generator[Session, None, None]:
    """
    Dependencia de FastAPI para obtener una sesión de base de datos.
    Usa un generador puro en lugar de un context manager para evitar conflictos.
    """
    database.get_db_engine(echo=False)
    db = database.SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


async def get_current_user_id(
    authorization: Optional[str] = Header(None, alias="Authorization"),
) -> str:
    """
    Obtiene el ID del usuario actual desde el token JWT (claim `sub`).

    En ambiente `local`, si no llega header y `DEV_USER_ID` está configurado,
    se usa ese usuario.

    Args:
        authorization: Header Authorization con formato "Bearer <token>"

    Returns:
        ID del usuario

    Raises:
        HTTPException 401: Si falta el header o el token es inválido
    """
    settings = get_settings()

    if not authorization:
        if settings.environment == "local" and settings.dev_user_id:
            logger.debug("Sin Authorization header, usando DEV_USER_ID")
            return settings.dev_user_id
        logger.warning("Authorization header no presente")
        raise HTTPException(status_code=401, detail="Authentication required")

    if not authorization.startswith("Bearer "):
        logger.warning("Authorization header no tiene formato Bearer")
        raise HTTPException(
            status_code=401,
            detail="Invalid Authorization header format. Expected 'Bearer <token>'",
        )

    token = authorization.replace("Bearer ", "", 1).strip()

    try:
        # La firma la valida el proveedor de identidad; acá solo leemos el sub
        decoded = jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError as e:
        logger.warning(f"No se pudo decodificar el JWT: {e}")
        raise HTTPException(status_code=401, detail="Invalid token") from e

    user_id = decoded.get("sub")
    if not user_id:
        logger.warning(f"Token no contiene 'sub'. Campos: {list(decoded.keys())}")
        raise HTTPException(status_code=401, detail="Invalid token: no user ID found")

    return str(user_id)
