"""
Modelos ORM de recetas y modificaciones.

Las columnas JSON se guardan como texto (`*_json`) para funcionar igual en
SQLite y PostgreSQL; los helpers de `helpers.py` las convierten a modelos
de dominio.
"""

from __future__ import annotations

import uuid
from datetime import datetime, UTC

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..domains.modifications.models import ModificationType
from .database import Base


def _uuid() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Recipe(Base):
    """
    Receta del catálogo.

    El motor solo la lee (vía `get_recipe_snapshot`); el CRUD de recetas
    vive fuera de este paquete.
    """
    __tablename__ = "recipes"

    # Identidad
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    user_id: Mapped[str] = mapped_column(String(36), index=True)

    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text, default="")

    # [{"name": "...", "amount": 100, "unit": "g"}]
    ingredients_json: Mapped[str] = mapped_column(Text, default="[]")
    # [{"stepNumber": 1, "instruction": "..."}]
    steps_json: Mapped[str] = mapped_column(Text, default="[]")
    servings: Mapped[int] = mapped_column(Integer)
    # {"calories": 450, "protein": 25, "fat": 15, "carbs": 50, "fiber": 8, "salt": 2}
    nutrition_json: Mapped[str] = mapped_column(Text)

    prep_time_minutes: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_public: Mapped[bool] = mapped_column(Boolean, default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow
    )

    # Relaciones
    modifications: Mapped[list["RecipeModification"]] = relationship(
        back_populates="original_recipe",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint("servings > 0", name="ck_recipes_servings_positive"),
    )


class RecipeModification(Base):
    """
    Modificación calculada de una receta.

    Se crea una vez por pedido aceptado, nunca se actualiza y solo la borra
    su dueño. La receta original no se toca.
    """
    __tablename__ = "recipe_modifications"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    original_recipe_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("recipes.id", ondelete="CASCADE"), index=True
    )
    user_id: Mapped[str] = mapped_column(String(36), index=True)
    modification_type: Mapped[str] = mapped_column(String(50))

    # ModificationResult.to_dict() serializado
    modified_data_json: Mapped[str] = mapped_column(Text)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, index=True
    )

    # Relaciones
    original_recipe: Mapped["Recipe"] = relationship(back_populates="modifications")

    __table_args__ = (
        CheckConstraint(
            "modification_type IN ("
            + ", ".join(f"'{t.value}'" for t in ModificationType)
            + ")",
            name="ck_recipe_modifications_type",
        ),
    )
