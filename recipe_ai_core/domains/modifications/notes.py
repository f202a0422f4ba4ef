"""
Textos explicativos (`modificationNotes`) que acompañan cada modificación.

Los textos están en polaco porque es el idioma del catálogo de recetas que
consume el motor; la UI los muestra tal cual.
"""

from __future__ import annotations

import math

# Placeholders cuando el pedido de sustitución no nombra ingredientes
UNKNOWN_INGREDIENT = "nieznany składnik"
GENERIC_SUBSTITUTE = "alternatywny składnik"


def format_number(value: float) -> str:
    """450.0 -> "450", 12.5 -> "12.5"."""
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return str(value)


def reduce_calories_notes(original: float, target: float) -> str:
    return (
        f"Zmniejszono kalorie z {format_number(original)} do {format_number(target)} kcal na porcję. "
        "Zmodyfikowano proporcje składników i zmniejszono ilości tłuszczów."
    )


def increase_calories_notes(original: float, target: float) -> str:
    return (
        f"Zwiększono kalorie z {format_number(original)} do {format_number(target)} kcal na porcję. "
        "Dodano więcej składników bogatych w zdrowe tłuszcze i węglowodany."
    )


def increase_protein_notes(original: float, target: float) -> str:
    return (
        f"Zwiększono białko z {format_number(original)}g do {format_number(target)}g na porcję. "
        "Dodano składniki bogate w białko, takie jak chude mięso, ryby, jajka lub rośliny strączkowe."
    )


def increase_fiber_notes(original: float, target: float) -> str:
    return (
        f"Zwiększono błonnik z {format_number(original)}g do {format_number(target)}g na porcję. "
        "Dodano składniki bogate w błonnik, takie jak warzywa, owoce, pełne ziarna lub nasiona."
    )


def portion_size_notes(original_servings: int, new_servings: int) -> str:
    return (
        f"Dostosowano przepis z {original_servings} porcji do {new_servings} porcji. "
        "Wartości odżywcze na porcję pozostają bez zmian."
    )


def ingredient_substitution_notes(original_ingredient: str, substitute: str) -> str:
    return (
        f'Zastąpiono składnik "{original_ingredient}" składnikiem "{substitute}". '
        "Zmieniono wartości odżywcze, aby odzwierciedlić profil nowego składnika."
    )
