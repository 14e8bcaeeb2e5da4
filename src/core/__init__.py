"""API pública del modelo de la calculadora.

Reexpone las clases base del modelo para facilitar importaciones.
"""

from core.model import (
    Classification,
    FieldSet,
    FieldState,
    Quantity,
    clear_all,
    neutral_classification,
)

__all__ = [
    "Classification",
    "FieldSet",
    "FieldState",
    "Quantity",
    "clear_all",
    "neutral_classification",
]
