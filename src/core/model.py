"""Modelos de datos base de la calculadora de molaridad.

Este módulo concentra las estructuras que representan las cinco magnitudes
de la calculadora y el estado de sus campos. La GUI lee y escribe estas
clases; el motor (`chemcalc`) solo trabaja con valores canónicos.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, Iterator, Optional, Tuple

if TYPE_CHECKING:
    from chemcalc.resolver import DerivationOutcome
    from chemcalc.units import UnitRegistry


class Quantity(str, Enum):
    """Magnitudes relacionadas por n = m / MM y n = V * c."""
    MASS = "mass"
    MOLAR_MASS = "molar_mass"
    MOLES = "moles"
    VOLUME = "volume"
    MOLARITY = "molarity"

    @property
    def label(self) -> str:
        return QUANTITY_LABELS[self]


QUANTITY_LABELS = {
    Quantity.MASS: "Masa",
    Quantity.MOLAR_MASS: "Masa molar",
    Quantity.MOLES: "Moles",
    Quantity.VOLUME: "Volumen",
    Quantity.MOLARITY: "Molaridad",
}


class Classification(str, Enum):
    """Estado de cada campo tras una derivación."""
    REQUIRED = "required"
    USED = "used"
    RESULT = "result"
    NEUTRAL = "neutral"


@dataclass
class FieldState:
    """Valor introducido por el usuario y unidad seleccionada de un campo."""
    unit: str
    raw_value: Optional[float] = None


class FieldSet:
    """Registro fijo de los cinco campos de la calculadora.

    Se crea con todos los valores vacíos y la unidad por defecto (canónica)
    de cada magnitud. Vive toda la sesión; "Limpiar" solo lo reinicia.
    """

    def __init__(self, registry: "UnitRegistry") -> None:
        """Inicializa los campos vacíos con la unidad por defecto."""
        self.registry = registry
        self._fields: Dict[Quantity, FieldState] = {
            quantity: FieldState(unit=registry.default_unit(quantity))
            for quantity in Quantity
        }

    def __getitem__(self, quantity: Quantity) -> FieldState:
        return self._fields[quantity]

    def __iter__(self) -> Iterator[Tuple[Quantity, FieldState]]:
        return iter(self._fields.items())

    def set_raw(self, quantity: Quantity, text) -> Optional[float]:
        """Guarda el valor tecleado por el usuario.

        Args:
            quantity: Campo que se edita.
            text: Texto o número introducido; vacío o no numérico se
                interpreta como ausente.

        Returns:
            El valor almacenado (o None si quedó vacío).
        """
        from chemcalc.units import parse_raw

        value = parse_raw(text)
        self._fields[quantity].raw_value = value
        return value

    def set_unit(self, quantity: Quantity, label: str) -> None:
        """Cambia la unidad de un campo.

        Raises:
            UnknownUnit: Si la unidad no está registrada para la magnitud.
        """
        self.registry.factor(quantity, label)
        self._fields[quantity].unit = label

    def canonical_values(self) -> Dict[Quantity, Optional[float]]:
        """Devuelve el valor canónico (o None) de cada magnitud."""
        return {
            quantity: self.registry.to_canonical(quantity, state.raw_value, state.unit)
            for quantity, state in self._fields.items()
        }

    def apply(self, outcome: "DerivationOutcome") -> None:
        """Escribe en los campos los valores producidos por una derivación.

        Side Effects:
            Modifica `raw_value` de las magnitudes presentes en
            `outcome.values`; un valor None deja el campo vacío.
        """
        for quantity, value in outcome.values.items():
            state = self._fields[quantity]
            if value is None:
                state.raw_value = None
            else:
                state.raw_value = self.registry.from_canonical(quantity, value, state.unit)

    def clear(self) -> None:
        """Vacía todos los valores conservando las unidades elegidas."""
        for state in self._fields.values():
            state.raw_value = None


def neutral_classification() -> Dict[Quantity, Classification]:
    """Clasificación con todas las magnitudes en estado neutro."""
    return {quantity: Classification.NEUTRAL for quantity in Quantity}


def clear_all(
    registry: "UnitRegistry",
) -> Tuple[FieldSet, Dict[Quantity, Classification]]:
    """Devuelve un estado en blanco: campos vacíos y clasificación neutra."""
    return FieldSet(registry), neutral_classification()
